"""Logging package -- JSON file + console handlers for the CLI."""

from .setup import LOG_FILENAME, setup_logging

__all__ = ["LOG_FILENAME", "setup_logging"]
