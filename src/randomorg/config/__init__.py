"""Configuration package -- typed, validated settings from YAML + .env."""

from .settings import PROJECT_ROOT, RandomOrgSettings

__all__ = [
    "PROJECT_ROOT",
    "RandomOrgSettings",
]
