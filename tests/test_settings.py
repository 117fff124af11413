"""Tests for RandomOrgSettings source precedence and validation."""

import pytest
from pydantic import ValidationError

from randomorg.config import PROJECT_ROOT, RandomOrgSettings


def test_defaults_match_random_org_guidelines():
    settings = RandomOrgSettings()
    assert settings.base_url == "https://www.random.org"
    assert settings.timeout_seconds == 180.0
    assert settings.initial_batch_size == 32
    assert settings.batch_growth_factor == 1.5
    assert settings.max_batch_size == 10_000
    assert settings.respect_quota is False


def test_yaml_file_lives_under_project_root():
    assert RandomOrgSettings.model_config["yaml_file"] == str(
        PROJECT_ROOT / "config" / "randomorg.yaml"
    )


def test_environment_overrides_yaml(monkeypatch):
    monkeypatch.setenv("RANDOMORG_MAX_RETRIES", "7")
    monkeypatch.setenv("RANDOMORG_RESPECT_QUOTA", "true")
    settings = RandomOrgSettings()
    assert settings.max_retries == 7
    assert settings.respect_quota is True


def test_init_kwargs_override_environment(monkeypatch):
    monkeypatch.setenv("RANDOMORG_BASE_URL", "https://env.example")
    assert RandomOrgSettings(base_url="https://init.example").base_url == "https://init.example"


def test_full_user_agent():
    assert RandomOrgSettings().full_user_agent == RandomOrgSettings().user_agent
    settings = RandomOrgSettings(contact_email="me@example.com")
    assert settings.full_user_agent.endswith("; me@example.com")


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_batch_size": 10_001},
        {"max_batch_size": 0},
        {"batch_growth_factor": 0.5},
        {"max_retries": 0},
        {"delay_min_seconds": 3, "delay_max_seconds": 1},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        RandomOrgSettings(**overrides)


def test_relative_log_dir_resolves_under_project_root(monkeypatch):
    monkeypatch.delenv("RANDOMORG_LOG_DIR")
    assert RandomOrgSettings().log_dir == str(PROJECT_ROOT / "logs")
    assert RandomOrgSettings(log_dir="var/log").log_dir == str(PROJECT_ROOT / "var" / "log")


def test_absolute_log_dir_kept(tmp_path):
    assert RandomOrgSettings(log_dir=str(tmp_path)).log_dir == str(tmp_path)
