"""Pydantic settings model for the random.org client.

Settings load from a YAML config file with environment variable override
support. Source priority (highest to lowest):

    1. Init keyword arguments (e.g., RandomOrgSettings(max_retries=1))
    2. Environment variables (with prefix, e.g., RANDOMORG_TIMEOUT_SECONDS)
    3. .env file (e.g., RANDOMORG_CONTACT_EMAIL)
    4. YAML config file (config/randomorg.yaml)
    5. Default values defined here

Config paths are resolved relative to PROJECT_ROOT so the client behaves the
same regardless of the current working directory.
"""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from randomorg.version import __version__

# Resolve project root: settings.py -> config/ -> randomorg/ -> src/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

_CONFIG_DIR = PROJECT_ROOT / "config"
_ENV_FILE = PROJECT_ROOT / ".env"


class RandomOrgSettings(BaseSettings):
    """Remote service, request pacing, buffering and logging."""

    base_url: str = "https://www.random.org"
    user_agent: str = f"randomorg-client/{__version__} (python client)"
    contact_email: str = ""  # appended to the User-Agent when set

    # random.org asks for a long timeout: abandoned requests waste quota
    timeout_seconds: float = 180.0

    # Pacing between consecutive requests
    delay_min_seconds: float = Field(default=0.0, ge=0.0)
    delay_max_seconds: float = Field(default=0.0, ge=0.0)

    # Resilience
    max_retries: int = Field(default=3, ge=1)
    backoff_base: float = 2.0
    backoff_max: float = 30.0

    # Integer buffer
    initial_batch_size: int = Field(default=32, ge=1)
    batch_growth_factor: float = Field(default=1.5, ge=1.0)
    max_batch_size: int = Field(default=10_000, ge=1, le=10_000)

    # Refuse to fetch when the remaining allowance is negative
    respect_quota: bool = False

    # Logging (used by the CLI only); relative paths are under PROJECT_ROOT
    log_dir: str = Field(default="logs", validate_default=True)
    log_max_bytes: int = 10_485_760  # 10MB
    log_backup_count: int = 5

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "randomorg.yaml"),
        env_file=str(_ENV_FILE),
        env_prefix="RANDOMORG_",
        extra="ignore",
    )

    @field_validator("log_dir")
    @classmethod
    def log_dir_under_project_root(cls, v: str) -> str:
        """Anchor a relative log_dir at PROJECT_ROOT, not the working directory."""
        path = Path(v).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return str(path)

    @model_validator(mode="after")
    def delay_bounds_ordered(self) -> "RandomOrgSettings":
        """Validate that delay_min_seconds does not exceed delay_max_seconds."""
        if self.delay_min_seconds > self.delay_max_seconds:
            raise ValueError("delay_min_seconds must not exceed delay_max_seconds")
        return self

    @property
    def full_user_agent(self) -> str:
        """User-Agent header value, including the contact address if set."""
        if self.contact_email:
            return f"{self.user_agent}; {self.contact_email}"
        return self.user_agent

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )
