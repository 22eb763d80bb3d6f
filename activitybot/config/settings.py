# path: activitybot/config/settings.py
"""
Settings - Application configuration with validation.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from activitybot.config.constants import DEFAULT_WELCOME_TEXT
from activitybot.config.env import get_env, get_env_bool, get_env_list
from activitybot.infra.exceptions import ConfigurationError


@dataclass
class Settings:
    """
    Application settings loaded from environment variables.
    """

    telegram_token: str = ""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    environment: str = "development"

    drop_pending_updates: bool = True
    allowed_updates: List[str] = field(default_factory=list)

    welcome_text: str = DEFAULT_WELCOME_TEXT

    def __post_init__(self):
        """Validate settings after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate required settings."""
        errors = []
        missing = []

        if not self.telegram_token:
            errors.append("TELEGRAM_TOKEN is required")
            missing.append("TELEGRAM_TOKEN")

        if self.log_level.upper() not in (
            "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
        ):
            errors.append(f"LOG_LEVEL is invalid: {self.log_level}")

        if errors and self.environment != "test":
            raise ConfigurationError(
                "Configuration errors:\n" + "\n".join(f"- {e}" for e in errors),
                missing_keys=missing
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            telegram_token=get_env("TELEGRAM_TOKEN", ""),
            log_level=get_env("LOG_LEVEL", "INFO"),
            log_file=get_env("LOG_FILE"),
            environment=get_env("ENVIRONMENT", "development"),
            drop_pending_updates=get_env_bool("DROP_PENDING_UPDATES", True),
            allowed_updates=get_env_list("ALLOWED_UPDATES"),
            welcome_text=get_env("WELCOME_TEXT", DEFAULT_WELCOME_TEXT)
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global _settings
    _settings = Settings.from_env()
    return _settings
