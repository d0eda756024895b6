"""Configuration management using Pydantic Settings."""

import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from challenge_tracker.engine import OddsRule

logger = logging.getLogger(__name__)


class ChallengeConfig(BaseModel):
    """Rules applied when challenges and bets are created."""

    min_odds: Decimal = Decimal("1.01")
    odds_rule: OddsRule = OddsRule.CHALLENGE_CEILING
    fixed_odds_cap: Decimal = Decimal("1.30")  # only used with odds_rule=fixed-cap

    @field_validator("min_odds", "fixed_odds_cap", mode="before")
    @classmethod
    def float_as_written(cls, v):
        return str(v) if isinstance(v, float) else v


class HabitsConfig(BaseModel):
    """Defaults for a user's gambling limits."""

    default_daily_limit: Decimal = Decimal("500")
    default_weekly_limit: Decimal = Decimal("3000")
    default_monthly_limit: Decimal = Decimal("10000")
    monthly_limit_cap: Decimal = Decimal("10000")
    default_alert_threshold: int = Field(default=80, ge=0, le=100)


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # Application
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./challenge_tracker.db"
    database_echo: bool = False
    database_auto_create: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    # Logging / observability
    log_level: str = "INFO"
    logfire_token: str = ""

    # Nested configuration sections
    challenge: ChallengeConfig = Field(default_factory=ChallengeConfig)
    habits: HabitsConfig = Field(default_factory=HabitsConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def load_yaml_config(self) -> None:
        """Merge the nested sections of ``data/config.yaml`` over the defaults."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.debug(f"Config file not found: {config_path}. Using defaults.")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["challenge", "habits"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    section_dict = section.model_dump()
                    section_dict.update(yaml_config[section_name])
                    setattr(self, section_name, section.__class__(**section_dict))

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
