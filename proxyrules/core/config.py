"""Library configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
(prefixed with ``PROXYRULES_``) and provides type-safe access to
the segmenter, loader and logging options.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROXYRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document segmenter
    unknown_language: str = Field(
        default="__UNKNOWN__",
        description="Language tag recorded for code fences without a tag.",
    )

    # Rule loader
    rule_languages: list[str] = Field(
        default_factory=lambda: ["proxy", "proxyrules", "rules"],
        description="Code fence languages that hold proxy rule lines.",
    )
    comment_prefix: str = Field(
        default="#",
        description="Rule block lines starting with this prefix are ignored.",
    )
    skip_invalid_rules: bool = Field(
        default=False,
        description="Log and skip failing rule lines instead of raising.",
    )

    # Strategy Selection
    segmenter_type: str = Field(
        default="fenced",
        description="Segmenter strategy to use: 'fenced'.",
    )
    loader_type: str = Field(
        default="markdown",
        description="Rule loader strategy to use: 'markdown'.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_json: bool = Field(
        default=False,
        description="Render structlog events as JSON instead of console text.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log files.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("comment_prefix")
    @classmethod
    def require_comment_prefix(cls, v: str) -> str:
        """Reject an empty prefix, which would comment out every line."""
        if not v:
            raise ValueError("comment_prefix must not be empty")
        return v

    def configure_logging(self) -> None:
        """Configure structlog and the stdlib root level from settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)
        renderer = (
            structlog.processors.JSONRenderer()
            if self.log_json
            else structlog.dev.ConsoleRenderer(colors=False)
        )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                renderer,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access re-reads the environment."""
    global _settings
    _settings = None
