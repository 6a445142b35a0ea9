"""Runtime settings with typed configuration and fail-fast validation.

Examples
--------
>>> from xmldoc.settings import load_settings
>>> settings = load_settings(line_ending="\\r\\n")
>>> settings.line_ending
'\\r\\n'
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from xmldoc.errors import SettingsError
from xmldoc.logging import get_logger

__all__ = ["XmlDocSettings", "load_settings"]

logger = get_logger(__name__)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class XmlDocSettings(BaseSettings):
    """Converter configuration (``XMLDOC_*`` environment variables)."""

    model_config = SettingsConfigDict(env_prefix="XMLDOC_", extra="forbid", case_sensitive=False)

    external_annotations_folder: str = Field(
        default=".", description="Directory holding *.ExternalAnnotations.xml files"
    )
    line_ending: str = Field(default="\n", description="Line-ending token for generated text")
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("line_ending")
    @classmethod
    def decode_line_ending(cls, value: str) -> str:
        decoded = value.replace("\\r", "\r").replace("\\n", "\n")
        if not decoded:
            message = "line_ending must not be empty"
            raise ValueError(message)
        return decoded

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            message = f"Unknown log level: {value}"
            raise ValueError(message)
        return level


def load_settings(**overrides: object) -> XmlDocSettings:
    """Load :class:`XmlDocSettings` with optional overrides.

    Raises
    ------
    SettingsError
        If the environment or overrides fail validation.
    """
    try:
        return XmlDocSettings(**overrides)  # type: ignore[arg-type]
    except Exception as exc:
        msg = f"Configuration validation failed: {exc}"
        logger.exception(
            "Settings validation failed",
            extra={"operation": "load_settings", "error_type": type(exc).__name__},
        )
        raise SettingsError(msg, cause=exc, context={"validation_error": str(exc)}) from exc
