"""Typed runtime settings with dotenv support and startup validation."""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for proof fabrication, export and document display.

    Environment variable names map directly to field names in uppercase.
    Example: `display_timezone` reads from `DISPLAY_TIMEZONE`.

    Attributes:
        environment_name: Runtime environment label.
        log_level: Standard logging level name for the entrypoint.
        display_timezone: IANA timezone for locale-formatted document lines.
        proof_generation_delay_seconds: Simulated lookup delay before a proof is fabricated.
        proof_placeholder_amount: Placeholder amount for fabricated proofs.
        proof_placeholder_currency: Placeholder currency ticker for fabricated proofs.
        proof_placeholder_sender: Placeholder sender address.
        proof_placeholder_recipient: Placeholder recipient address.
        proof_placeholder_anchor: Placeholder settlement anchor.
        proof_placeholder_record_hash: Placeholder record hash.
        proof_placeholder_status: Placeholder verification status.
        share_base_url: Base URL used for shareable proof links.
        explorer_tx_base_url: Block explorer transaction URL prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    log_level: str = Field(default="INFO")
    display_timezone: str = Field(default="UTC")
    proof_generation_delay_seconds: float = Field(default=2.0, ge=0)
    proof_placeholder_amount: str = Field(default="100.00")
    proof_placeholder_currency: str = Field(default="USDT0")
    proof_placeholder_sender: str = Field(default="0x742d35Cc6634C0532925a3b844Bc454e4438f44e")
    proof_placeholder_recipient: str = Field(default="0x742d35Cc6634C0532925a3b844Bc454e4438f44f")
    proof_placeholder_anchor: str = Field(default="block-12345")
    proof_placeholder_record_hash: str = Field(default="0xdef123...")
    proof_placeholder_status: str = Field(default="verified")
    share_base_url: str = Field(default="https://chainproof.app")
    explorer_tx_base_url: str = Field(default="https://coston2-explorer.flare.network/tx/")

    @field_validator(
        "proof_placeholder_amount",
        "proof_placeholder_currency",
        "proof_placeholder_sender",
        "proof_placeholder_recipient",
        "proof_placeholder_anchor",
        "proof_placeholder_record_hash",
        "proof_placeholder_status",
        "share_base_url",
        "explorer_tx_base_url",
    )
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return normalized_value

    @field_validator("display_timezone")
    @classmethod
    def _validate_display_timezone(cls, value: str) -> str:
        stripped_value = value.strip()
        try:
            ZoneInfo(stripped_value)
        except (ZoneInfoNotFoundError, ValueError) as error:
            raise ValueError(f"unknown timezone: {value!r}") from error
        return stripped_value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
