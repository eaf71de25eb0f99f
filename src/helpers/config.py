"""Configuration management and environment variable utilities."""

import os
import re

from typing import Self

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.helpers.constants import (
    ADDRESSES_OUTPUT,
    BEACON_NODE_URL,
    BEACONCHAIN_URL,
    FROM_SLOT,
    GRAFFITI_PATTERN,
    INDEXES_OUTPUT,
    RECORD_FILE,
    TO_SLOT,
)


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_optional_int_env(key: str, default: int) -> int:
    """Get an optional integer environment variable.

    Args:
        key: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        Parsed integer value or default

    Raises:
        ValueError: If the variable is set but is not an integer
    """
    value = os.getenv(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        msg = f"{key} must be an integer, got {value!r}"
        raise ValueError(msg) from None


class ScanConfig(BaseModel):
    """Scan window, graffiti filter, file locations and API endpoints."""

    from_slot: int = Field(default=FROM_SLOT, ge=0)
    to_slot: int = Field(default=TO_SLOT, ge=0)
    graffiti_pattern: str = GRAFFITI_PATTERN
    record_file: str = RECORD_FILE
    indexes_output: str = INDEXES_OUTPUT
    addresses_output: str = ADDRESSES_OUTPUT
    beacon_node_url: str = BEACON_NODE_URL
    beaconchain_url: str = BEACONCHAIN_URL
    beaconchain_api_key: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("graffiti_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            msg = f"Invalid graffiti pattern {value!r}: {e}"
            raise ValueError(msg) from e
        return value

    @field_validator("beacon_node_url", "beaconchain_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _check_window(self) -> Self:
        if self.from_slot > self.to_slot:
            msg = f"from_slot ({self.from_slot}) is after to_slot ({self.to_slot})"
            raise ValueError(msg)
        return self

    @property
    def graffiti_regex(self) -> re.Pattern[str]:
        """Compiled case-insensitive graffiti matcher."""
        return re.compile(self.graffiti_pattern, re.IGNORECASE)


def load_scan_config() -> ScanConfig:
    """Build the scan configuration from constants and environment overrides.

    Returns:
        ScanConfig with FROM_SLOT, TO_SLOT, GRAFFITI_PATTERN, RECORD_FILE,
        INDEXES_OUTPUT, ADDRESSES_OUTPUT, BEACON_NODE_URL, BEACONCHAIN_URL and
        BEACONCHAIN_API_KEY applied on top of the compiled-in defaults

    Raises:
        ValueError: If an override is malformed or the window is inverted
    """
    return ScanConfig(
        from_slot=get_optional_int_env("FROM_SLOT", FROM_SLOT),
        to_slot=get_optional_int_env("TO_SLOT", TO_SLOT),
        graffiti_pattern=get_optional_env("GRAFFITI_PATTERN") or GRAFFITI_PATTERN,
        record_file=get_optional_env("RECORD_FILE") or RECORD_FILE,
        indexes_output=get_optional_env("INDEXES_OUTPUT") or INDEXES_OUTPUT,
        addresses_output=get_optional_env("ADDRESSES_OUTPUT") or ADDRESSES_OUTPUT,
        beacon_node_url=get_optional_env("BEACON_NODE_URL") or BEACON_NODE_URL,
        beaconchain_url=get_optional_env("BEACONCHAIN_URL") or BEACONCHAIN_URL,
        beaconchain_api_key=get_optional_env("BEACONCHAIN_API_KEY") or None,
    )


__all__ = [
    "ScanConfig",
    "get_optional_env",
    "get_optional_int_env",
    "load_scan_config",
]
