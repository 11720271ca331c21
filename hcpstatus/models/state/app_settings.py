"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from hcpstatus.constants.defaults import (
    NON_CONDITION_PREFIXES_DEFAULT,
    OCM_BINARY_DEFAULT,
    SHOW_RELATIVE_TIMES_DEFAULT,
)
from hcpstatus.constants.timeouts import OCM_COMMAND_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # OCM CLI
    ocm_binary: str = OCM_BINARY_DEFAULT
    ocm_command_timeout: int = Field(default=OCM_COMMAND_TIMEOUT, ge=1)  # seconds

    # Feedback flattening
    non_condition_prefixes: list[str] = Field(
        default_factory=lambda: list(NON_CONDITION_PREFIXES_DEFAULT)
    )

    # Display
    show_relative_times: bool = SHOW_RELATIVE_TIMES_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
