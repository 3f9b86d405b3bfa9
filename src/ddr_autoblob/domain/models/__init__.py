"""Domain models."""

from .autoblob_config import (
    Configuration,
    ConfigurationError,
    IncludeConfiguration,
    load_configuration,
)

__all__ = [
    "Configuration",
    "ConfigurationError",
    "IncludeConfiguration",
    "load_configuration",
]
