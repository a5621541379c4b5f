"""
Configuration helpers: processor options, the processing environment, and settings.
"""

from .options import (
    GENERATED_DIR_OPTION,
    SUPPORTED_OPTIONS,
    ConfigError,
    load_options,
    parse_option_pairs,
    validate_options,
)
from .environment import ProcessingEnvironment, build_environment, unrecognized_options
from .settings import Settings, get_settings

__all__ = [
    "GENERATED_DIR_OPTION",
    "SUPPORTED_OPTIONS",
    "ConfigError",
    "load_options",
    "parse_option_pairs",
    "validate_options",
    "ProcessingEnvironment",
    "build_environment",
    "unrecognized_options",
    "Settings",
    "get_settings",
]
