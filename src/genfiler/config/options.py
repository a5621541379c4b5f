"""
Loading and validation of host-supplied processor options.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable

from pydantic import RootModel, ValidationError

GENERATED_DIR_OPTION = "target.generated.dir"
SUPPORTED_OPTIONS = frozenset({GENERATED_DIR_OPTION})


class ConfigError(RuntimeError):
    """Raised when processor options cannot be loaded, validated, or used."""


class OptionValues(RootModel[Dict[str, str]]):
    """
    Flat mapping of option names to string values.

    Non-string values (numbers, booleans, arrays) are rejected rather than
    coerced, matching what a host toolchain can actually pass through.
    """


def load_options(path: Path | str) -> Dict[str, str]:
    """
    Load a TOML options file into a flat option mapping.

    Args:
        path: Path to the TOML options file.

    Returns:
        Mapping of dotted option names to their string values.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    options_path = Path(path).expanduser().resolve()
    if not options_path.exists():
        raise ConfigError(f"Options file not found: {options_path}")

    try:
        with options_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read options file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in options file: {exc}") from exc

    return validate_options(_flatten_tables(raw_data))


def validate_options(values: Dict[str, Any]) -> Dict[str, str]:
    """Validate an already-flat option mapping, raising ConfigError on bad values."""
    try:
        return OptionValues.model_validate(values).root
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _flatten_tables(data: Dict[str, Any], parent: str = "") -> Dict[str, Any]:
    """
    Collapse nested TOML tables into dotted keys.

    Unquoted dotted keys such as `target.generated.dir = "..."` parse as nested
    tables, while the host hands the option over under its full dotted name.
    """
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        name = f"{parent}.{key}" if parent else key
        entries = _flatten_tables(value, name).items() if isinstance(value, dict) else [(name, value)]
        for option, option_value in entries:
            if option in flat:
                raise ConfigError(f"Option '{option}' is defined more than once.")
            flat[option] = option_value
    return flat


def parse_option_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """
    Parse `key=value` pairs as passed with the host's `-A` flag.

    Later pairs override earlier ones. Values may be empty or contain `=`.
    """
    options: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep:
            raise ConfigError(f"Option '{pair}' must use the form key=value.")
        if not key:
            raise ConfigError(f"Option '{pair}' is missing a name before '='.")
        options[key] = value
    return options
