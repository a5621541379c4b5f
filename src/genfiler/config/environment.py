"""
Stand-in for the host processing environment that hands options to processors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .options import SUPPORTED_OPTIONS, load_options, parse_option_pairs


@dataclass(frozen=True)
class ProcessingEnvironment:
    """
    Options and message prefix for a single processing pass.

    Attributes:
        options: Read-only view of the host options for this pass.
        prefix: Prefix prepended to every diagnostic emitted during the pass.
    """

    options: Mapping[str, str] = field(default_factory=dict)
    prefix: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


def build_environment(
    pairs: Iterable[str] = (),
    options_file: Optional[Path | str] = None,
    prefix: Optional[str] = None,
) -> ProcessingEnvironment:
    """
    Merge options from an optional TOML file with `-A key=value` pairs.

    Pairs given on the command line override values from the file.
    """
    options = dict(load_options(options_file)) if options_file is not None else {}
    options.update(parse_option_pairs(pairs))
    return ProcessingEnvironment(options=options, prefix=prefix)


def unrecognized_options(env: ProcessingEnvironment) -> List[str]:
    """Return option names that no genfiler component consumes, sorted."""
    return sorted(key for key in env.options if key not in SUPPORTED_OPTIONS)
