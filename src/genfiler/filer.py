"""
Resolve the directory that generated source files are written into.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .config import GENERATED_DIR_OPTION, ConfigError, ProcessingEnvironment
from .diagnostics import Diagnostics, current_diagnostics

logger = logging.getLogger(__name__)

MISSING_DIRECTORY_WARNING = "Can't find the target directory for generated files."
CANNOT_GENERATE_MESSAGE = "Can't generate files."


class GeneratedDirectoryError(ConfigError):
    """Raised when a directory handle is requested but no target directory was configured."""


@dataclass(frozen=True)
class GeneratedDirectoryResolver:
    """
    Holds the generated-files directory read from host options.

    Whether the directory is configured is decided once, at construction.
    A missing option is only a warning until `directory_handle()` is called.
    """

    generated_dir: Optional[str] = None

    @classmethod
    def create(
        cls,
        options: Mapping[str, str],
        diagnostics: Optional[Diagnostics] = None,
    ) -> "GeneratedDirectoryResolver":
        """
        Build a resolver from the host options for the current pass.

        Args:
            options: Host-supplied option mapping; only `GENERATED_DIR_OPTION` is read.
            diagnostics: Channel for the missing-option warning. Defaults to
                the retained diagnostics for the pass.

        Returns:
            A resolver, configured or not. Construction never raises.
        """
        value = options.get(GENERATED_DIR_OPTION)
        if value is None:
            (diagnostics or current_diagnostics()).warning(MISSING_DIRECTORY_WARNING)
        else:
            logger.debug("Generated files directory: %s", value)
        return cls(generated_dir=value)

    @classmethod
    def from_environment(
        cls,
        env: ProcessingEnvironment,
        diagnostics: Optional[Diagnostics] = None,
    ) -> "GeneratedDirectoryResolver":
        return cls.create(env.options, diagnostics)

    @property
    def is_configured(self) -> bool:
        return self.generated_dir is not None

    def directory_handle(self) -> Path:
        """
        Return a Path for the configured directory.

        The directory is neither checked nor created here.

        Raises:
            GeneratedDirectoryError: If no directory was configured.
        """
        if self.generated_dir is None:
            raise GeneratedDirectoryError(CANNOT_GENERATE_MESSAGE)
        return Path(self.generated_dir)
