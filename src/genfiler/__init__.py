"""
Resolve and write into the target directory for generated source files.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("genfiler")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from .filer import GENERATED_DIR_OPTION, GeneratedDirectoryError, GeneratedDirectoryResolver

__all__ = ["__version__", "GENERATED_DIR_OPTION", "GeneratedDirectoryError", "GeneratedDirectoryResolver"]
