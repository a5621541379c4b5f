"""
Write generated source files below the resolved generated-files directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ..filer import GeneratedDirectoryError, GeneratedDirectoryResolver
from ..util import write_text_atomic

logger = logging.getLogger(__name__)

GENERATION_COMMENT = "Generated code from genfiler. Do not modify!"


@dataclass(frozen=True)
class GeneratedFile:
    """
    A generated source file waiting to be written.

    Attributes:
        package: Dotted package name; each segment becomes a directory.
        name: File name inside the package directory.
        content: Source text.
        header: Comment written as the first line; empty to skip it.
    """
    package: str
    name: str
    content: str
    header: str = GENERATION_COMMENT

    def render(self) -> str:
        body = self.content if self.content.endswith("\n") or not self.content else f"{self.content}\n"
        if not self.header:
            return body
        return f"# {self.header}\n{body}"


def package_path(package: str) -> Path:
    """
    Map a dotted package name to a relative directory.

    Raises:
        ValueError: If any segment is not a valid identifier.
    """
    if not package:
        return Path()
    segments = package.split(".")
    for segment in segments:
        if not segment.isidentifier():
            raise ValueError(f"Invalid package name '{package}': segment '{segment}' is not an identifier.")
    return Path(*segments)


def _validate_file_name(name: str) -> None:
    pure = PurePosixPath(name)
    if not name or name in {".", ".."} or len(pure.parts) != 1 or "\\" in name:
        raise ValueError(f"Invalid generated file name '{name}'.")


def write_generated_file(resolver: GeneratedDirectoryResolver, generated: GeneratedFile) -> Path:
    """
    Write a generated file into its package directory under the resolved root.

    Raises:
        GeneratedDirectoryError: If the resolver has no target directory or it is blank.
        ValueError: If the package or file name is invalid.
    """
    root = resolver.directory_handle()
    if not resolver.generated_dir.strip():
        raise GeneratedDirectoryError("Generated files directory is blank; refusing to write into the working directory.")
    _validate_file_name(generated.name)
    target = root / package_path(generated.package) / generated.name
    written = write_text_atomic(target, generated.render())
    logger.info("Generated %s", written)
    return written
