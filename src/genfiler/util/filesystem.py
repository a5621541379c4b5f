"""
Locked, atomic file writes for generated output.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from filelock import FileLock

logger = logging.getLogger(__name__)


@contextmanager
def file_lock(target: Path) -> Iterator[None]:
    """Hold `<target>.lock` while the block runs, so parallel passes don't interleave writes."""
    lock_path = target.with_name(f"{target.name}.lock")
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with FileLock(str(lock_path)):
        yield


def _replace_atomically(target: Path, content: str, encoding: str) -> None:
    """Stage content in a sibling temp file, then rename it over target."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_atomic(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text under a file lock, creating parent directories as needed.

    Returns the absolute path written.
    """
    target = Path(path).expanduser().absolute()
    with file_lock(target):
        _replace_atomically(target, content, encoding)
    logger.debug("Wrote %d characters to %s", len(content), target)
    return target
