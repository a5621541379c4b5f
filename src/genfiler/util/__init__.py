"""
Shared filesystem helpers.
"""

from .filesystem import file_lock, write_text_atomic

__all__ = ["file_lock", "write_text_atomic"]
