"""
Generated file output.
"""

from .writer import GENERATION_COMMENT, GeneratedFile, package_path, write_generated_file

__all__ = ["GENERATION_COMMENT", "GeneratedFile", "package_path", "write_generated_file"]
