"""
Utility functions for collecting source files from disk.
"""

from complexityscanner.utils.files import (
    IGNORED_DIRS,
    SOURCE_EXTENSIONS,
    iter_source_files,
    read_source_files,
)

__all__ = [
    "IGNORED_DIRS",
    "SOURCE_EXTENSIONS",
    "iter_source_files",
    "read_source_files",
]
