"""
Filesystem Utilities

Directory walking and guarded text reading shared by the file collector
and the line counter.
"""

from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set

from linecount.core.errors import FileReadError

LOGGER_NAME = "linecount.fs"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)


# =============================================================================
# Directory walking
# =============================================================================

def should_exclude_directory(
    dir_name: str,
    excludes: Optional[Set[str]] = None,
) -> bool:
    """
    Determine whether a directory should be pruned during traversal.
    """
    return bool(excludes) and dir_name in excludes


def walk_files(
    root: Path,
    *,
    exclude_dirs: Optional[Iterable[str]] = None,
) -> Iterator[Path]:
    """
    Recursively walk a directory tree, yielding every file path.

    Args:
        root: Root directory to walk
        exclude_dirs: Directory names to prune (none by default)

    Yields:
        Path objects for files
    """
    excludes = set(exclude_dirs or ())

    for current_root, dirs, files in os.walk(root):
        root_path = Path(current_root)

        # Modify dirs in-place to control recursion
        dirs[:] = sorted(
            d for d in dirs
            if not should_exclude_directory(d, excludes)
        )

        for f in sorted(files):
            yield root_path / f


# =============================================================================
# Reading
# =============================================================================

def is_binary_file(path: Path, sample_size: int = 1024) -> bool:
    """
    Heuristically determine whether a file is binary.

    This reads a small sample of the file and looks for null bytes.
    """
    try:
        with path.open("rb") as handle:
            chunk = handle.read(sample_size)
            return b"\x00" in chunk
    except OSError:
        return False


def safe_read_text(
    path: Path,
    *,
    encoding: str = "utf-8",
    errors: str = "ignore",
) -> str:
    """
    Read a text file, returning an empty string for binary content.

    Raises:
        FileReadError if the file cannot be opened or decoded
    """
    if not path.is_file():
        raise FileReadError(f"Path is not a file: {path}")

    if is_binary_file(path):
        logger.debug("Skipping binary content in %s", path)
        return ""

    try:
        with path.open("r", encoding=encoding, errors=errors) as handle:
            return handle.read()
    except (OSError, LookupError) as exc:
        raise FileReadError(f"Failed to read file {path}: {exc}") from exc
