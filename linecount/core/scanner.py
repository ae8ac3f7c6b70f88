import logging
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from linecount.analyzers.loc.exclusions import remove_ignored
from linecount.utils.filesystem import walk_files

LOGGER_NAME = "linecount.scanner"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

InputPath = Union[str, os.PathLike, Sequence[Union[str, os.PathLike]]]


def find_files(
    root: Path,
    file_types: Sequence[str],
    exclude_dirs: Iterable[str] = (),
) -> List[str]:
    """
    Recursively list files under root, grouped by extension in the order
    given. A file matched by several extensions is kept at its first
    position.
    """
    candidates = list(walk_files(root, exclude_dirs=exclude_dirs))
    seen = set()
    files: List[str] = []

    for ext in file_types:
        for path in candidates:
            if path.name.endswith(ext) and path not in seen:
                seen.add(path)
                files.append(str(path))

    return files


def collect_files(
    input_path: InputPath,
    file_types: Sequence[str],
    ignore_files: Iterable[str] = (),
    exclude_dirs: Iterable[str] = (),
) -> List[str]:
    if isinstance(input_path, (str, os.PathLike)):
        root = Path(input_path)
        if root.is_dir():
            files = find_files(root, file_types, exclude_dirs)
        else:
            files = [os.fspath(input_path)]
    else:
        files = [os.fspath(p) for p in input_path]

    kept = remove_ignored(files, ignore_files)
    logger.info(
        "Collected %d files (%d ignored)", len(kept), len(files) - len(kept)
    )
    return kept
