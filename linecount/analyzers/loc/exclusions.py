import os
from typing import Iterable, List, Sequence


def base_name(path) -> str:
    return os.path.basename(os.fspath(path))


def is_ignored(path, ignore_files: Iterable[str] = ()) -> bool:
    """Match on base name plus extension, never on directories."""
    return base_name(path) in set(ignore_files)


def remove_ignored(files: Sequence, ignore_files: Iterable[str] = ()) -> List:
    rules = set(ignore_files)
    if not rules:
        return list(files)
    return [f for f in files if base_name(f) not in rules]
