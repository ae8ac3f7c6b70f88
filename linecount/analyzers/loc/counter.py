import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from linecount.core.errors import FileReadError
from linecount.utils.filesystem import safe_read_text
from .classifier import LineKind, ScanState, classify_line
from .models import FileRecord, LineCounts, ScanResult

LOGGER_NAME = "linecount.counter"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

PathLike = Union[str, os.PathLike]


def split_lines(text: str) -> List[str]:
    # only \n ends a line; form feeds and unicode separators stay in it
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def count_text(text: str) -> LineCounts:
    """
    Count code, comment and blank lines in one file's text.

    A mixed line adds to both the code and the comment counter, so the
    three categories may sum to more than ``total``.
    """
    code = comments = blank = total = 0
    state = ScanState.NORMAL

    for line in split_lines(text):
        total += 1
        kind, state = classify_line(line, state)
        if kind is LineKind.BLANK:
            blank += 1
        elif kind is LineKind.COMMENT:
            comments += 1
        elif kind is LineKind.MIXED:
            code += 1
            comments += 1
        else:
            code += 1

    return LineCounts(code=code, comments=comments, blank=blank, total=total)


def parse_file(path: PathLike, *, encoding: str = "utf-8") -> FileRecord:
    """
    Classify every line of a file.

    Missing or unreadable files are logged and reported with zero counts
    so a batch is never aborted by a single file.
    """
    name = os.fspath(path)
    file_path = Path(name)

    if not file_path.is_file():
        logger.warning('File "%s" not found. Counts set to zero.', name)
        return FileRecord.empty(name)

    try:
        text = safe_read_text(file_path, encoding=encoding)
    except FileReadError as exc:
        logger.warning(
            'Unable to open file "%s". Counts set to zero. (%s)', name, exc
        )
        return FileRecord.empty(name)

    counts = count_text(text)
    logger.debug("%s: %s", name, counts)
    return FileRecord(path=name, **counts._asdict())


def count_files(
    paths: Iterable[PathLike],
    *,
    encoding: str = "utf-8",
) -> ScanResult:
    result = ScanResult()
    for path in paths:
        result.files.append(parse_file(path, encoding=encoding))
    return result
