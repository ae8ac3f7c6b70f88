from enum import Enum
from typing import Tuple

LINE_COMMENT_PREFIXES = ("%", "//")
BLOCK_START = "/*"
BLOCK_END = "*/"
MATLAB_BLOCK_START = "%{"
MATLAB_BLOCK_END = "%}"


class ScanState(Enum):
    NORMAL = "normal"
    IN_BLOCK_COMMENT = "in_block_comment"


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CODE = "code"
    MIXED = "mixed"


def _block(line: str, end: str) -> Tuple[LineKind, ScanState]:
    if end in line:
        return LineKind.COMMENT, ScanState.NORMAL
    return LineKind.COMMENT, ScanState.IN_BLOCK_COMMENT


def classify_line(line: str, state: ScanState) -> Tuple[LineKind, ScanState]:
    """
    Classify one line and return it with the state for the next line.

    Rules are tried in order and the first match wins. Comment-prefixed
    lines are checked before the carried state, so they never change it.
    Both block styles share IN_BLOCK_COMMENT, which only ``*/`` clears.
    """
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK, state

    if stripped.startswith(LINE_COMMENT_PREFIXES):
        return LineKind.COMMENT, state

    if BLOCK_START in stripped:
        return _block(stripped, BLOCK_END)

    if state is ScanState.IN_BLOCK_COMMENT:
        return _block(stripped, BLOCK_END)

    if MATLAB_BLOCK_START in stripped:
        return _block(stripped, MATLAB_BLOCK_END)

    # trailing % or // after code
    if any(prefix in stripped for prefix in LINE_COMMENT_PREFIXES):
        return LineKind.MIXED, state

    return LineKind.CODE, state
