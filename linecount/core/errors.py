"""
Exceptions raised by the line counter.
"""

from __future__ import annotations


class LineCountError(Exception):
    """
    Base exception for line counting errors.
    """


class ValidationError(LineCountError, ValueError):
    """
    Raised when arguments are rejected before any scanning starts.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"{self.code}: {self.args[0]}"


class FileReadError(LineCountError):
    """
    Raised when a file cannot be read safely.
    """


class ReportWriteError(LineCountError):
    """
    Raised when the report file cannot be written.
    """
