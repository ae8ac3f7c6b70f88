"""
Run Configuration

Holds the options of a counting run, validates them before any file is
touched, and loads them from TOML files.
"""

from __future__ import annotations

import os
import codecs
import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from linecount.core.errors import ValidationError
from linecount.analyzers.loc.report import REPORT_NAME

LOGGER_NAME = "linecount.config"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

DEFAULT_FILE_TYPES: Tuple[str, ...] = (".m",)
TOOL_TABLE = "linecount"


# =============================================================================
# Configuration model
# =============================================================================

@dataclass
class CountConfiguration:
    file_types: Tuple[str, ...] = DEFAULT_FILE_TYPES
    ignore_files: Tuple[str, ...] = ()
    save_dir: Optional[str] = None
    output_name: str = REPORT_NAME
    encoding: str = "utf-8"
    exclude_dirs: Tuple[str, ...] = ()
    write_json: bool = False

    @property
    def resolved_save_dir(self) -> Path:
        return Path(self.save_dir) if self.save_dir is not None else Path.cwd()

    def validate(self) -> List[Tuple[str, str]]:
        """
        Return (code, message) pairs for every invalid option.
        """
        errors: List[Tuple[str, str]] = []

        if not _is_sequence_of_text(self.file_types) or not all(
            str(e).startswith(".") for e in self.file_types
        ):
            errors.append((
                "InvalidFileTypes",
                "file_types must be a list of extensions, e.g. ['.m', '.cpp']",
            ))

        if not _is_sequence_of_text(self.ignore_files):
            errors.append((
                "InvalidIgnoreFiles",
                "ignore_files must be a list of file names",
            ))

        if not _is_sequence_of_text(self.exclude_dirs):
            errors.append((
                "InvalidConfiguration",
                "exclude_dirs must be a list of directory names",
            ))

        if self.save_dir is not None and not isinstance(self.save_dir, (str, os.PathLike)):
            errors.append(("InvalidSaveDir", "save_dir must be a path"))
        elif not self.resolved_save_dir.is_dir():
            errors.append(("InvalidSaveDir", "save_dir must be an existing folder"))

        if not isinstance(self.output_name, str) or not self.output_name:
            errors.append(("InvalidConfiguration", "output_name must be a file name"))

        if not isinstance(self.encoding, str):
            errors.append(("InvalidConfiguration", "encoding must be a string"))
        elif not _is_known_codec(self.encoding):
            errors.append((
                "InvalidConfiguration",
                f"unknown encoding: {self.encoding}",
            ))

        if not isinstance(self.write_json, bool):
            errors.append(("InvalidConfiguration", "write_json must be boolean"))

        return errors

    def ensure_valid(self) -> None:
        errors = self.validate()
        if errors:
            for code, message in errors:
                logger.error("%s: %s", code, message)
            code, message = errors[0]
            raise ValidationError(code, message)

    def merged(self, **overrides: Any) -> "CountConfiguration":
        """
        Copy with every override that is not None applied.
        """
        return replace(
            self,
            **{k: v for k, v in overrides.items() if v is not None},
        )


def _is_known_codec(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


def _is_sequence_of_text(value: Any) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, str) for item in value)


# =============================================================================
# Input path validation
# =============================================================================

def validate_input_path(input_path: Any) -> None:
    """
    Accept a folder or file path, or a list of file paths.

    Raises:
        ValidationError for any other type or shape
    """
    if isinstance(input_path, (str, os.PathLike)):
        return

    if isinstance(input_path, (list, tuple)) and all(
        isinstance(item, (str, os.PathLike)) for item in input_path
    ):
        return

    raise ValidationError(
        "InvalidInput",
        "input_path must be a folder path or a list of files",
    )


# =============================================================================
# TOML loading
# =============================================================================

_SEQUENCE_KEYS = {"file_types", "ignore_files", "exclude_dirs"}


def configuration_from_mapping(data: Dict[str, Any]) -> CountConfiguration:
    known = {f.name for f in fields(CountConfiguration)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValidationError(
            "InvalidConfiguration",
            f"Unknown configuration keys: {', '.join(unknown)}",
        )

    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _SEQUENCE_KEYS and isinstance(value, list):
            value = tuple(value)
        values[key] = value

    return CountConfiguration(**values)


def load_configuration(path: Path) -> CountConfiguration:
    """
    Load options from a TOML file.

    A ``[tool.linecount]`` table is used when present (so a project's
    ``pyproject.toml`` works), otherwise the top-level keys.
    """
    path = Path(path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ValidationError(
            "InvalidConfiguration",
            f"Cannot load configuration {path}: {exc}",
        ) from exc

    table = data.get("tool", {}).get(TOOL_TABLE)
    if table is None:
        table = {k: v for k, v in data.items() if k != "tool"}

    logger.info("Loaded configuration from %s", path)
    return configuration_from_mapping(table)
