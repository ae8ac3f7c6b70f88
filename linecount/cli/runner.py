import json
from typing import Iterable, Optional

from linecount.analyzers.loc.counter import count_files
from linecount.analyzers.loc.models import ScanResult
from linecount.analyzers.loc.report import (
    build_report,
    render_text,
    write_json_report,
    write_report,
)
from linecount.core.config import (
    CountConfiguration,
    validate_input_path,
)
from linecount.core.scanner import InputPath, collect_files


def count_lines(
    input_path: InputPath,
    file_types: Optional[Iterable[str]] = None,
    ignore_files: Optional[Iterable[str]] = None,
    save_dir=None,
    *,
    config: Optional[CountConfiguration] = None,
) -> ScanResult:
    """
    Count code, comment and blank lines and write the report to save_dir.

    Arguments left as None fall back to ``config``, then to the defaults
    (``.m`` files, nothing ignored, the current directory).
    """
    validate_input_path(input_path)

    config = (config or CountConfiguration()).merged(
        file_types=_as_tuple(file_types),
        ignore_files=_as_tuple(ignore_files),
        save_dir=save_dir,
    )
    config.ensure_valid()

    files = collect_files(
        input_path,
        config.file_types,
        config.ignore_files,
        config.exclude_dirs,
    )
    result = count_files(files, encoding=config.encoding)

    save_to = config.resolved_save_dir
    write_report(result, save_to, config.output_name)
    if config.write_json:
        write_json_report(result, save_to, config.output_name)

    return result


def _as_tuple(values):
    # strings and other non-sequences are left for validation to reject
    if isinstance(values, list):
        return tuple(values)
    return values


def render(result: ScanResult, as_json: bool) -> str:
    return json.dumps(build_report(result), indent=2) if as_json else render_text(result)
