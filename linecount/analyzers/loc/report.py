import json
import logging
from pathlib import Path
from typing import List, Optional

from linecount.core.errors import ReportWriteError
from .models import ScanResult
from .statistics import compute_statistics

LOGGER_NAME = "linecount.report"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

REPORT_NAME = "lineCount.txt"
HEADER = "File : Code | Comments | Blank | Total"
SEPARATOR = "-" * 54


def render_text(result: ScanResult) -> str:
    lines: List[str] = [HEADER, SEPARATOR]

    for f in result.files:
        lines.append(f"{f.path} : {f.code} | {f.comments} | {f.blank} | {f.total}")

    lines.append("")
    lines.append("Grand Totals:")
    lines.append(f"Code     : {result.code}")
    lines.append(f"Comments : {result.comments}")
    lines.append(f"Blank    : {result.blank}")
    lines.append(f"Total    : {result.total}")

    return "\n".join(lines) + "\n"


def build_report(result: ScanResult, stats: Optional[dict] = None) -> dict:
    report = {
        "summary": result.as_dict(),
        "statistics": stats if stats is not None else compute_statistics(result),
        "files": [],
    }

    for f in result.files:
        report["files"].append(f.as_dict())

    return report


def _write(target: Path, content: str) -> Path:
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Failed to write report {target}: {exc}") from exc
    logger.info("%s created.", target.name)
    return target


def write_report(
    result: ScanResult,
    save_dir: Path,
    output_name: str = REPORT_NAME,
) -> Path:
    return _write(Path(save_dir) / output_name, render_text(result))


def write_json_report(
    result: ScanResult,
    save_dir: Path,
    output_name: str = REPORT_NAME,
) -> Path:
    target = (Path(save_dir) / output_name).with_suffix(".json")
    return _write(target, json.dumps(build_report(result), indent=2))
