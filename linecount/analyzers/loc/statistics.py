from statistics import mean, median
from .models import ScanResult

def compute_statistics(result: ScanResult) -> dict:
    if not result.files:
        return {}

    totals = [f.total for f in result.files]
    codes = [f.code for f in result.files]
    comments = [f.comments for f in result.files]

    return {
        "mean_total_lines": mean(totals),
        "median_total_lines": median(totals),
        "mean_code_lines": mean(codes),
        "median_code_lines": median(codes),
        "comment_ratio": result.comments / result.total if result.total else 0.0,
        "largest_file": max(result.files, key=lambda f: f.total).path,
        "mean_comment_lines": mean(comments),
    }
