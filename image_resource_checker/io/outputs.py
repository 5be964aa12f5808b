"""Output helpers for exporting the report of a single run."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Sequence

import pandas as pd

from .models import RunResult, ScanOptions, UsageReportEntry

USAGE_COLUMNS = ["asset_name", "identifier", "occurrences", "verdict"]


def usage_frame(entries: Sequence[UsageReportEntry]) -> pd.DataFrame:
    """Return *entries* as a DataFrame with one row per asset."""
    rows = [{**asdict(entry), "verdict": entry.verdict.value} for entry in entries]
    return pd.DataFrame(rows, columns=USAGE_COLUMNS)


def write_usage_table(path: Path, entries: Sequence[UsageReportEntry]) -> Path:
    """Write *entries* to *path* as CSV and return the path."""
    usage_frame(entries).to_csv(path, index=False)
    return path


def write_summary(path: Path, result: RunResult, options: ScanOptions) -> Path:
    """Write run totals and settings to *path* as JSON and return the path."""
    unused = result.unused
    payload: Dict[str, Any] = {
        "total": len(result.entries),
        "unused": len(unused),
        "used": len(result.entries) - len(unused),
        "threshold": int(options.threshold),
        "extensions": list(options.extensions),
        "failure": result.failure.value if result.failure else None,
        "unused_assets": sorted(entry.asset_name for entry in unused),
    }
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def export_run(out_dir: str | Path, result: RunResult, options: ScanOptions) -> list[Path]:
    """Write ``usage.csv`` and ``summary.json`` into *out_dir*."""
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    return [
        write_usage_table(out_path / "usage.csv", result.entries),
        write_summary(out_path / "summary.json", result, options),
    ]
