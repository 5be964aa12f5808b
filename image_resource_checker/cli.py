"""Command-line interface for the image resource checker."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

from .group.report import describe_extensions, run
from .io.models import RunResult, ScanOptions
from .io.outputs import export_run

DEFAULT_LOG_LEVEL = "WARNING"

EXIT_OK = 0
EXIT_UNUSED = 1
EXIT_FAILURE = 2

def parse_extensions(value: str) -> tuple[str, ...]:
    """Split a comma separated extension list into lowercase, dot-less items."""
    items = (item.strip().lstrip(".").lower() for item in value.split(","))
    return tuple(item for item in items if item)

def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the image resource checker."""
    parser = argparse.ArgumentParser(
        prog="image-resource-checker",
        description="Report image assets from an asset catalog that a project never references.",
    )
    parser.add_argument(
        "asset_catalog_path",
        help="Path to the Assets.xcassets directory.",
    )
    parser.add_argument(
        "project_path",
        help="Path to the project directory to check image usage in.",
    )
    parser.add_argument(
        "allow_nb_times",
        type=int,
        help="Images found in this many files or fewer are reported as unused.",
    )
    parser.add_argument(
        "--extensions",
        "--allowed-files-extensions",
        dest="extensions",
        type=parse_extensions,
        default=(),
        help="Extensions of files to search in (e.g. swift,m). Separate with commas.",
    )
    parser.add_argument(
        "-v",
        "--anxious-mode",
        "--verbose",
        dest="anxious",
        action="store_true",
        help="Print every image asset found and every file an image is found in.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar.",
    )
    parser.add_argument(
        "--report-out",
        default=None,
        help="Directory where usage.csv and summary.json will be written.",
    )
    parser.add_argument(
        "--fail-on-unused",
        action="store_true",
        help="Exit with code 1 when unused images are found.",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level for diagnostics (default {DEFAULT_LOG_LEVEL}).",
    )
    return parser.parse_args(list(argv) if argv is not None else None)

def _print_banner(args: argparse.Namespace) -> None:
    print("👋 Welcome to ImageResourceChecker")
    print("This tool will check if image assets are unused in your project.")
    print("--------------------------------------------------------\n")
    print(f"Will check images from Asset Catalog...\n\t{args.asset_catalog_path}")
    print(
        f"in {describe_extensions(args.extensions)} from directory...\n"
        f"\t{args.project_path}\n"
    )
    if args.anxious:
        print("ℹ️ Anxious mode is enabled. It will print a lot of text.\n")
    print("🚀 running ...\n")

def _export(out_dir: str, result: RunResult, options: ScanOptions) -> None:
    try:
        paths = export_run(out_dir, result, options)
    except OSError as exc:
        print(f"[report] failed to write report to {out_dir}: {exc}")
        return
    for path in paths:
        print(f"[report] wrote {path}")

def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    options = ScanOptions(
        extensions=args.extensions,
        threshold=args.allow_nb_times,
        anxious=args.anxious,
        progress=not args.no_progress,
    )
    _print_banner(args)

    result = run(Path(args.asset_catalog_path), Path(args.project_path), options)
    if args.report_out and result.failure is None:
        _export(args.report_out, result, options)

    if not result.ok:
        return EXIT_FAILURE
    if args.fail_on_unused and result.unused:
        return EXIT_UNUSED
    return EXIT_OK

if __name__ == "__main__":
    raise SystemExit(main())
