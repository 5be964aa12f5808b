"""Run the unused image check and report a verdict per asset."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, Sequence

from tqdm import tqdm

from ..crawl.catalog import collect_asset_names
from ..crawl.walker import WalkError
from ..extract.normalize import normalize
from ..io.models import RunFailure, RunResult, ScanOptions, UsageReportEntry, Verdict
from .usage import count_occurrences

Emit = Callable[[str], None]


def classify(occurrences: int, threshold: int) -> Verdict:
    """Return ``UNUSED`` when *occurrences* does not exceed *threshold*."""
    return Verdict.UNUSED if occurrences <= threshold else Verdict.USED


def plural_times(count: int) -> str:
    return "times" if count > 1 else "time"


def describe_extensions(extensions: Sequence[str]) -> str:
    """Return the human-readable description of which files get scanned."""
    if not extensions:
        return "all files"
    if len(extensions) == 1:
        return f"files with extension {extensions[0]}"
    return f"files with extensions {', '.join(extensions)}"


def summarize(entries: Iterable[UsageReportEntry]) -> Dict[str, int]:
    """Return totals per verdict for *entries*."""
    totals = {"total": 0, Verdict.USED.value: 0, Verdict.UNUSED.value: 0}
    for entry in entries:
        totals["total"] += 1
        totals[entry.verdict.value] += 1
    return totals


def check_asset(
    asset_name: str,
    project_root: Path,
    options: ScanOptions,
    emit: Emit,
) -> UsageReportEntry:
    """Count references to *asset_name* and emit its verdict line."""
    identifier = normalize(asset_name)

    def _on_match(path: Path) -> None:
        emit(f"📍 Found '{identifier}' in {path}")

    occurrences = count_occurrences(
        identifier,
        project_root,
        options.extensions,
        on_match=_on_match if options.anxious else None,
    )
    verdict = classify(occurrences, options.threshold)

    if verdict is Verdict.UNUSED:
        emit(
            f"🛑 Resource '{identifier}' Name: '{asset_name}' is unused "
            f"(found {occurrences} {plural_times(occurrences)})."
        )
    elif options.anxious:
        emit(f"✅ Resource '{identifier}' is used {occurrences} {plural_times(occurrences)}.")

    return UsageReportEntry(
        asset_name=asset_name,
        identifier=identifier,
        occurrences=occurrences,
        verdict=verdict,
    )


def run(
    catalog_root: str | Path,
    project_root: str | Path,
    options: ScanOptions,
    emit: Emit = tqdm.write,
) -> RunResult:
    """Check every image in *catalog_root* against the files in *project_root*.

    Assets are processed in sorted order. Missing input paths stop the run
    before any scanning; a project directory that cannot be listed stops it
    part way, keeping the entries produced so far.
    """
    catalog_path = Path(catalog_root)
    project_path = Path(project_root)

    if not catalog_path.is_dir():
        message = f"Asset Catalog at {catalog_path} does not exist. Could not start tool."
        emit(f"⛔️ {message}")
        return RunResult(failure=RunFailure.MISSING_CATALOG, message=message)

    if not project_path.is_dir():
        message = f"Directory {project_path} does not exist. Could not start tool."
        emit(f"⛔️ {message}")
        return RunResult(failure=RunFailure.MISSING_PROJECT, message=message)

    def _on_found(name: str) -> None:
        emit(f"📝 Found image asset: {name}")

    asset_names = collect_asset_names(
        catalog_path, on_found=_on_found if options.anxious else None
    )
    emit(f"Found {len(asset_names)} images to check.\n")

    result = RunResult()
    for asset_name in tqdm(
        sorted(asset_names),
        desc="Checking images",
        unit="image",
        leave=False,
        disable=not options.progress,
    ):
        try:
            entry = check_asset(asset_name, project_path, options, emit)
        except WalkError as exc:
            emit(f"⛔️ {exc}")
            result.failure = RunFailure.UNREADABLE_PROJECT
            result.message = str(exc)
            return result
        result.entries.append(entry)

    totals = summarize(result.entries)
    emit(
        f"\nChecked {totals['total']} images: "
        f"{totals[Verdict.UNUSED.value]} unused, {totals[Verdict.USED.value]} used."
    )
    emit("\n🎉 finished!")
    return result
