"""볼륨 스캔 단계를 제공합니다./Provide the volume scanning stage."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from report import CsvFolderRow, emit_csv, load_csv
from src.scanner import (
    InclusionPolicy,
    ProgressEvent,
    RankedFolder,
    ScanCoordinator,
    ScanOptions,
    ScanOutcome,
    SizeMode,
    make_access_checker,
    rank,
)
from src.scanner.volumes import validate_root


@dataclass(slots=True)
class VolumeReport:
    """순위 결과와 스캔 결과./Ranked folders plus the outcome they came from."""

    folders: list[RankedFolder]
    outcome: ScanOutcome


def scan_volume(
    root: str | Path,
    *,
    include_system_and_hidden: bool = False,
    top: int = 100,
    size_mode: SizeMode = SizeMode.OWN,
    max_workers: int | None = None,
    follow_symlinks: bool = False,
    check_access: bool = True,
    progress_callback: Callable[[ProgressEvent], None] | None = None,
) -> VolumeReport:
    """루트를 검증하고 스캔합니다./Validate ``root``, scan it and rank the result."""

    validated = validate_root(str(root))
    options = (
        ScanOptions(follow_symlinks=follow_symlinks)
        if max_workers is None
        else ScanOptions(max_workers=max_workers, follow_symlinks=follow_symlinks)
    )
    coordinator = ScanCoordinator(
        options,
        access_checker=make_access_checker(check_access),
        progress_callback=progress_callback,
    )
    outcome = coordinator.scan(validated, InclusionPolicy(include_system_and_hidden))
    return VolumeReport(folders=rank(outcome.results, top, size_mode), outcome=outcome)


def emit_scan(folders: Iterable[RankedFolder], out_path: Path) -> int:
    """순위 결과를 CSV로 저장합니다./Persist ranked folders as CSV."""

    return emit_csv(folders, out_path)


def load_records(path: Path) -> list[CsvFolderRow]:
    """저장된 CSV를 로드합니다./Load exported rows from disk."""

    return load_csv(path)


__all__ = ["VolumeReport", "emit_scan", "load_records", "scan_volume"]
