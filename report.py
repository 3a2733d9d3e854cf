"""스캔 결과 보고서를 생성합니다./Render and export scan reports."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Iterable, Mapping

from core.decimal_format import format_gb
from src.scanner.models import RankedFolder
from utils import ensure_directory

CSV_HEADER = ("Folder", "Size (GB)", "File Types Breakdown")
BREAKDOWN_SEPARATOR = " | "


@dataclass(slots=True)
class CsvFolderRow:
    """CSV에서 읽은 폴더 행입니다./Folder row read back from CSV."""

    path: str
    size_gb: Decimal
    file_type_counts: dict[str, int] = field(default_factory=dict)


def format_breakdown(counts: Mapping[str, int]) -> str:
    """확장자별 개수를 직렬화합니다./Serialise extension counts as ``ext: n | ...``."""

    return BREAKDOWN_SEPARATOR.join(f"{ext}: {count}" for ext, count in counts.items())


def parse_breakdown(text: str) -> dict[str, int]:
    """확장자별 개수를 파싱합니다./Parse a breakdown cell back into counts."""

    counts: dict[str, int] = {}
    if not text:
        return counts
    for part in text.split(BREAKDOWN_SEPARATOR):
        ext, _, count = part.rpartition(": ")
        counts[ext] = int(count)
    return counts


def emit_csv(folders: Iterable[RankedFolder], path: Path) -> int:
    """순위 결과를 CSV로 내보냅니다./Export ranked folders to CSV; return row count."""

    ensure_directory(path.parent)
    rows = 0
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for folder in folders:
            writer.writerow(
                (folder.path, format_gb(folder.size), format_breakdown(folder.file_type_counts))
            )
            rows += 1
    return rows


def load_csv(path: Path) -> list[CsvFolderRow]:
    """내보낸 CSV를 다시 읽습니다./Load a previously exported CSV."""

    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None or tuple(header) != CSV_HEADER:
            raise ValueError(f"unexpected CSV header in {path}: {header}")
        rows: list[CsvFolderRow] = []
        for row in reader:
            if not row:
                continue
            rows.append(
                CsvFolderRow(
                    path=row[0],
                    size_gb=Decimal(row[1]),
                    file_type_counts=parse_breakdown(row[2]),
                )
            )
        return rows


def render_progress_bar(completed: int, total: int, width: int = 50) -> str:
    """고정 폭 진행 막대./Fixed width text bar such as ``[####----] 42.0%``."""

    progress = 1.0 if total <= 0 else min(completed / total, 1.0)
    filled = int(progress * width)
    return f"[{'#' * filled}{'-' * (width - filled)}] {progress * 100:.1f}%"


def describe_folder(folder: RankedFolder) -> list[str]:
    """콘솔 출력용 줄 목록./Console lines for one ranked folder."""

    lines = [f"{folder.path} - {format_gb(folder.size)} GB", "File types breakdown:"]
    lines.extend(f"  {ext}: {count} files" for ext, count in folder.file_type_counts.items())
    return lines
