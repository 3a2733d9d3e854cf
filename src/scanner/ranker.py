"""상위 폴더 선정./Select the largest folders from a finished scan."""

from __future__ import annotations

import heapq
import os
from typing import Iterable

from .models import FolderRecord, RankedFolder, SizeMode


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")


def top_n(results: Iterable[FolderRecord], n: int) -> list[FolderRecord]:
    """자체 크기 기준 상위 n개./Top ``n`` records by own size, largest first.

    Ties keep the iteration order of ``results``.
    """

    _check_count(n)
    return heapq.nlargest(n, results, key=lambda record: record.total_size)


def subtree_totals(results: Iterable[FolderRecord]) -> dict[str, int]:
    """하위 트리 합계를 계산./Sum each record with every published descendant."""

    records = list(results)
    totals = {record.path: record.total_size for record in records}
    # deepest first so each child is complete before it is folded into its parent
    for path in sorted(totals, key=len, reverse=True):
        parent = os.path.dirname(path)
        if parent != path and parent in totals:
            totals[parent] += totals[path]
    return totals


def top_n_by_subtree(results: Iterable[FolderRecord], n: int) -> list[tuple[FolderRecord, int]]:
    """하위 트리 합계 기준 상위 n개./Top ``n`` records by recursive size."""

    _check_count(n)
    records = list(results)
    totals = subtree_totals(records)
    pairs = ((record, totals[record.path]) for record in records)
    return heapq.nlargest(n, pairs, key=lambda pair: pair[1])


def rank(
    results: Iterable[FolderRecord], n: int, mode: SizeMode = SizeMode.OWN
) -> list[RankedFolder]:
    """리포트용 순위 목록./Ranked tuples for report sinks."""

    if SizeMode(mode) is SizeMode.SUBTREE:
        return [
            RankedFolder(record.path, size, record.file_type_counts)
            for record, size in top_n_by_subtree(results, n)
        ]
    return [
        RankedFolder(record.path, record.total_size, record.file_type_counts)
        for record in top_n(results, n)
    ]
