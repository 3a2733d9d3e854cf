"""동시 디렉터리 용량 스캐너 API./Concurrent directory usage scanner API."""

from __future__ import annotations

from .aggregator import DirectoryAggregator
from .classifier import EntryAttributes, is_included, read_attributes
from .coordinator import ScanCoordinator, ScanOutcome, scan
from .exceptions import (
    AccessDeniedError,
    DirectoryScanError,
    OtherIOError,
    PathTooLongError,
    ScanErrorBase,
    classify_os_error,
)
from .models import (
    FolderRecord,
    InclusionPolicy,
    ProgressEvent,
    RankedFolder,
    ScanError,
    ScanOptions,
    ScanStatistics,
    SizeMode,
)
from .permissions import AccessChecker, NoopAccessChecker, OsAccessChecker, make_access_checker
from .ranker import rank, subtree_totals, top_n, top_n_by_subtree
from .state import ErrorLedger, ResultStore, ScanProgress

__all__ = [
    "AccessChecker",
    "AccessDeniedError",
    "DirectoryAggregator",
    "DirectoryScanError",
    "EntryAttributes",
    "ErrorLedger",
    "FolderRecord",
    "InclusionPolicy",
    "NoopAccessChecker",
    "OsAccessChecker",
    "OtherIOError",
    "PathTooLongError",
    "ProgressEvent",
    "RankedFolder",
    "ResultStore",
    "ScanCoordinator",
    "ScanError",
    "ScanErrorBase",
    "ScanOptions",
    "ScanOutcome",
    "ScanProgress",
    "ScanStatistics",
    "SizeMode",
    "classify_os_error",
    "is_included",
    "make_access_checker",
    "rank",
    "read_attributes",
    "scan",
    "subtree_totals",
    "top_n",
    "top_n_by_subtree",
]
