"""동시 스캔 조정기./Concurrent scan coordinator."""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from .aggregator import DirectoryAggregator
from .models import (
    FolderRecord,
    InclusionPolicy,
    ProgressCallback,
    ScanError,
    ScanOptions,
    ScanStatistics,
)
from .permissions import AccessChecker, NoopAccessChecker
from .state import ErrorLedger, ResultStore, ScanProgress
from .streams import progress_log
from .walker import DirectoryWalker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanOutcome:
    """스캔 결과 묶음./Everything a finished scan produced."""

    root: str
    results: ResultStore
    progress: ScanProgress
    errors: list[ScanError]
    duration_seconds: float

    def statistics(self) -> ScanStatistics:
        return ScanStatistics(
            folders_completed=self.progress.folders_completed,
            folders_total=self.progress.folders_total,
            errors=len(self.errors),
            duration_seconds=round(self.duration_seconds, 2),
        )


class ScanCoordinator:
    """디렉터리 트리 전체를 병렬로 집계합니다./Fan out aggregation over a whole tree.

    Work runs on a bounded :class:`ThreadPoolExecutor`. Each finished
    directory hands back its subdirectories, which are queued as new tasks;
    :meth:`scan` returns once no task is left.
    """

    def __init__(
        self,
        options: ScanOptions | None = None,
        *,
        access_checker: AccessChecker | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self._options = options if options is not None else ScanOptions()
        self._access = access_checker if access_checker is not None else NoopAccessChecker()
        self._progress_callback = progress_callback

    def scan(self, root: str, policy: InclusionPolicy) -> ScanOutcome:
        """루트부터 스캔합니다./Scan ``root`` and block until every subtree is done."""

        root = os.path.abspath(root)
        started = time.perf_counter()
        folders_total = DirectoryWalker(self._options.follow_symlinks).count_directories(root)
        logger.info("scanning %s (%d folders)", root, folders_total)

        store = ResultStore()
        progress = ScanProgress(folders_total)
        errors = ErrorLedger()

        def _published(record: FolderRecord, completed: int) -> None:
            if self._progress_callback is not None:
                self._progress_callback(progress.snapshot(record.path))
            if completed % self._options.progress_log_interval == 0:
                progress_log.info("%d folders scanned...", completed)

        aggregator = DirectoryAggregator(
            policy,
            progress,
            store,
            errors=errors,
            access_checker=self._access,
            follow_symlinks=self._options.follow_symlinks,
            on_published=_published,
        )
        with ThreadPoolExecutor(
            max_workers=self._options.max_workers, thread_name_prefix="scan"
        ) as executor:
            pending: set[Future[list[str]]] = {executor.submit(aggregator.aggregate, root)}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    for child in future.result():
                        pending.add(executor.submit(aggregator.aggregate, child))

        duration = time.perf_counter() - started
        logger.info(
            "scan of %s finished: %d records, %d errors in %.2fs",
            root,
            len(store),
            len(errors),
            duration,
        )
        return ScanOutcome(
            root=root,
            results=store,
            progress=progress,
            errors=errors.errors(),
            duration_seconds=duration,
        )


def scan(
    root: str,
    policy: InclusionPolicy,
    options: ScanOptions | None = None,
    *,
    access_checker: AccessChecker | None = None,
    progress_callback: ProgressCallback | None = None,
) -> ScanOutcome:
    """ScanCoordinator 단축 함수./Shortcut for a one-off coordinator scan."""

    coordinator = ScanCoordinator(
        options, access_checker=access_checker, progress_callback=progress_callback
    )
    return coordinator.scan(root, policy)
