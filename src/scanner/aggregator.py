"""디렉터리 단위 집계기./Per-directory size and file type aggregation."""

from __future__ import annotations

import logging
import os
from typing import Callable

from .classifier import extension_of, is_included, read_attributes
from .exceptions import AccessDeniedError, DirectoryScanError, OtherIOError, classify_os_error
from .models import FolderRecord, InclusionPolicy, ScanError
from .permissions import AccessChecker, NoopAccessChecker
from .state import ErrorLedger, ResultStore, ScanProgress
from .streams import error_log

PublishListener = Callable[[FolderRecord, int], None]

logger = logging.getLogger(__name__)


class DirectoryAggregator:
    """한 디렉터리를 집계하고 하위 디렉터리를 돌려줍니다./Aggregate one directory.

    ``aggregate`` sums the directory's own included files, publishes a single
    :class:`FolderRecord` and returns the included subdirectories so the caller
    can fan out over them. A directory that cannot be listed is reported and
    yields neither a record nor children; nothing is raised to the caller.
    """

    def __init__(
        self,
        policy: InclusionPolicy,
        progress: ScanProgress,
        store: ResultStore,
        *,
        errors: ErrorLedger | None = None,
        access_checker: AccessChecker | None = None,
        follow_symlinks: bool = False,
        on_published: PublishListener | None = None,
    ) -> None:
        self._policy = policy
        self._progress = progress
        self._store = store
        self._errors = errors if errors is not None else ErrorLedger()
        self._access = access_checker if access_checker is not None else NoopAccessChecker()
        self._follow = follow_symlinks
        self._on_published = on_published

    @property
    def errors(self) -> ErrorLedger:
        return self._errors

    def aggregate(self, directory: str) -> list[str]:
        """디렉터리를 집계합니다./Publish the record for ``directory``; return subdirectories."""

        try:
            record, children = self._collect(directory)
        except DirectoryScanError as exc:
            self._report(exc)
            return []
        self._store.publish(record)
        completed = self._progress.increment()
        if self._on_published is not None:
            self._on_published(record, completed)
        return children

    def _collect(self, directory: str) -> tuple[FolderRecord, list[str]]:
        if not self._access.can_read(directory):
            raise AccessDeniedError(directory, f"Access denied to directory {directory}")
        try:
            with os.scandir(directory) as iterator:
                entries = list(iterator)
        except OSError as exc:
            raise classify_os_error(directory, exc) from exc

        total_size = 0
        counts: dict[str, int] = {}
        children: list[str] = []
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=self._follow)
                is_file = not is_dir and entry.is_file(follow_symlinks=self._follow)
            except OSError:
                continue
            if not (is_dir or is_file):
                continue
            if not is_included(read_attributes(entry), self._policy):
                continue
            if is_dir:
                children.append(entry.path)
                continue
            try:
                size = entry.stat(follow_symlinks=self._follow).st_size
            except OSError as exc:
                # vanished or unreadable after listing; the directory still counts
                self._report(OtherIOError(entry.path, f"Error reading file {entry.path}: {exc}"))
                continue
            total_size += size
            ext = extension_of(entry.name)
            counts[ext] = counts.get(ext, 0) + 1
        return FolderRecord(path=directory, total_size=total_size, file_type_counts=counts), children

    def _report(self, exc: DirectoryScanError) -> None:
        error_log.error(exc.message)
        logger.debug("contained %s at %s", exc.kind, exc.path)
        self._errors.add(ScanError(path=exc.path, kind=exc.kind, message=exc.message))
