"""스캔 공유 상태./Shared scan state: progress counter and result store."""

from __future__ import annotations

import threading
from typing import Iterator

from .models import FolderRecord, ProgressEvent, ScanError


class ScanProgress:
    """완료 폴더 수를 추적합니다./Track completed folders against the pre-count."""

    def __init__(self, folders_total: int) -> None:
        self._folders_total = folders_total
        self._completed = 0
        self._lock = threading.Lock()

    @property
    def folders_total(self) -> int:
        return self._folders_total

    @property
    def folders_completed(self) -> int:
        """잠금 없이 읽는 근사값./Unlocked, possibly stale read for display."""

        return self._completed

    def increment(self) -> int:
        """원자적으로 1 증가 후 새 값을 반환./Atomically add one and return the new count."""

        with self._lock:
            self._completed += 1
            return self._completed

    def snapshot(self, current_path: str | None = None) -> ProgressEvent:
        return ProgressEvent(
            completed=self._completed,
            total=self._folders_total,
            current_path=current_path,
        )


class ResultStore:
    """경로별 FolderRecord 저장소./Thread-safe mapping of path to FolderRecord.

    Keys are written once and never removed.
    """

    def __init__(self) -> None:
        self._records: dict[str, FolderRecord] = {}
        self._lock = threading.Lock()

    def publish(self, record: FolderRecord) -> None:
        """레코드를 게시합니다./Insert a record; a path may only be published once."""

        with self._lock:
            if record.path in self._records:
                raise KeyError(f"record already published: {record.path}")
            self._records[record.path] = record

    def get(self, path: str) -> FolderRecord | None:
        return self._records.get(path)

    def records(self) -> list[FolderRecord]:
        """삽입 순서대로 스냅샷을 반환./Snapshot of records in insertion order."""

        with self._lock:
            return list(self._records.values())

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FolderRecord]:
        return iter(self.records())


class ErrorLedger:
    """격리된 디렉터리 오류 목록./Collect contained directory failures."""

    def __init__(self) -> None:
        self._errors: list[ScanError] = []
        self._lock = threading.Lock()

    def add(self, error: ScanError) -> None:
        with self._lock:
            self._errors.append(error)

    def errors(self) -> list[ScanError]:
        with self._lock:
            return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)
