"""스캐너 데이터 모델 정의./Define scanner data models."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

ProgressCallback = Callable[["ProgressEvent"], None]

DEFAULT_PROGRESS_LOG_INTERVAL = 100


def default_max_workers() -> int:
    """기본 작업자 수를 계산합니다./Return the default worker pool size."""

    return min(32, (os.cpu_count() or 1) + 4)


class SizeMode(str, Enum):
    """폴더 크기 산정 방식./How a folder size is reported."""

    OWN = "own"
    SUBTREE = "subtree"


@dataclass(frozen=True, slots=True)
class InclusionPolicy:
    """숨김/시스템 항목 포함 여부./Whether hidden and system entries count."""

    include_system_and_hidden: bool = False


@dataclass(slots=True)
class ScanOptions:
    """스캔 동작 설정./Configuration for scanning behaviour."""

    max_workers: int = field(default_factory=default_max_workers)
    follow_symlinks: bool = False
    progress_log_interval: int = DEFAULT_PROGRESS_LOG_INTERVAL

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        if self.progress_log_interval < 1:
            raise ValueError("progress_log_interval must be at least 1")


@dataclass(frozen=True, slots=True)
class FolderRecord:
    """디렉터리 하나의 집계 결과./Aggregated result for one directory.

    ``total_size`` covers the directory's immediate files only; subdirectories
    publish their own records.
    """

    path: str
    total_size: int = 0
    file_type_counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "file_type_counts", MappingProxyType(dict(self.file_type_counts))
        )


@dataclass(frozen=True, slots=True)
class ScanError:
    """스캔 중 발생한 오류 정보를 표현./Represent an error during scanning."""

    path: str
    kind: str
    message: str


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """진행 콜백 이벤트./Event payload for progress callback."""

    completed: int
    total: int
    current_path: str | None

    @property
    def percent(self) -> float:
        """완료 비율(0-100)./Completed share as a percentage."""

        if self.total <= 0:
            return 100.0
        return min(self.completed / self.total, 1.0) * 100.0


@dataclass(slots=True)
class ScanStatistics:
    """전체 스캔 요약 통계./Overall scan statistics."""

    folders_completed: int
    folders_total: int
    errors: int
    duration_seconds: float


class RankedFolder(NamedTuple):
    """리포트로 전달되는 순위 항목./Ranked entry handed to report sinks."""

    path: str
    size: int
    file_type_counts: Mapping[str, int]
