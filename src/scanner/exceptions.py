"""스캐너 전용 예외를 정의합니다./Define scanner specific exceptions."""

from __future__ import annotations

import errno

# Windows ERROR_FILENAME_EXCED_RANGE
_WINERROR_PATH_TOO_LONG = 206


class ScanErrorBase(RuntimeError):
    """스캔 중 발생한 오류 기본 클래스./Base class for scan errors."""


class DirectoryScanError(ScanErrorBase):
    """단일 디렉터리에 국한된 오류./Failure contained to one directory."""

    kind = "io_error"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class AccessDeniedError(DirectoryScanError):
    """권한이 없어 목록을 읽지 못함./Directory listing was not permitted."""

    kind = "access_denied"


class PathTooLongError(DirectoryScanError):
    """경로 길이 제한 초과./Path exceeds the filesystem length limit."""

    kind = "path_too_long"


class OtherIOError(DirectoryScanError):
    """그 밖의 순회 오류./Any other traversal failure."""


def classify_os_error(path: str, exc: OSError) -> DirectoryScanError:
    """OSError를 스캔 오류로 분류합니다./Map an OSError onto the scan taxonomy."""

    if isinstance(exc, PermissionError):
        return AccessDeniedError(path, f"Access denied to directory {path}")
    if exc.errno == errno.ENAMETOOLONG or getattr(exc, "winerror", None) == _WINERROR_PATH_TOO_LONG:
        return PathTooLongError(path, f"Path too long: {path}")
    return OtherIOError(path, f"Error scanning directory {path}: {exc.strerror or exc}")
