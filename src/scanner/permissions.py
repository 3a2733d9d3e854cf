"""디렉터리 접근 검사기./Pluggable directory access checks."""

from __future__ import annotations

import os
from typing import Protocol


class AccessChecker(Protocol):
    """디렉터리 읽기 가능 여부를 판단./Decide whether a directory may be listed."""

    def can_read(self, path: str) -> bool: ...


class OsAccessChecker:
    """os.access 기반 검사./Check read and traverse permission with os.access."""

    def can_read(self, path: str) -> bool:
        return os.access(path, os.R_OK | os.X_OK)


class NoopAccessChecker:
    """항상 허용합니다./Allow everything; listing errors still surface."""

    def can_read(self, path: str) -> bool:
        return True


def make_access_checker(enabled: bool) -> AccessChecker:
    """설정에 맞는 검사기를 반환./Return the checker matching the setting."""

    return OsAccessChecker() if enabled else NoopAccessChecker()


__all__ = ["AccessChecker", "NoopAccessChecker", "OsAccessChecker", "make_access_checker"]
