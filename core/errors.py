"""스캔 준비 단계 예외(KR). Scan setup exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ScanSetupError(Exception):
    """스캔 시작 전 치명적 오류 · Fatal failure before a scan starts."""

    message: str
    stage: str | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message


__all__ = ["ScanSetupError"]
