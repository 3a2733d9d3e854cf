"""공통 유틸리티를 제공합니다./Provide shared utilities."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(path: Path) -> None:
    """폴더가 없으면 생성합니다./Create directory if missing."""

    path.mkdir(parents=True, exist_ok=True)


def format_bytes(num: int) -> str:
    """사람이 읽기 쉬운 크기 문자열./Human readable byte size."""

    if num < 0:
        return str(num)
    value = float(num)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if value < 1024.0:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PB"
