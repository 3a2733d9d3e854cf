"""볼륨 열거 및 루트 검증./Volume enumeration and scan root validation."""

from __future__ import annotations

import os
from dataclasses import dataclass

import psutil

from core.errors import ScanSetupError


@dataclass(frozen=True, slots=True)
class VolumeInfo:
    """마운트된 볼륨 정보./A mounted volume."""

    mountpoint: str
    device: str
    fstype: str
    total: int
    used: int
    free: int
    percent: float


def list_volumes() -> list[VolumeInfo]:
    """사용 가능한 볼륨 목록./Return ready volumes sorted by mount point."""

    volumes: list[VolumeInfo] = []
    seen: set[str] = set()
    for partition in psutil.disk_partitions(all=False):
        if not partition.mountpoint:
            continue
        mountpoint = os.path.abspath(partition.mountpoint)
        if mountpoint in seen:
            continue
        seen.add(mountpoint)
        try:
            usage = psutil.disk_usage(mountpoint)
        except OSError:
            # drive not ready (empty card reader, disconnected share)
            continue
        volumes.append(
            VolumeInfo(
                mountpoint=mountpoint,
                device=partition.device,
                fstype=partition.fstype,
                total=int(usage.total),
                used=int(usage.used),
                free=int(usage.free),
                percent=float(usage.percent),
            )
        )
    volumes.sort(key=lambda volume: volume.mountpoint.lower())
    return volumes


def normalize_root(value: str) -> str:
    """드라이브 문자나 경로를 절대 경로로./Turn ``C`` / ``C:`` / a path into an absolute root."""

    text = value.strip()
    if not text:
        raise ScanSetupError("no scan root given", stage="validate")
    if os.name == "nt" and len(text) <= 2 and text[0].isalpha() and text[1:] in ("", ":"):
        text = f"{text[0].upper()}:\\"
    return os.path.abspath(os.path.expanduser(text))


def validate_root(value: str) -> str:
    """스캔 루트를 검증합니다./Return the absolute root or raise ScanSetupError."""

    root = normalize_root(value)
    if not os.path.exists(root):
        raise ScanSetupError(f"Invalid drive or drive not ready: {root}", stage="validate")
    if not os.path.isdir(root):
        raise ScanSetupError(f"scan root is not a directory: {root}", stage="validate")
    return root
