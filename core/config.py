"""스캔 설정 모델(KR). Scan configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.scanner.models import (
    InclusionPolicy,
    ScanOptions,
    SizeMode,
    default_max_workers,
)

DEFAULT_TOP_COUNT = 100


class ConfigModel(BaseModel):
    """설정 모델 공통 기반 · Common base for configuration models."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class ScanPaths(ConfigModel):
    """출력/로그 경로 구성을 보관 · Store output and log file paths."""

    error_log: Path = Field(default_factory=lambda: Path("ErrorLog.txt"))
    progress_log: Path = Field(default_factory=lambda: Path("ProgressLog.txt"))
    app_log: Path = Field(default_factory=lambda: Path(".cache/drivestore.log"))
    csv_path: Path = Field(default_factory=lambda: Path("FolderSizes.csv"))

    def ensure(self) -> None:
        """로그 디렉터리를 생성 · Ensure parent directories exist."""

        for path in (self.error_log, self.progress_log, self.app_log, self.csv_path):
            Path(path).parent.mkdir(parents=True, exist_ok=True)


class ScanConfig(ConfigModel):
    """스캔 설정 전체를 표현 · Represent complete scan settings."""

    paths: ScanPaths = Field(default_factory=ScanPaths)
    include_system_and_hidden: bool = False
    top_count: int = DEFAULT_TOP_COUNT
    max_workers: int = Field(default_factory=default_max_workers, ge=1)
    follow_symlinks: bool = False
    check_access: bool = True
    size_mode: SizeMode = SizeMode.OWN
    progress_log_interval: int = Field(default=100, ge=1)
    progress_bar_width: int = Field(default=50, ge=1)

    @field_validator("top_count", mode="before")
    @classmethod
    def _default_top_count(cls, value: Any) -> int:
        """잘못된 개수는 기본값 · Fall back to 100 for missing or non-positive counts."""

        try:
            count = int(value)
        except (TypeError, ValueError):
            return DEFAULT_TOP_COUNT
        return count if count > 0 else DEFAULT_TOP_COUNT

    @classmethod
    def from_file(cls, config_file: Path) -> "ScanConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump(mode="json"))

    def policy(self) -> InclusionPolicy:
        return InclusionPolicy(include_system_and_hidden=self.include_system_and_hidden)

    def scan_options(self) -> ScanOptions:
        return ScanOptions(
            max_workers=self.max_workers,
            follow_symlinks=self.follow_symlinks,
            progress_log_interval=self.progress_log_interval,
        )


__all__ = ["ConfigModel", "ScanConfig", "ScanPaths", "DEFAULT_TOP_COUNT"]
