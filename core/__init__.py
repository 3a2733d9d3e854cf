"""코어 패키지 초기화(KR). Core package initialisation (EN)."""

from .config import ScanConfig, ScanPaths
from .decimal_format import NumberLike, format_2d, format_gb
from .errors import ScanSetupError
from .logging import configure_logging
from .timezone import local_now

__all__ = [
    "ScanConfig",
    "ScanPaths",
    "NumberLike",
    "format_2d",
    "format_gb",
    "ScanSetupError",
    "configure_logging",
    "local_now",
]
