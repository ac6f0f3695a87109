"""공통 라이브러리 패키지 초기화(Common library package init)."""
from . import config, logger, observability

__all__ = [
    "config",
    "logger",
    "observability",
]
