import logging
import sys

from .config import get_settings
from .observability import CustomJsonFormatter

_logging_configured = False

PLAIN_FORMAT = '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'


def setup_logging():
    global _logging_configured
    if _logging_configured:
        return

    settings = get_settings()

    if settings.log_format == "json":
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CustomJsonFormatter(app_name=settings.app_name))
        logging.basicConfig(level=settings.log_level, handlers=[handler], force=True)
    else:
        # 가장 단순하고 안전한 기본 설정 (JSON 아님)
        logging.basicConfig(
            level=settings.log_level,
            format=PLAIN_FORMAT,
            stream=sys.stdout,
            force=True  # 기존 설정 강제 덮어쓰기
        )

    _logging_configured = True


def get_logger(name: str):
    """명명된 로거 가져오기(Get a named logger).

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    setup_logging()
    return logging.getLogger(name)
