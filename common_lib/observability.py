"""구조화 로깅(Structured JSON logging)."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


class CustomJsonFormatter(JsonFormatter):
    """사용자 정의 JSON 포매터(Custom JSON formatter).

    Extends pythonjsonlogger's JsonFormatter so every record carries
    `timestamp`, `level`, `name`, `message` and the configured `app` name.
    """

    def __init__(self, *args: Any, app_name: str = "package-scan-types", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.app_name = app_name

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """
        필드 추가(Add standard fields).

        Args:
            log_record: The log record dictionary
            record: The LogRecord object
            message_dict: The message dictionary
        """
        super().add_fields(log_record, record, message_dict)

        if "timestamp" not in log_record:
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()

        # timestamp replaces asctime
        log_record.pop("asctime", None)

        log_record["app"] = self.app_name

        if "level" not in log_record:
            log_record["level"] = record.levelname

        if "message" not in log_record:
            log_record["message"] = record.getMessage()

        if "name" not in log_record:
            log_record["name"] = record.name
