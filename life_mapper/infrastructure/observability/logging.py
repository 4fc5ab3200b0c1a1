"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from life_mapper.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_record_change(request_id: str, collection: str, action: str, record_id: Optional[str]) -> None:
    """Log a create/update/delete against a record collection"""
    logging.info(
        "Record collection changed",
        extra={
            "request_id": request_id,
            "collection": collection,
            "action": action,
            "record_id": record_id,
        },
    )


def log_report_saved(
    request_id: str,
    month: str,
    savings: float,
    history_size: int,
    duration_ms: float,
) -> None:
    """Log a monthly snapshot save for later analysis"""
    logging.info(
        "Monthly report saved",
        extra={
            "request_id": request_id,
            "step": "report_saved",
            "month": month,
            "savings": savings,
            "history_size": history_size,
            "duration_ms": duration_ms,
        },
    )


def log_calendar_export(request_id: str, event_count: int) -> None:
    logging.info(
        "Calendar exported",
        extra={"request_id": request_id, "step": "calendar_export", "event_count": event_count},
    )
