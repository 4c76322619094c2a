"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from payment_scheduler.config import settings


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

    # JSON handler for stderr, stdout carries the schedule
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule(term_type: str, payment_count: int, total_cents: int, currency: str) -> None:
    """Log structured schedule outcome for analysis"""
    logging.getLogger("payment_scheduler").info(
        "Schedule computed",
        extra={
            "step": "schedule_complete",
            "term_type": term_type,
            "payment_count": payment_count,
            "total_cents": total_cents,
            "currency": currency,
        },
    )


def log_rejection(reason: str, message: str) -> None:
    """Log a schedule request rejected by validation"""
    logging.getLogger("payment_scheduler").warning(
        f"Schedule rejected: {message}",
        extra={"step": "validation", "reason": reason},
    )
