"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from credit_manager.config import settings


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


def log_credit_created(credit_id: str, customer_id: str, credit_type: str, total_cents: int) -> None:
    """Log structured credit issuance"""
    logging.info(
        "Credit created",
        extra={
            "step": "credit_created",
            "credit_id": credit_id,
            "customer_id": customer_id,
            "credit_type": credit_type,
            "total_cents": total_cents,
        },
    )


def log_payment_recorded(
    payment_id: str,
    credit_id: str,
    amount_cents: int,
    outstanding_cents: int,
) -> None:
    """Log structured payment outcome; overpayments are flagged as warnings"""
    extra = {
        "step": "payment_recorded",
        "payment_id": payment_id,
        "credit_id": credit_id,
        "amount_cents": amount_cents,
        "outstanding_cents": outstanding_cents,
    }
    if outstanding_cents < 0:
        logging.warning("Payment exceeds outstanding balance", extra=extra)
    else:
        logging.info("Payment recorded", extra=extra)
