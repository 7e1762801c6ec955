"""Tests for logging configuration."""

import logging

from custody_scan.app_logging import ExtraFieldsFormatter, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("custody_scan")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_formatter_appends_extra_fields() -> None:
    formatter = ExtraFieldsFormatter("%(levelname)s: %(message)s")
    logger = logging.getLogger("custody_scan.test")
    record = logger.makeRecord(
        logger.name,
        logging.WARNING,
        __file__,
        1,
        "Vehicle mismatch",
        None,
        None,
        extra={"shipment_id": "JOB-KL-001", "vehicle_id": "TRUCK-B"},
    )

    assert formatter.format(record) == (
        "WARNING: Vehicle mismatch [shipment_id=JOB-KL-001 vehicle_id=TRUCK-B]"
    )


def test_formatter_leaves_plain_records_alone() -> None:
    formatter = ExtraFieldsFormatter("%(levelname)s: %(message)s")
    record = logging.LogRecord(
        "custody_scan", logging.INFO, __file__, 1, "Hi", None, None
    )

    assert formatter.format(record) == "INFO: Hi"
