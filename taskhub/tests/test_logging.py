from __future__ import annotations

import pytest
from loguru import logger as loguru_logger

from taskhub.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    sanitize_message,
    set_correlation_id,
)
from taskhub.shared.logging.sensitive_filter import sanitize_record

JWT = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJzdWIiOiIxIiwidXNlcm5hbWUiOiJhbGljZSJ9."
    "c2lnbmF0dXJlLXZhbHVlLWdvZXMtaGVyZQ"
)


@pytest.mark.parametrize(
    ("message", "secret"),
    [
        (f"Authorization: Bearer {JWT}", JWT),
        (f"issued {JWT} for alice", JWT),
        ("password=Secret123!", "Secret123!"),
        ('payload {"password": "Secret123!"}', "Secret123!"),
        ("jwt_secret=super-secret-value", "super-secret-value"),
        ("stored pbkdf2:sha256:1000$abcdSALT$0123456789abcdef", "0123456789abcdef"),
        ("postgresql://app:hunter22@db:5432/taskhub", "hunter22"),
    ],
)
def test_sensitive_values_are_redacted(message: str, secret: str) -> None:
    sanitized = sanitize_message(message)

    assert secret not in sanitized
    assert "***" in sanitized


def test_plain_messages_pass_through() -> None:
    message = "tasks.create: ok task_id=3 owner_id=1"

    assert sanitize_message(message) == message


def test_record_filter_rewrites_message() -> None:
    record = {"message": "password=Secret123!"}

    assert sanitize_record(record) is True
    assert "Secret123!" not in record["message"]


def test_correlation_id_lifecycle() -> None:
    set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"

    clear_correlation_id()
    assert get_correlation_id() == "-"

    set_correlation_id(None)
    assert get_correlation_id() == "-"


def test_log_lines_carry_correlation_id_and_are_sanitized() -> None:
    captured: list[dict] = []
    sink_id = loguru_logger.add(
        lambda message: captured.append(message.record), filter=sanitize_record, level="INFO"
    )
    try:
        set_correlation_id("req-42")
        logger.info("signin token=" + JWT)
    finally:
        clear_correlation_id()
        loguru_logger.remove(sink_id)

    assert captured
    assert captured[-1]["extra"]["correlation_id"] == "req-42"
    assert JWT not in captured[-1]["message"]
