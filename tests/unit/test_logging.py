"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from stepflow.logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="stepflow.flow.engine",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Unknown state",
        args=None,
        exc_info=None,
    )
    record.state = "missing"
    record.step = 2
    record.error = "boom"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "stepflow.flow.engine"
    assert payload["message"] == "Unknown state"
    assert payload["state"] == "missing"
    assert payload["step"] == 2
    assert payload["extra"] == {"error": "boom"}
    assert "exception" not in payload


def test_json_formatter_renders_exceptions() -> None:
    try:
        raise ValueError("Invalid order")
    except ValueError:
        record = logging.getLogger("t").makeRecord(
            "t", logging.ERROR, __file__, 1, "failed", None, exc_info=sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: Invalid order" in payload["exception"]


def test_configure_logging_installs_single_json_handler(restore_root_logger: None) -> None:
    configure_logging("debug")
    configure_logging("warning")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_formatter_stringifies_opaque_values() -> None:
    class Stage:
        def __str__(self) -> str:
            return "stage:charged"

    record = logging.LogRecord(
        "stepflow.flow.engine", logging.DEBUG, __file__, 1, "Transition", None, None
    )
    record.state = Stage()
    record.to = Stage()

    payload = json.loads(JsonFormatter().format(record))

    assert payload["state"] == "stage:charged"
    assert payload["extra"] == {"to": "stage:charged"}
    assert "step" not in payload
