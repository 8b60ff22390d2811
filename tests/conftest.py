"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from stepflow.demo.orders import Order, OrderContext, OrderItem
from stepflow.flow import FlowDefinition, create_flow, done, next


@pytest.fixture
def env_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no STEPFLOW_* variables set."""
    for name in ("STEPFLOW_LOG_LEVEL", "STEPFLOW_MAX_STEPS", "STEPFLOW_DEMO_DELAY_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def increment_flow() -> FlowDefinition:
    """A -> B -> done, each step adding one to `value`."""
    return create_flow(
        {
            "initial": "a",
            "states": {
                "a": lambda data, _ctx: next("b", {"value": data["value"] + 1}),
                "b": lambda data, _ctx: done({"value": data["value"] + 1}),
            },
        }
    )


@pytest.fixture
def recorder() -> tuple[list[tuple[Any, ...]], dict[str, Callable[[Any], None]]]:
    """Observers that append (kind, ...) tuples to a shared list."""
    events: list[tuple[Any, ...]] = []

    observers: dict[str, Callable[[Any], None]] = {
        "on_state": lambda e: events.append(("state", e.state, e.step)),
        "on_transition": lambda e: events.append(
            ("done", e.from_state, e.step) if e.done else ("transition", e.from_state, e.to, e.step)
        ),
        "on_error": lambda e: events.append(("error", e.state, e.step, e.error, e.data)),
    }
    return events, observers


@pytest.fixture
def order() -> Order:
    return Order(
        id="A-1001",
        items=[OrderItem(sku="SKU-1", qty=2), OrderItem(sku="SKU-2", qty=1)],
        total=74.5,
    )


@pytest.fixture
def order_context() -> OrderContext:
    fixed = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    return OrderContext(now=lambda: fixed, delay=0)
