from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class StateEvent:
    """Emitted before the handler for `state` is invoked."""

    state: Hashable
    step: int
    data: Any
    context: Any


@dataclass(frozen=True, slots=True)
class TransitionEvent:
    """Emitted after a handler returned a continue or done result.

    Exactly one of `to` or `done` is meaningful: `to` names the next state
    for a continuation, `done` is True when the flow finished.
    """

    from_state: Hashable
    step: int
    data: Any
    context: Any
    to: Hashable | None = None
    done: bool = False


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    """Emitted when a handler raised or returned a failure result."""

    state: Hashable
    step: int
    error: Any
    data: Any
    context: Any
