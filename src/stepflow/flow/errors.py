from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any


class FlowErrorKind(str, Enum):
    UNKNOWN_STATE = "unknown_state"
    HANDLER_THREW = "handler_threw"
    FLOW_HANDLER_ERROR = "flow_handler_error"
    INVALID_TRANSITION = "invalid_transition"
    MAX_STEPS_EXCEEDED = "max_steps_exceeded"


class FlowError(Exception):
    """Raised when a flow run terminates unsuccessfully.

    Every failure mode uses this one type; `kind` tells them apart. `state`
    and `step` locate the failure, `cause` holds the underlying error (the
    raised exception or the value carried by a failure result) and `data`
    the partial payload a failure result supplied, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: FlowErrorKind,
        state: Hashable | None = None,
        step: int | None = None,
        cause: Any = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.state = state
        self.step = step
        self.cause = cause
        self.data = data

    def __repr__(self) -> str:
        return (
            f"FlowError({self.message!r}, kind={self.kind.value}, "
            f"state={self.state!r}, step={self.step!r})"
        )
