"""Finite-state flow execution.

This package provides first-class types for:
- Flow definitions (an initial state plus a handler per state)
- Transition results (continue, done, failure)
- Observer events emitted while a flow runs
- The engine that drives a flow to completion

Steps run strictly one at a time; handlers may be sync or async.
"""

from stepflow.flow.definition import FlowDefinition, create_flow
from stepflow.flow.engine import DEFAULT_MAX_STEPS, run, run_sync
from stepflow.flow.errors import FlowError, FlowErrorKind
from stepflow.flow.events import ErrorEvent, StateEvent, TransitionEvent
from stepflow.flow.transitions import (
    Continue,
    Done,
    Failure,
    Transition,
    classify_result,
    done,
    error,
    next,
)

__all__ = [
    "DEFAULT_MAX_STEPS",
    "Continue",
    "Done",
    "ErrorEvent",
    "Failure",
    "FlowDefinition",
    "FlowError",
    "FlowErrorKind",
    "StateEvent",
    "Transition",
    "TransitionEvent",
    "classify_result",
    "create_flow",
    "done",
    "error",
    "next",
    "run",
    "run_sync",
]
