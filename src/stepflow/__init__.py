"""stepflow: a minimal finite-state workflow executor.

A flow is an initial state plus one handler per state. The engine invokes
the current state's handler with the evolving payload and a shared context
until a handler reports completion or failure, or the step budget runs out.
"""

__version__ = "0.1.0"

from stepflow.config import FlowSettings
from stepflow.flow import (
    DEFAULT_MAX_STEPS,
    Continue,
    Done,
    ErrorEvent,
    Failure,
    FlowDefinition,
    FlowError,
    FlowErrorKind,
    StateEvent,
    Transition,
    TransitionEvent,
    classify_result,
    create_flow,
    done,
    error,
    next,
    run,
    run_sync,
)

__all__ = [
    "__version__",
    "DEFAULT_MAX_STEPS",
    "Continue",
    "Done",
    "ErrorEvent",
    "Failure",
    "FlowDefinition",
    "FlowError",
    "FlowErrorKind",
    "FlowSettings",
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
