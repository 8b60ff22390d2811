"""The flow execution loop.

One call to `run` owns its own cursor (current state, payload, step) and
nothing else; concurrent runs of the same definition never share state.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Hashable
from typing import Any

from .definition import FlowDefinition
from .errors import FlowError, FlowErrorKind
from .events import ErrorEvent, StateEvent, TransitionEvent
from .transitions import Continue, Done, Failure, classify_result

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000

StateObserver = Callable[[StateEvent], None]
TransitionObserver = Callable[[TransitionEvent], None]
ErrorObserver = Callable[[ErrorEvent], None]


def _unknown_state(state: Hashable, step: int) -> FlowError:
    logger.warning("Unknown state", extra={"state": state, "step": step})
    return FlowError(
        f'Unknown state "{state}"', kind=FlowErrorKind.UNKNOWN_STATE, state=state, step=step
    )


async def run(
    flow: FlowDefinition,
    data: Any,
    *,
    context: Any = None,
    max_steps: int | None = None,
    on_state: StateObserver | None = None,
    on_transition: TransitionObserver | None = None,
    on_error: ErrorObserver | None = None,
) -> Any:
    """Run `flow` from its initial state and return the final payload.

    Each step fires `on_state`, invokes the current state's handler with
    ``(data, context)`` and classifies the result. Observers are notification
    only; an exception raised by an observer propagates as-is.

    Raises:
        FlowError: On an unknown state, a raising handler, a failure result,
            an unrecognised result or when `max_steps` is exhausted.
        ValueError: If `max_steps` is less than 1.
    """

    limit = DEFAULT_MAX_STEPS if max_steps is None else max_steps
    if limit < 1:
        raise ValueError("max_steps must be >= 1")

    state = flow.initial
    logger.debug("Flow run starting", extra={"state": state, "max_steps": limit})

    for step in range(limit):
        if on_state is not None:
            on_state(StateEvent(state=state, step=step, data=data, context=context))

        handler = flow.handler_for(state)
        if handler is None:
            raise _unknown_state(state, step)

        try:
            raw = handler(data, context)
            if inspect.isawaitable(raw):
                raw = await raw
        except Exception as exc:
            logger.warning(
                "State handler threw",
                extra={"state": state, "step": step, "error": repr(exc)},
            )
            if on_error is not None:
                on_error(ErrorEvent(state=state, step=step, error=exc, data=data, context=context))
            raise FlowError(
                "State handler threw",
                kind=FlowErrorKind.HANDLER_THREW,
                state=state,
                step=step,
                cause=exc,
            ) from exc

        result = classify_result(raw)

        if isinstance(result, Failure):
            logger.warning(
                "Flow error", extra={"state": state, "step": step, "error": repr(result.error)}
            )
            if on_error is not None:
                on_error(
                    ErrorEvent(
                        state=state,
                        step=step,
                        error=result.error,
                        data=data if result.data is None else result.data,
                        context=context,
                    )
                )
            err = FlowError(
                "Flow error",
                kind=FlowErrorKind.FLOW_HANDLER_ERROR,
                state=state,
                step=step,
                cause=result.error,
                data=result.data,
            )
            if isinstance(result.error, BaseException):
                raise err from result.error
            raise err

        if isinstance(result, Done):
            if on_transition is not None:
                on_transition(
                    TransitionEvent(
                        from_state=state, step=step, data=result.data, context=context, done=True
                    )
                )
            logger.info("Flow run completed", extra={"state": state, "steps": step + 1})
            return result.data

        if not isinstance(result, Continue):
            logger.warning(
                "Invalid transition",
                extra={"state": state, "step": step, "result_type": type(raw).__name__},
            )
            raise FlowError(
                "Invalid transition",
                kind=FlowErrorKind.INVALID_TRANSITION,
                state=state,
                step=step,
            )

        if not flow.has_state(result.state):
            raise _unknown_state(result.state, step)

        if on_transition is not None:
            on_transition(
                TransitionEvent(
                    from_state=state, step=step, data=result.data, context=context, to=result.state
                )
            )
        logger.debug(
            "Transition", extra={"from_state": state, "to": result.state, "step": step}
        )

        state = result.state
        data = result.data

    logger.warning("Max steps exceeded", extra={"state": state, "max_steps": limit})
    raise FlowError(
        f"Max steps {limit} exceeded",
        kind=FlowErrorKind.MAX_STEPS_EXCEEDED,
        state=state,
        step=limit,
    )


def run_sync(flow: FlowDefinition, data: Any, **options: Any) -> Any:
    """Blocking wrapper around `run` for callers without an event loop."""

    return asyncio.run(run(flow, data, **options))
