from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Continue:
    """Move to `state` with the updated payload."""

    state: Hashable
    data: Any


@dataclass(frozen=True, slots=True)
class Done:
    """Terminal marker; `data` is the final payload."""

    data: Any


@dataclass(frozen=True, slots=True)
class Failure:
    """Stop the run unsuccessfully.

    `data` is an optional partial payload; `None` means the handler did not
    provide one.
    """

    error: Any
    data: Any = None


Transition = Continue | Done | Failure


def next(state: Hashable, data: Any) -> Continue:  # noqa: A001 (builtin)
    return Continue(state=state, data=data)


def done(data: Any) -> Done:
    return Done(data=data)


def error(err: Any, data: Any = None) -> Failure:
    return Failure(error=err, data=data)


def classify_result(value: object) -> Transition | None:
    """Map a handler return value onto a transition variant.

    Dataclass results are taken as-is. Mapping results are classified by the
    keys they carry, in priority order: ``error``, a truthy ``done``, then
    ``state``. Anything else is unrecognised and yields ``None``.
    """

    if isinstance(value, (Continue, Done, Failure)):
        return value

    if isinstance(value, Mapping):
        if "error" in value:
            return Failure(error=value["error"], data=value.get("data"))
        if value.get("done"):
            return Done(data=value.get("data"))
        if "state" in value:
            return Continue(state=value["state"], data=value.get("data"))

    return None
