from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# (payload, context) -> transition result, or an awaitable resolving to one.
Handler = Callable[[Any, Any], Any]


@dataclass(frozen=True, slots=True, eq=False)
class FlowDefinition:
    """A reusable state machine: where to start and how to handle each state.

    The definition is never checked up front. A missing ``initial`` handler
    surfaces as an unknown-state failure on the first step of a run.
    Definitions compare and hash by identity.
    """

    initial: Hashable
    states: Mapping[Hashable, Handler] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Snapshot the caller's mapping so later edits can't leak into runs.
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))

    def handler_for(self, state: Hashable) -> Handler | None:
        try:
            return self.states.get(state)
        except TypeError:
            # Unhashable names can never be registered states.
            return None

    def has_state(self, state: Hashable) -> bool:
        return self.handler_for(state) is not None


def create_flow(definition: FlowDefinition | Mapping[str, Any]) -> FlowDefinition:
    """Return a flow definition for `definition`.

    A ``FlowDefinition`` is passed through unchanged. A plain mapping with
    ``initial`` and ``states`` keys is converted. Nothing is validated here.
    """

    if isinstance(definition, FlowDefinition):
        return definition
    return FlowDefinition(initial=definition["initial"], states=definition["states"])
