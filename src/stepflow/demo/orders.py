"""Order processing demo flow.

received -> validated -> charged -> fulfilled -> notified -> done

Charging and fulfilment simulate remote calls and are asynchronous; the
rest are plain functions. Every step returns a new `Order` and appends a note.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from stepflow.flow import Continue, Done, Failure, FlowDefinition, create_flow, done, error, next


class OrderItem(BaseModel):
    sku: str
    qty: int = Field(gt=0)


class Order(BaseModel):
    id: str
    items: list[OrderItem] = Field(default_factory=list)
    total: float
    status: str = "new"
    charged: bool = False
    fulfilled: bool = False
    notes: list[str] = Field(default_factory=list)

    def advance(self, status: str, note: str, **changes: object) -> Order:
        return self.model_copy(
            update={"status": status, "notes": [*self.notes, note], **changes}
        )


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class OrderContext:
    now: Callable[[], datetime] = _utcnow
    delay: float = 0.1


def received(order: Order, _ctx: OrderContext) -> Continue:
    return next("validated", order.advance("received", "Order received"))


def validated(order: Order, _ctx: OrderContext) -> Continue | Failure:
    if not order.items or order.total <= 0:
        return error(ValueError("Invalid order"), order.advance("invalid", "Validation failed"))
    return next("charged", order.advance("validated", "Order validated"))


async def charged(order: Order, ctx: OrderContext) -> Continue:
    await asyncio.sleep(ctx.delay)
    return next(
        "fulfilled",
        order.advance(
            "charged", f"Payment captured at {ctx.now().isoformat()}", charged=True
        ),
    )


async def fulfilled(order: Order, ctx: OrderContext) -> Continue:
    await asyncio.sleep(ctx.delay)
    return next(
        "notified",
        order.advance(
            "fulfilled", f"Order fulfilled at {ctx.now().isoformat()}", fulfilled=True
        ),
    )


def notified(order: Order, _ctx: OrderContext) -> Done:
    return done(order.advance("notified", "Customer notified"))


ORDER_FLOW: FlowDefinition = create_flow(
    {
        "initial": "received",
        "states": {
            "received": received,
            "validated": validated,
            "charged": charged,
            "fulfilled": fulfilled,
            "notified": notified,
        },
    }
)
