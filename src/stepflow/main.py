"""Console entry point running the order processing demo."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from stepflow.config import FlowSettings
from stepflow.demo.orders import ORDER_FLOW, Order, OrderContext, OrderItem
from stepflow.flow import FlowError, TransitionEvent, run_sync
from stepflow.logging import configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the stepflow order processing demo.")
    parser.add_argument("--order-id", default="A-1001", help="Order identifier")
    parser.add_argument("--total", type=float, default=74.5, help="Order total")
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Submit an order without items (fails validation)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds each async step sleeps (defaults to STEPFLOW_DEMO_DELAY_SECONDS)",
    )
    return parser.parse_args(argv)


def _print_transition(event: TransitionEvent) -> None:
    if event.done:
        print(f"Done after step {event.step}")
    else:
        print(f"Transition {event.from_state} -> {event.to}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = FlowSettings()
    configure_logging(settings.log_level)

    items = [] if args.empty else [OrderItem(sku="SKU-1", qty=2), OrderItem(sku="SKU-2", qty=1)]
    order = Order(id=args.order_id, items=items, total=args.total)
    context = OrderContext(
        delay=settings.demo_delay_seconds if args.delay is None else args.delay
    )

    try:
        result = run_sync(
            ORDER_FLOW,
            order,
            context=context,
            max_steps=settings.max_steps,
            on_transition=_print_transition,
        )
    except FlowError as exc:
        logger.error("Order flow failed", extra={"order_id": order.id, "kind": exc.kind.value})
        print(f"Order {order.id} failed at {exc.state!s} (step {exc.step}): {exc.cause}")
        return 1

    print("Final order:", result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
