# apps/extensions/move_payment_customization/run.py
"""
Move Payment Customization
==========================

Moves the configured payment method to the top of the checkout list
when the cart total is at or below the configured threshold.

Outcomes (evaluated in order):
- no usable configuration       -> no operations
- cart total > threshold        -> no operations
- no method name contains match -> no operations
- otherwise                     -> move first match to index 0
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .api import FunctionResult, MoveOperation, Operation, PaymentMethod, RunInput
from .configuration import load_configuration

log = logging.getLogger("paymentcustom.function")


def _no_changes() -> FunctionResult:
    return FunctionResult(operations=[])


def _parse_amount(amount: Optional[str]) -> float:
    try:
        value = float(amount if amount is not None else "0.0")
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _find_payment_method(methods, name_fragment: str) -> Optional[PaymentMethod]:
    for method in methods:
        if name_fragment in method.name:
            return method
    return None


def run(input: RunInput) -> FunctionResult:
    configuration = load_configuration(input.configuration_value)
    if configuration is None:
        return _no_changes()

    cart_total = _parse_amount(input.cart.cost.totalAmount.amount)
    # equal to the threshold still qualifies
    if cart_total > configuration.cartTotal:
        log.info(
            "Cart total %s is above threshold %s, payment method not moved",
            cart_total,
            configuration.cartTotal,
        )
        return _no_changes()

    method = _find_payment_method(input.paymentMethods, configuration.paymentMethodName)
    if method is None:
        return _no_changes()

    return FunctionResult(
        operations=[Operation(move=MoveOperation(index=0, paymentMethodId=method.id))]
    )


def run_json(raw: str) -> str:
    """Serialized input in, serialized result out."""
    result = run(RunInput.model_validate_json(raw))
    return result.model_dump_json()
