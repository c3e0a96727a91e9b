# apps/extensions/move_payment_customization/configuration.py

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

log = logging.getLogger("paymentcustom.function")


class FunctionConfiguration(BaseModel):
    """
    Merchant-entered settings stored in the customization metafield:
      {"paymentMethodName": "Cash on Delivery", "cartTotal": 100}
    """

    model_config = ConfigDict(frozen=True)

    paymentMethodName: str = Field(min_length=1)
    cartTotal: float = Field(ge=0, allow_inf_nan=False)


def _reject_constant(token: str):
    raise ValueError(f"Unsupported JSON constant: {token}")


def load_configuration(raw: Optional[str]) -> Optional[FunctionConfiguration]:
    """
    Returns None whenever the metafield can't drive a move:
    missing/empty value, malformed JSON, non-object JSON,
    empty payment method name, zero threshold, or a schema violation.
    """
    try:
        data = json.loads(raw or "{}", parse_constant=_reject_constant)
    except ValueError as e:
        log.warning("Ignoring malformed function configuration: %s", e)
        return None

    if not isinstance(data, dict):
        return None
    if not data.get("paymentMethodName") or not data.get("cartTotal"):
        return None

    try:
        config = FunctionConfiguration.model_validate(data)
    except ValidationError as e:
        log.warning("Ignoring invalid function configuration: %s", e.errors())
        return None

    # "0" and "0.00" only become zero after coercion
    if config.cartTotal == 0:
        return None
    return config
