# apps/backend/services/payment_customization.py

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from apps.backend.services.shopify_client import ShopifyClient

log = logging.getLogger("paymentcustom.customization")

METAFIELD_NAMESPACE = "$app:payment-customization"
METAFIELD_KEY = "function-configuration"

CREATE_CUSTOMIZATION_MUTATION = """
mutation PaymentCustomizationCreate($input: PaymentCustomizationInput!) {
  paymentCustomizationCreate(paymentCustomization: $input) {
    paymentCustomization {
      id
    }
    userErrors {
      message
    }
  }
}
"""

SET_CONFIGURATION_MUTATION = """
mutation MetafieldsSet($customizationId: ID!, $configurationValue: String!) {
  metafieldsSet(metafields: [
    {
      ownerId: $customizationId
      namespace: "%s"
      key: "%s"
      value: $configurationValue
      type: "json"
    }
  ]) {
    metafields {
      id
    }
    userErrors {
      message
    }
  }
}
""" % (METAFIELD_NAMESPACE, METAFIELD_KEY)


class PaymentCustomizationUserError(Exception):
    """userErrors returned by one of the Admin API mutations."""

    def __init__(self, messages: List[str]):
        self.messages = messages
        super().__init__(" ".join(messages))


def _number(value: float) -> Union[int, float]:
    # 100.0 -> 100
    return int(value) if float(value).is_integer() else value


def _raise_for_user_errors(user_errors: Optional[List[Dict[str, Any]]]) -> None:
    if user_errors:
        raise PaymentCustomizationUserError([str(e.get("message", "")) for e in user_errors])


def configuration_value(payment_method: str, cart_total: float) -> str:
    return json.dumps({"paymentMethodName": payment_method, "cartTotal": _number(cart_total)})


def create_payment_customization(
    client: ShopifyClient,
    *,
    function_id: str,
    payment_method: str,
    cart_total: float,
) -> str:
    """
    Two-step install of a move-payment rule:
    1. paymentCustomizationCreate for the function
    2. metafieldsSet with the function configuration on the new customization

    Step 2 only runs if step 1 reported no userErrors.
    Returns the customization GID.
    """
    data = client.graphql(
        CREATE_CUSTOMIZATION_MUTATION,
        {
            "input": {
                "functionId": function_id,
                "title": f"Move {payment_method} if cart total is less than {_number(cart_total)}",
                "enabled": True,
            }
        },
    )
    create_result = data.get("paymentCustomizationCreate") or {}
    _raise_for_user_errors(create_result.get("userErrors"))

    customization_id = (create_result.get("paymentCustomization") or {}).get("id")
    if not customization_id:
        raise PaymentCustomizationUserError(["Payment customization was not created"])

    data = client.graphql(
        SET_CONFIGURATION_MUTATION,
        {
            "customizationId": customization_id,
            "configurationValue": configuration_value(payment_method, cart_total),
        },
    )
    metafield_result = data.get("metafieldsSet") or {}
    _raise_for_user_errors(metafield_result.get("userErrors"))

    log.info("Created payment customization %s for function %s", customization_id, function_id)
    return customization_id
