# apps/backend/routes/payment_customization.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from apps.backend.services.payment_customization import (
    PaymentCustomizationUserError,
    create_payment_customization,
)
from apps.backend.services.shopify_client import GraphqlQueryError, ShopifyClient
from apps.backend.services.shopify_session import get_shopify_client
from apps.backend.utils.envelope import error

log = logging.getLogger("paymentcustom.routes")

router = APIRouter(prefix="/api/paymentCustomization", tags=["payment-customization"])


class PaymentCustomizationCreate(BaseModel):
    functionId: str = Field(min_length=1)
    paymentMethod: str = Field(min_length=1)
    cartTotal: float = Field(ge=0)


@router.post("/create")
def create(inb: PaymentCustomizationCreate, client: ShopifyClient = Depends(get_shopify_client)):
    """
    Endpoint for the payment customization UI.
    """
    try:
        create_payment_customization(
            client,
            function_id=inb.functionId,
            payment_method=inb.paymentMethod,
            cart_total=inb.cartTotal,
        )
    except PaymentCustomizationUserError as e:
        log.warning("Payment customization rejected: %s", e)
        return error(str(e))
    except GraphqlQueryError as e:
        log.error("GraphQL query failed: %s", e)
        return error(e.response)

    return Response(status_code=200)
