# apps/extensions/move_payment_customization/api.py

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# -------------------------
# Input (run.graphql shape)
# -------------------------

class Metafield(BaseModel):
    value: Optional[str] = None


class PaymentCustomization(BaseModel):
    metafield: Optional[Metafield] = None


class MoneyV2(BaseModel):
    amount: Optional[str] = None


class CartCost(BaseModel):
    totalAmount: MoneyV2 = Field(default_factory=MoneyV2)


class Cart(BaseModel):
    cost: CartCost = Field(default_factory=CartCost)


class PaymentMethod(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class RunInput(BaseModel):
    """
    Checkout snapshot handed to the function by the host.
    Read-only; the function never writes back into it.
    """

    model_config = ConfigDict(frozen=True)

    paymentCustomization: Optional[PaymentCustomization] = None
    cart: Cart = Field(default_factory=Cart)
    paymentMethods: List[PaymentMethod] = Field(default_factory=list)

    @property
    def configuration_value(self) -> Optional[str]:
        if self.paymentCustomization is None or self.paymentCustomization.metafield is None:
            return None
        return self.paymentCustomization.metafield.value


# -------------------------
# Output
# -------------------------

class MoveOperation(BaseModel):
    index: int
    paymentMethodId: str


class Operation(BaseModel):
    move: MoveOperation


class FunctionResult(BaseModel):
    operations: List[Operation] = Field(default_factory=list)
