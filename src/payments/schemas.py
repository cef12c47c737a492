"""
Pydantic schemas for payment requests and processing results.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field

Amount = Union[int, float, Decimal]


class PaymentMethodType(str, Enum):
    """Type tags accepted by the payment method factory."""
    UPI = "upi"
    CREDIT_CARD = "creditCard"


class PaymentRequest(BaseModel):
    """Validated inputs for building a payment method."""
    method_type: PaymentMethodType
    amount: Amount
    order_details: Any


class ProcessingResult(BaseModel):
    """Outcome of PaymentMethod.process()."""
    success: bool = True
    method_type: PaymentMethodType
    amount: Amount
    order_details: Any
    identifier: str  # card number or UPI id
    message: str
    processed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
