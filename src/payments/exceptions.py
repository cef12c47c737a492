"""
Custom exceptions for payment method creation and processing.

Every error carries a PaymentErrorKind so callers can branch on the kind
without matching on message text.
"""

from enum import Enum
from typing import Optional, Dict, Any


class PaymentErrorKind(str, Enum):
    """Kinds of payment failure."""
    INVALID_AMOUNT = "invalid_amount"
    MISSING_ORDER_DETAILS = "missing_order_details"
    UNSUPPORTED_PAYMENT_TYPE = "unsupported_payment_type"
    MISSING_IDENTIFIER = "missing_identifier"
    NOT_IMPLEMENTED = "not_implemented"


class PaymentError(Exception):
    """Base exception for payment errors."""

    kind: PaymentErrorKind

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable error body."""
        return {
            "error": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidAmountError(PaymentError):
    """Raised when the amount is missing, non-numeric, non-finite or not positive."""

    kind = PaymentErrorKind.INVALID_AMOUNT

    def __init__(self, amount: Any):
        self.amount = amount
        super().__init__(
            message="Invalid amount",
            details={"amount": repr(amount)},
        )


class MissingOrderDetailsError(PaymentError):
    """Raised when order details are absent or empty."""

    kind = PaymentErrorKind.MISSING_ORDER_DETAILS

    def __init__(self):
        super().__init__(message="Order details are required")


class UnsupportedPaymentTypeError(PaymentError):
    """Raised when the type tag matches no known payment variant."""

    kind = PaymentErrorKind.UNSUPPORTED_PAYMENT_TYPE

    def __init__(self, method_type: Any, supported: Optional[list] = None):
        self.method_type = method_type
        super().__init__(
            message=f"Invalid payment type: {method_type!r}",
            details={
                "method_type": str(method_type),
                "supported": supported or [],
            },
        )


class MissingPaymentIdentifierError(PaymentError):
    """Raised when process() gets no card number / UPI id."""

    kind = PaymentErrorKind.MISSING_IDENTIFIER

    def __init__(self, method_type: str):
        super().__init__(
            message=f"A payment identifier is required for {method_type} payments",
            details={"method_type": method_type},
        )


class PaymentNotImplementedError(PaymentError, NotImplementedError):
    """Raised when an unspecialized payment method is asked to process."""

    kind = PaymentErrorKind.NOT_IMPLEMENTED

    def __init__(self, class_name: str):
        super().__init__(
            message="This method must be implemented.",
            details={"class": class_name},
        )


__all__ = [
    "PaymentErrorKind",
    "PaymentError",
    "InvalidAmountError",
    "MissingOrderDetailsError",
    "UnsupportedPaymentTypeError",
    "MissingPaymentIdentifierError",
    "PaymentNotImplementedError",
]
