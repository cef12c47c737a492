"""Payment method factory (parameterized creation of payment variants)."""

from .exceptions import (
    PaymentErrorKind,
    PaymentError,
    InvalidAmountError,
    MissingOrderDetailsError,
    UnsupportedPaymentTypeError,
    MissingPaymentIdentifierError,
    PaymentNotImplementedError,
)
from .schemas import PaymentMethodType, PaymentRequest, ProcessingResult
from .methods import PaymentMethod, CreditCardPayment, UpiPayment
from .factory import PaymentMethodFactory, create_payment_method

__all__ = [
    # Errors
    "PaymentErrorKind",
    "PaymentError",
    "InvalidAmountError",
    "MissingOrderDetailsError",
    "UnsupportedPaymentTypeError",
    "MissingPaymentIdentifierError",
    "PaymentNotImplementedError",
    # Schemas
    "PaymentMethodType",
    "PaymentRequest",
    "ProcessingResult",
    # Variants
    "PaymentMethod",
    "CreditCardPayment",
    "UpiPayment",
    # Factory
    "PaymentMethodFactory",
    "create_payment_method",
]
