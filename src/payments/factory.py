"""
Payment Method Factory

Builds one of a closed set of payment variants from a type tag. Inputs are
validated before anything is constructed; the factory keeps no state
between calls.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Dict, List, Type, Union

from .exceptions import (
    InvalidAmountError,
    MissingOrderDetailsError,
    UnsupportedPaymentTypeError,
)
from .methods import CreditCardPayment, PaymentMethod, UpiPayment
from .schemas import PaymentMethodType, PaymentRequest

logger = logging.getLogger(__name__)


class PaymentMethodFactory:
    """
    Create payment methods based on a type tag (e.g., 'upi', 'creditCard').
    """

    _METHODS: Dict[PaymentMethodType, Type[PaymentMethod]] = {
        PaymentMethodType.UPI: UpiPayment,
        PaymentMethodType.CREDIT_CARD: CreditCardPayment,
    }

    @classmethod
    def supported_types(cls) -> List[PaymentMethodType]:
        return list(cls._METHODS)

    @classmethod
    def create(
        cls,
        method_type: Union[str, PaymentMethodType],
        amount: Any,
        order_details: Any,
    ) -> PaymentMethod:
        """
        Create a payment method instance.

        Args:
            method_type: PaymentMethodType or its value ('upi', 'creditCard')
            amount: Positive, finite amount to charge
            order_details: Order record; opaque but must not be empty

        Returns:
            A new UpiPayment or CreditCardPayment

        Raises:
            InvalidAmountError: amount missing, non-numeric, non-finite or <= 0
            MissingOrderDetailsError: order_details missing, empty or falsy
            UnsupportedPaymentTypeError: method_type matches no variant
        """
        request = cls.build_request(method_type, amount, order_details)
        method_class = cls._METHODS[request.method_type]
        method = method_class(request.amount, request.order_details)
        logger.debug(f"Created {method_class.__name__} for amount {request.amount}")
        return method

    @classmethod
    def build_request(
        cls,
        method_type: Union[str, PaymentMethodType],
        amount: Any,
        order_details: Any,
    ) -> PaymentRequest:
        """Validate raw inputs into a PaymentRequest (amount, order, then type)."""
        _validate_amount(amount)
        _validate_order_details(order_details)
        resolved = cls._resolve_type(method_type)
        return PaymentRequest(
            method_type=resolved,
            amount=amount,
            order_details=order_details,
        )

    @classmethod
    def _resolve_type(cls, method_type: Union[str, PaymentMethodType]) -> PaymentMethodType:
        try:
            resolved = PaymentMethodType(method_type)
        except (ValueError, TypeError):
            resolved = None

        if resolved not in cls._METHODS:
            supported = [t.value for t in cls._METHODS]
            logger.warning(f"Unsupported payment type requested: {method_type!r}")
            raise UnsupportedPaymentTypeError(method_type, supported)
        return resolved


def _is_valid_amount(amount: Any) -> bool:
    # bool is an int subclass but never a valid amount
    if amount is None or isinstance(amount, bool):
        return False
    if isinstance(amount, Decimal):
        return amount.is_finite() and amount > 0
    if not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount > 0


def _validate_amount(amount: Any) -> None:
    if not _is_valid_amount(amount):
        logger.warning(f"Rejected payment amount: {amount!r}")
        raise InvalidAmountError(amount)


def _validate_order_details(order_details: Any) -> None:
    # None, empty containers and falsy scalars (0, False, "") are all missing
    if not order_details:
        logger.warning("Rejected payment without order details")
        raise MissingOrderDetailsError()


def create_payment_method(
    method_type: Union[str, PaymentMethodType],
    amount: Any,
    order_details: Any,
) -> PaymentMethod:
    """Create a payment method via PaymentMethodFactory."""
    return PaymentMethodFactory.create(method_type, amount, order_details)
