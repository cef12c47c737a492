"""Payment method variants.

PaymentMethod is an abstract base; only CreditCardPayment and UpiPayment
can be instantiated. The payment identifier (card number or UPI id) is
passed to process(), never to the constructor.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .exceptions import MissingPaymentIdentifierError, PaymentNotImplementedError
from .schemas import Amount, PaymentMethodType, ProcessingResult

logger = logging.getLogger(__name__)


class PaymentMethod(ABC):
    """Abstract payment method carrying an amount and its order details."""

    method_type: ClassVar[PaymentMethodType]

    def __init__(self, amount: Amount, order_details: Any):
        self.amount = amount
        self.order_details = order_details

    @abstractmethod
    def process(self, identifier: str) -> ProcessingResult:
        """
        Process the payment.

        Args:
            identifier: Variant-specific payment credential

        Returns:
            ProcessingResult describing the successful payment

        Raises:
            PaymentNotImplementedError: the variant does not specialize this
            MissingPaymentIdentifierError: identifier is empty
        """
        raise PaymentNotImplementedError(type(self).__name__)

    def _require_identifier(self, identifier: str) -> str:
        if not isinstance(identifier, str) or not identifier.strip():
            raise MissingPaymentIdentifierError(self.method_type.value)
        return identifier

    def _success(self, identifier: str, message: str) -> ProcessingResult:
        logger.info(message)
        return ProcessingResult(
            method_type=self.method_type,
            amount=self.amount,
            order_details=self.order_details,
            identifier=identifier,
            message=message,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(amount={self.amount!r}, "
            f"order_details={self.order_details!r})"
        )


class CreditCardPayment(PaymentMethod):
    """Payment settled against a card number."""

    method_type = PaymentMethodType.CREDIT_CARD

    def process(self, card_number: str) -> ProcessingResult:
        card_number = self._require_identifier(card_number)
        message = (
            f"Payment for {self.amount} for order {self.order_details} "
            f"using card number {card_number} is success."
        )
        return self._success(card_number, message)


class UpiPayment(PaymentMethod):
    """Payment settled against a UPI id (e.g. name@bank)."""

    method_type = PaymentMethodType.UPI

    def process(self, upi_id: str) -> ProcessingResult:
        upi_id = self._require_identifier(upi_id)
        message = (
            f"Payment for {self.amount} for the order {self.order_details} "
            f"using UPI id {upi_id} is success."
        )
        return self._success(upi_id, message)
