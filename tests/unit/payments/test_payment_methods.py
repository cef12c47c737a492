"""Unit tests for payment method variants."""

import pytest

from src.payments import (
    CreditCardPayment,
    MissingPaymentIdentifierError,
    PaymentMethod,
    PaymentMethodFactory,
    PaymentMethodType,
    PaymentNotImplementedError,
    ProcessingResult,
    UpiPayment,
)


class TestUpiPayment:
    """Tests for UpiPayment.process."""

    def test_process_success(self, order_details):
        """Test UPI processing references amount and UPI id."""
        method = PaymentMethodFactory.create("upi", 100, order_details)

        result = method.process("upiId@kotak")

        assert isinstance(result, ProcessingResult)
        assert result.success is True
        assert result.method_type is PaymentMethodType.UPI
        assert result.amount == 100
        assert result.identifier == "upiId@kotak"
        assert result.order_details == order_details
        assert result.processed_at is not None

    def test_process_message(self, order_details):
        """Test the confirmation text."""
        result = UpiPayment(100, order_details).process("upiId@kotak")

        assert result.message == (
            f"Payment for 100 for the order {order_details} "
            f"using UPI id upiId@kotak is success."
        )

    @pytest.mark.parametrize("upi_id", ["", "   ", None])
    def test_process_requires_identifier(self, upi_id, order_details):
        """Test an empty UPI id is rejected."""
        method = UpiPayment(100, order_details)

        with pytest.raises(MissingPaymentIdentifierError) as exc_info:
            method.process(upi_id)

        assert exc_info.value.details == {"method_type": "upi"}


class TestCreditCardPayment:
    """Tests for CreditCardPayment.process."""

    def test_process_success(self, order_details):
        """Test card processing references the card number."""
        method = PaymentMethodFactory.create("creditCard", 100, order_details)

        result = method.process("22333113023")

        assert result.success is True
        assert result.method_type is PaymentMethodType.CREDIT_CARD
        assert result.amount == 100
        assert result.identifier == "22333113023"
        assert "using card number 22333113023 is success." in result.message

    def test_processing_leaves_method_unchanged(self, order_details):
        """Test process can be called again with another card."""
        method = CreditCardPayment(100, order_details)

        first = method.process("1111")
        second = method.process("2222")

        assert first.identifier == "1111"
        assert second.identifier == "2222"
        assert method.amount == 100


class TestAbstractPaymentMethod:
    """Tests for the abstract base."""

    def test_base_cannot_be_instantiated(self, order_details):
        """Test PaymentMethod is abstract."""
        with pytest.raises(TypeError):
            PaymentMethod(100, order_details)

    def test_unspecialized_process_raises(self, order_details):
        """Test delegating to the base process raises PaymentNotImplementedError."""

        class HalfBuiltPayment(PaymentMethod):
            method_type = PaymentMethodType.UPI

            def process(self, identifier):
                return super().process(identifier)

        method = HalfBuiltPayment(100, order_details)

        with pytest.raises(PaymentNotImplementedError) as exc_info:
            method.process("anything")

        assert isinstance(exc_info.value, NotImplementedError)
        assert exc_info.value.details == {"class": "HalfBuiltPayment"}

    def test_repr(self):
        """Test repr names the variant."""
        assert repr(UpiPayment(100, "order-1")) == "UpiPayment(amount=100, order_details='order-1')"
