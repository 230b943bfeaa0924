"""
Mock QR Payload Encoder

In-memory encoder for tests and local development.

Design Intent:
- Record every payment handed to the encoder for test verification
- Return a deterministic payload so assertions stay simple
- Support failure simulation
- No external dependencies
"""
from typing import Optional

from payme.core.errors import QRPayloadError
from payme.integration.bysquare.base import BySquarePayment, QRPayloadEncoder


class MockQRPayloadEncoder(QRPayloadEncoder):
    """
    Recording QR payload encoder.

    Usage:
        encoder = MockQRPayloadEncoder()
        link.get_pay_by_square(encoder)
        assert encoder.last_payment.variable_symbol == "123"
    """

    def __init__(self, simulate_failure: bool = False):
        """
        Initialize mock encoder.

        Args:
            simulate_failure: If True, encode raises QRPayloadError
        """
        self._payments: list[BySquarePayment] = []
        self._simulate_failure = simulate_failure

    def encode(self, payment: BySquarePayment) -> str:
        if self._simulate_failure:
            raise QRPayloadError("Simulated encoder failure")

        self._payments.append(payment)
        return "|".join([
            payment.iban,
            f"{payment.amount:.2f}",
            payment.currency_code,
            payment.variable_symbol,
            payment.specific_symbol,
            payment.constant_symbol,
            payment.payment_note,
        ])

    @property
    def payments(self) -> list[BySquarePayment]:
        return list(self._payments)

    @property
    def last_payment(self) -> Optional[BySquarePayment]:
        return self._payments[-1] if self._payments else None

    def clear(self) -> None:
        """Clear recorded payments (useful for test cleanup)."""
        self._payments.clear()
