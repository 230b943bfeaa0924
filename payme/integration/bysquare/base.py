"""
QR Payload Encoder Interface

This module defines the interface the payment link uses to produce a
PAY by square QR payload.

Design Intent:
- Decouple the payment link model from a specific encoder library
- Enable testability through mock implementations
- The payload is opaque: the link never interprets what the encoder returns
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class BySquarePayment:
    """
    Simple payment order handed to a QR payload encoder.

    Symbols hold digits only; an empty string means the symbol is absent.
    """
    iban: str
    amount: float
    currency_code: str
    variable_symbol: str = ""
    specific_symbol: str = ""
    constant_symbol: str = ""
    payment_note: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "iban": self.iban,
            "amount": self.amount,
            "currency_code": self.currency_code,
            "variable_symbol": self.variable_symbol,
            "specific_symbol": self.specific_symbol,
            "constant_symbol": self.constant_symbol,
            "payment_note": self.payment_note,
        }


class QRPayloadEncoder(ABC):
    """Abstract base class for QR payload encoders."""

    @abstractmethod
    def encode(self, payment: BySquarePayment) -> str:
        """
        Encode a payment order into a QR payload string.

        Args:
            payment: Payment order built from a validated payment link

        Returns:
            Payload string to be rendered into a QR code

        Raises:
            QRPayloadError: If the encoder cannot produce a payload
        """
        pass
