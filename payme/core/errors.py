"""
Payment Link Errors

Every validation rule of the payment link model raises its own exception
type so callers can tell failures apart without parsing messages.

Design Intent:
- One exception class per violated rule
- Stable machine-readable codes alongside human-readable messages
- Validation errors are ValueErrors; encoder failures are not
"""
from enum import Enum


class PaymentLinkErrorCode(Enum):
    """Standardized error codes for payment link validation."""
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_IBAN = "INVALID_IBAN"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
    UNSUPPORTED_CURRENCY = "UNSUPPORTED_CURRENCY"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DUE_DATE = "INVALID_DUE_DATE"
    INVALID_PAYMENT_IDENTIFIER = "INVALID_PAYMENT_IDENTIFIER"
    MESSAGE_TOO_LONG = "MESSAGE_TOO_LONG"
    CREDITOR_NAME_TOO_LONG = "CREDITOR_NAME_TOO_LONG"
    QR_PAYLOAD_FAILED = "QR_PAYLOAD_FAILED"


class PaymentLinkError(ValueError):
    """Base class for payment link validation failures."""
    code = PaymentLinkErrorCode.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"error_code": self.code.value, "message": self.message}


class InvalidInputError(PaymentLinkError):
    """Input is neither empty, a URL nor a parameter object."""
    code = PaymentLinkErrorCode.INVALID_INPUT


class InvalidIBANError(PaymentLinkError):
    code = PaymentLinkErrorCode.INVALID_IBAN


class UnsupportedVersionError(PaymentLinkError):
    code = PaymentLinkErrorCode.UNSUPPORTED_VERSION


class UnsupportedCurrencyError(PaymentLinkError):
    """Currency is unknown or not allowed for the declared version."""
    code = PaymentLinkErrorCode.UNSUPPORTED_CURRENCY


class InvalidAmountError(PaymentLinkError):
    """Amount is missing, not a number, or outside 0..9999999."""
    code = PaymentLinkErrorCode.INVALID_AMOUNT


class InvalidDueDateError(PaymentLinkError):
    code = PaymentLinkErrorCode.INVALID_DUE_DATE


class InvalidPaymentIdentifierError(PaymentLinkError):
    """Payment identifier is too long or does not match /VS../SS../KS.."""
    code = PaymentLinkErrorCode.INVALID_PAYMENT_IDENTIFIER


class MessageTooLongError(PaymentLinkError):
    code = PaymentLinkErrorCode.MESSAGE_TOO_LONG


class CreditorNameTooLongError(PaymentLinkError):
    code = PaymentLinkErrorCode.CREDITOR_NAME_TOO_LONG


class QRPayloadError(Exception):
    """Raised when the QR payload encoder fails."""
    code = PaymentLinkErrorCode.QR_PAYLOAD_FAILED
