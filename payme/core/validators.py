"""
Field Validators for PayMe Links

Each function checks one field of a payment link against the PayMe Payment
Link Standard v1.2 and returns the normalized value, raising the matching
PaymentLinkError subclass on violation.

Source of truth: https://www.payme.sk/docs/PaymentLinkStandard_v1_2.pdf
"""
import math
import re
from datetime import date, datetime
from numbers import Real
from typing import Optional, Union

from payme.core.currency import CurrencyCode
from payme.core.errors import (
    CreditorNameTooLongError,
    InvalidAmountError,
    InvalidDueDateError,
    InvalidIBANError,
    InvalidInputError,
    InvalidPaymentIdentifierError,
    MessageTooLongError,
    UnsupportedCurrencyError,
    UnsupportedVersionError,
)
from payme.core.schema import PayMeVersion


IBAN_REGEX = re.compile(r'^[A-Z]{2}[0-9]{2}[a-zA-Z0-9]{1,30}$')
PI_REGEX = re.compile(r'^/VS[a-zA-Z0-9]{0,10}/SS[a-zA-Z0-9]{0,10}/KS[a-zA-Z0-9]{0,4}$')
DUE_DATE_REGEX = re.compile(
    r'^(?:([0-9]{4})([0-9]{2})([0-9]{2})|([0-9]{4})-([0-9]{2})-([0-9]{2}))$'
)

MIN_AMOUNT = 0
MAX_AMOUNT = 9999999
MAX_PAYMENT_IDENTIFIER_LENGTH = 35
MAX_MESSAGE_LENGTH = 140
MAX_CREDITOR_NAME_LENGTH = 70


def validate_version(version: Union[str, PayMeVersion, None]) -> PayMeVersion:
    """Resolve a version string to a supported PayMeVersion."""
    try:
        return PayMeVersion(version)
    except ValueError:
        raise UnsupportedVersionError(f"Unsupported PayMe link version: {version!r}") from None


def validate_iban(iban: Optional[str]) -> str:
    if not isinstance(iban, str) or not IBAN_REGEX.fullmatch(iban):
        raise InvalidIBANError("Invalid IBAN format")
    return iban


def validate_amount(amount: Union[Real, str, None]) -> float:
    """
    Check that the amount is a number within 0..9999999.

    Numeric strings are accepted the way they appear in a query string.
    """
    if isinstance(amount, bool) or amount is None:
        raise InvalidAmountError("Amount is missing or not a number")
    if isinstance(amount, str):
        try:
            amount = float(amount)
        except ValueError:
            raise InvalidAmountError(f"Amount is not a number: {amount!r}") from None
    if not isinstance(amount, Real) or math.isnan(amount):
        raise InvalidAmountError("Amount is missing or not a number")

    if amount < MIN_AMOUNT:
        raise InvalidAmountError("Amount must be a positive number")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount is too large, maximum amount is {MAX_AMOUNT}")
    return float(amount)


def validate_currency(currency: Union[str, CurrencyCode, None],
                      version: PayMeVersion) -> CurrencyCode:
    """
    Check the currency against the ISO 4217 vocabulary and the version.

    Version 1 of the standard only allows EUR.
    """
    if currency is None or not CurrencyCode.is_known(currency):
        raise UnsupportedCurrencyError(f"Unknown currency code: {currency!r}")
    code = CurrencyCode(currency)
    if version == PayMeVersion.V1 and code != CurrencyCode.EUR:
        raise UnsupportedCurrencyError("Invalid currency code for version 1")
    return code


def parse_due_date(value: Union[str, date]) -> date:
    """
    Convert a due date to a calendar date.

    Accepts date objects (datetimes are truncated to their date), YYYYMMDD
    strings as used in incoming links, and YYYY-MM-DD as rendered by to_url().
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDueDateError("Invalid date format")

    match = DUE_DATE_REGEX.fullmatch(value)
    if not match:
        raise InvalidDueDateError("Invalid date format")
    year, month, day = (int(part) for part in match.groups() if part is not None)
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDueDateError(f"Invalid date: {value}") from None


def validate_payment_identifier(payment_identifier: str) -> str:
    if not isinstance(payment_identifier, str):
        raise InvalidInputError("Payment identifier must be a string")
    if len(payment_identifier) > MAX_PAYMENT_IDENTIFIER_LENGTH:
        raise InvalidPaymentIdentifierError(
            f"Payment identifier is too long, maximum length is "
            f"{MAX_PAYMENT_IDENTIFIER_LENGTH} characters"
        )
    if not PI_REGEX.fullmatch(payment_identifier):
        raise InvalidPaymentIdentifierError(
            "Invalid payment identifier format. "
            "Please use the following format \"/VS{0,10}/SS{0,10}/KS{0,4}\""
        )
    return payment_identifier


def validate_message(message: str) -> str:
    if not isinstance(message, str):
        raise InvalidInputError("Message must be a string")
    if len(message) > MAX_MESSAGE_LENGTH:
        raise MessageTooLongError(
            f"Message is too long, maximum length is {MAX_MESSAGE_LENGTH} characters"
        )
    return message


def validate_creditor_name(creditor_name: str) -> str:
    if not isinstance(creditor_name, str):
        raise InvalidInputError("Creditor name must be a string")
    if len(creditor_name) > MAX_CREDITOR_NAME_LENGTH:
        raise CreditorNameTooLongError(
            f"Creditor name is too long, maximum length is "
            f"{MAX_CREDITOR_NAME_LENGTH} characters"
        )
    return creditor_name
