"""
PayMe Payment Link Model

This module defines the payment link record of the PayMe Payment Link
Standard v1.2 and its conversions:
- parameter object <-> record
- PayMe URL <-> record
- record -> PAY by square QR payload

Design Intent:
- Validated at construction time; a failed construction yields no instance
- Mutable through chained setters that validate before committing
- Construction sources form a closed set dispatched to one build routine

Source of truth: https://www.payme.sk/docs/PaymentLinkStandard_v1_2.pdf
"""
import logging
import re
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from payme.config import DEFAULT_BASE_URL
from payme.core.currency import CurrencyCode
from payme.core.errors import InvalidInputError
from payme.core.schema import PaymentLinkParams, PayMeVersion
from payme.core.validators import (
    parse_due_date,
    validate_amount,
    validate_creditor_name,
    validate_currency,
    validate_iban,
    validate_message,
    validate_payment_identifier,
    validate_version,
)
from payme.integration.bysquare import BySquarePayment, PayBySquareEncoder, QRPayloadEncoder
from payme.integration.url_mapper import UrlLike, UrlMapper

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r'[^0-9]')


class LinkSource(Enum):
    """Where the fields of a payment link come from."""
    DEFAULT = "default"
    URL = "url"
    PARAMS = "params"


class PaymentLink:
    """
    PayMe payment link record.

    Holds version, IBAN, amount, currency and the optional due date,
    payment identifier, message and creditor name. Every field satisfies
    the standard's constraints after construction and after each setter.

    Usage:
        link = PaymentLink.from_url("https://payme.sk/?V=1&IBAN=SK...&AM=10&CC=EUR")
        link.set_message("Dinner").set_amount(12.5)
        print(link.to_url())
    """
    _url_mapper = UrlMapper()

    def __init__(self):
        """Create a clean link: version 1, empty IBAN, amount 0, EUR."""
        self._apply(self._validate(LinkSource.DEFAULT, PaymentLinkParams(
            V=PayMeVersion.V1.value,
            IBAN="",
            AM=0,
            CC=CurrencyCode.EUR.value,
        )))

    # CONSTRUCTION
    @classmethod
    def from_params(cls, params: Union[PaymentLinkParams, Mapping[str, Any]]) -> "PaymentLink":
        """
        Create a link from a parameter object.

        Args:
            params: PaymentLinkParams or a mapping with the same keys
                (V, IBAN, AM, CC, DT, PI, MSG, CN)
        """
        if not isinstance(params, PaymentLinkParams):
            if not isinstance(params, Mapping):
                raise InvalidInputError(
                    f"Expected a parameter object, got {type(params).__name__}"
                )
            try:
                params = PaymentLinkParams.model_validate(dict(params))
            except ValidationError as e:
                raise InvalidInputError(f"Invalid parameter object: {e}") from e
        return cls._build(LinkSource.PARAMS, params)

    @classmethod
    def from_url(cls, url: UrlLike) -> "PaymentLink":
        """
        Create a link from a PayMe URL.

        Any base URL is accepted; only the query parameters are read.
        """
        return cls._build(LinkSource.URL, cls._url_mapper.params_from_url(url))

    @classmethod
    def parse(cls, value: Union[None, UrlLike, PaymentLinkParams, Mapping[str, Any]]) -> "PaymentLink":
        """
        Create a link from whichever input is given.

        None yields a clean link, strings and parsed URLs are read as PayMe
        URLs, parameter objects and mappings as parameters.
        """
        if value is None:
            return cls()
        if isinstance(value, (PaymentLinkParams, Mapping)):
            return cls.from_params(value)
        try:
            query = cls._url_mapper.query_from_url(value)
        except InvalidInputError:
            raise InvalidInputError(
                f"Invalid input type: {type(value).__name__}"
            ) from None
        return cls._build(LinkSource.URL, cls._url_mapper.params_from_query(query))

    @classmethod
    def _build(cls, source: LinkSource, params: PaymentLinkParams) -> "PaymentLink":
        fields = cls._validate(source, params)
        link = cls()
        link._apply(fields)
        return link

    @staticmethod
    def _validate(source: LinkSource, params: PaymentLinkParams) -> dict:
        """
        Check every field of a parameter object.

        Order: IBAN, version/currency, amount, due date, payment identifier,
        message, creditor name. The first violation raises.
        """
        logger.debug(f"Validating payment link fields from {source.value} source")

        iban = params.IBAN or ""
        if source is not LinkSource.DEFAULT:
            iban = validate_iban(iban)

        version = validate_version(params.V)
        currency = validate_currency(params.CC, version)
        amount = validate_amount(params.AM)

        return {
            "version": version,
            "iban": iban,
            "amount": amount,
            "currency": currency,
            "due_date": parse_due_date(params.DT) if params.DT else None,
            "payment_identifier": (
                validate_payment_identifier(params.PI) if params.PI else None
            ),
            "message": validate_message(params.MSG) if params.MSG else None,
            "creditor_name": validate_creditor_name(params.CN) if params.CN else None,
        }

    def _apply(self, fields: dict) -> None:
        self.version: PayMeVersion = fields["version"]
        self.iban: str = fields["iban"]
        self.amount: float = fields["amount"]
        self.currency: CurrencyCode = fields["currency"]
        self.due_date: Optional[date] = fields["due_date"]
        self.payment_identifier: Optional[str] = fields["payment_identifier"]
        self.message: Optional[str] = fields["message"]
        self.creditor_name: Optional[str] = fields["creditor_name"]

    # ACCESSORS
    @property
    def params(self) -> PaymentLinkParams:
        """
        Parameter object of the link.

        V, IBAN, AM and CC are always present; DT (as YYYY-MM-DD), PI, MSG
        and CN only when set.
        """
        return PaymentLinkParams(
            V=self.version.value,
            IBAN=self.iban,
            AM=self.amount,
            CC=self.currency.value,
            DT=self.due_date.isoformat() if self.due_date else None,
            PI=self.payment_identifier or None,
            MSG=self.message or None,
            CN=self.creditor_name or None,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.params.model_dump(exclude_none=True)

    # MUTATORS
    def set_version(self, version: Union[str, PayMeVersion]) -> "PaymentLink":
        """
        Set the version of the link.

        The current currency must be valid for the new version.
        """
        new_version = validate_version(version)
        validate_currency(self.currency, new_version)
        self.version = new_version
        return self

    def set_iban(self, iban: str) -> "PaymentLink":
        self.iban = validate_iban(iban)
        return self

    def set_amount(self, amount: float) -> "PaymentLink":
        self.amount = validate_amount(amount)
        return self

    def set_currency(self, currency: Union[str, CurrencyCode]) -> "PaymentLink":
        self.currency = validate_currency(currency, self.version)
        return self

    def set_due_date(self, due_date: Union[str, date, None]) -> "PaymentLink":
        """
        Set the due date from a date, a YYYYMMDD or a YYYY-MM-DD string.

        None or an empty string removes the due date.
        """
        self.due_date = parse_due_date(due_date) if due_date else None
        return self

    def set_payment_identifier(self, payment_identifier: Optional[str]) -> "PaymentLink":
        self.payment_identifier = (
            validate_payment_identifier(payment_identifier) if payment_identifier else None
        )
        return self

    def set_message(self, message: Optional[str]) -> "PaymentLink":
        self.message = validate_message(message) if message else None
        return self

    def set_creditor_name(self, creditor_name: Optional[str]) -> "PaymentLink":
        self.creditor_name = validate_creditor_name(creditor_name) if creditor_name else None
        return self

    # SERIALIZATION
    def to_url(self, base_url: Optional[str] = None) -> str:
        """
        Render the link as a PayMe URL.

        Query keys follow the order V, IBAN, AM, CC, DT, PI, MSG, CN.
        """
        url = self._url_mapper.build_url(self.params, base_url or DEFAULT_BASE_URL)
        logger.debug(f"Rendered payment link {url}")
        return url

    def get_link(self) -> str:
        return self.to_url()

    def payment_symbols(self) -> tuple[str, str, str]:
        """
        Extract the variable, specific and constant symbols.

        The payment identifier is split on "/" and only the digits of the
        three segments after the leading one are kept. Missing segments
        (or a missing identifier) yield empty strings.
        """
        if not self.payment_identifier:
            return ("", "", "")
        segments = self.payment_identifier.split("/")[1:4]
        symbols = [_NON_DIGITS.sub("", segment) for segment in segments]
        symbols += [""] * (3 - len(symbols))
        return (symbols[0], symbols[1], symbols[2])

    def to_bysquare_payment(self) -> BySquarePayment:
        variable_symbol, specific_symbol, constant_symbol = self.payment_symbols()
        return BySquarePayment(
            iban=self.iban,
            amount=self.amount,
            currency_code=self.currency.value,
            variable_symbol=variable_symbol,
            specific_symbol=specific_symbol,
            constant_symbol=constant_symbol,
            payment_note=self.message or "",
        )

    def get_pay_by_square(self, encoder: Optional[QRPayloadEncoder] = None) -> str:
        """
        Get the contents of a PAY by square QR code for this link.

        Args:
            encoder: QR payload encoder; PayBySquareEncoder when omitted

        Returns:
            Payload produced by the encoder, uninterpreted

        See https://bysquare.com/pay-by-square/
        """
        encoder = encoder or PayBySquareEncoder()
        return encoder.encode(self.to_bysquare_payment())

    def __str__(self) -> str:
        return self.to_url()

    def __repr__(self) -> str:
        return f"PaymentLink({self.to_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaymentLink):
            return NotImplemented
        return self.to_dict() == other.to_dict()
