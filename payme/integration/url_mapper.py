"""
URL Mapper - PayMe Link Query String to Parameter Object

This module provides the transformation layer between:
- Raw query strings of PayMe links (any base URL, string values)
- The PaymentLinkParams parameter object

Design Intent:
- Gracefully handle missing keys (validation happens later, in the record)
- Keep the first value when a key repeats
- Emit query parameters in the fixed order of the standard
"""
import math
from datetime import date
from typing import Mapping, Optional, Union
from urllib.parse import ParseResult, SplitResult, parse_qsl, urlencode, urlsplit

from payme.core.errors import InvalidAmountError, InvalidInputError
from payme.core.schema import PaymentLinkParams


# Query keys in the order they are rendered
QUERY_KEYS = ("V", "IBAN", "AM", "CC", "DT", "PI", "MSG", "CN")

UrlLike = Union[str, SplitResult, ParseResult]


def format_amount(amount: float) -> str:
    """
    Render an amount as the shortest numeric string.

    Whole amounts drop the fractional part (12.0 -> "12"); other amounts
    use the shortest repr that round-trips (12.5 -> "12.5").
    """
    if isinstance(amount, float) and math.isfinite(amount) and amount.is_integer():
        return str(int(amount))
    return repr(amount) if isinstance(amount, float) else str(amount)


class UrlMapper:
    """
    Maps PayMe link query strings to PaymentLinkParams and back.

    Handles:
    - Full URLs, parsed URLs and bare query strings
    - Numeric parsing of the amount
    - Value stringification on the way out
    """

    @staticmethod
    def _extract_field_value(query: Mapping[str, str], key: str) -> Optional[str]:
        """Return the raw value of a query key, or None when absent."""
        return query.get(key)

    @staticmethod
    def _parse_amount(value: Optional[str]) -> Optional[float]:
        """Parse AM the way a numeric query value is read; absent stays None."""
        if value is None:
            return None
        try:
            return float(value.strip())
        except ValueError:
            raise InvalidAmountError(f"Amount is not a number: {value!r}") from None

    @staticmethod
    def _stringify(value: object) -> str:
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, float):
            return format_amount(value)
        return str(value)

    def query_from_url(self, url: UrlLike) -> dict[str, str]:
        """
        Extract query parameters from a URL or URL-like string.

        Args:
            url: Absolute or relative URL, a parsed URL, or a bare query
                string such as "V=1&IBAN=SK...".

        Returns:
            Mapping of query key to its first value, blank values kept
        """
        if isinstance(url, (SplitResult, ParseResult)):
            raw_query = url.query
        elif isinstance(url, str):
            parts = urlsplit(url.strip())
            raw_query = parts.query
            if not raw_query and not parts.scheme and "=" in parts.path:
                raw_query = parts.path.lstrip("?")
        else:
            raise InvalidInputError(f"Expected a URL, got {type(url).__name__}")

        query: dict[str, str] = {}
        for key, value in parse_qsl(raw_query, keep_blank_values=True):
            query.setdefault(key, value)
        return query

    def params_from_query(self, query: Mapping[str, str]) -> PaymentLinkParams:
        """
        Convert raw query values to a PaymentLinkParams object.

        Only V, IBAN, AM, CC, DT, PI, MSG and CN are read; other keys are
        ignored.
        """
        return PaymentLinkParams(
            V=self._extract_field_value(query, "V") or "",
            IBAN=self._extract_field_value(query, "IBAN") or "",
            AM=self._parse_amount(self._extract_field_value(query, "AM")),
            CC=self._extract_field_value(query, "CC"),
            DT=self._extract_field_value(query, "DT"),
            PI=self._extract_field_value(query, "PI"),
            MSG=self._extract_field_value(query, "MSG"),
            CN=self._extract_field_value(query, "CN"),
        )

    def params_from_url(self, url: UrlLike) -> PaymentLinkParams:
        return self.params_from_query(self.query_from_url(url))

    def query_from_params(self, params: PaymentLinkParams) -> list[tuple[str, str]]:
        """
        Convert a parameter object to ordered query pairs.

        Unset optional fields are left out.
        """
        values = params.model_dump(exclude_none=True)
        return [
            (key, self._stringify(values[key]))
            for key in QUERY_KEYS
            if key in values
        ]

    def build_url(self, params: PaymentLinkParams, base_url: str) -> str:
        """Render a parameter object as a PayMe link under base_url."""
        return f"{base_url}?{urlencode(self.query_from_params(params))}"
