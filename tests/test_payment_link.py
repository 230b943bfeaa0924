"""
Unit Tests for PaymentLink

Tests the payment link record:
- Construction from defaults, parameter objects and URLs
- Validation order and failure behavior
- Chained setters
- URL rendering and round trips
- Symbol extraction and PAY by square delegation
"""
from datetime import date
from urllib.parse import urlsplit

import pytest

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
from payme.core.payment_link import PaymentLink
from payme.core.schema import PaymentLinkParams, PayMeVersion
from payme.integration.bysquare import MockQRPayloadEncoder


IBAN = "SK3112000000198742637541"


# --------------------------------------------------
# Fixtures
# --------------------------------------------------
@pytest.fixture
def minimal_params():
    """Parameter object with only the required fields."""
    return {"V": "1", "IBAN": IBAN, "AM": 10, "CC": "EUR"}


@pytest.fixture
def full_params():
    """Parameter object with every field set."""
    return {
        "V": "1",
        "IBAN": IBAN,
        "AM": 12.5,
        "CC": "EUR",
        "DT": "20250115",
        "PI": "/VS123/SS456/KS78",
        "MSG": "Dinner for two",
        "CN": "Ján Novák",
    }


@pytest.fixture
def full_link(full_params):
    return PaymentLink.from_params(full_params)


# --------------------------------------------------
# Test: Construction
# --------------------------------------------------
class TestDefaultConstruction:
    """Tests for the clean, input-less link."""

    def test_default_params(self):
        """Should hold version 1, empty IBAN, amount 0 and EUR."""
        assert PaymentLink().to_dict() == {"V": "1", "IBAN": "", "AM": 0, "CC": "EUR"}

    def test_default_url(self):
        assert str(PaymentLink()) == "https://payme.sk/?V=1&IBAN=&AM=0&CC=EUR"

    def test_default_optional_fields_unset(self):
        link = PaymentLink()

        assert link.due_date is None
        assert link.payment_identifier is None
        assert link.message is None
        assert link.creditor_name is None

    def test_parse_none_gives_default(self):
        assert PaymentLink.parse(None) == PaymentLink()


class TestParamsConstruction:
    """Tests for construction from a parameter object."""

    def test_minimal_round_trip(self, minimal_params):
        """Reading params back should give the same fields."""
        assert PaymentLink.from_params(minimal_params).to_dict() == minimal_params

    def test_full_round_trip_normalizes_date(self, full_params):
        """Due date comes back as YYYY-MM-DD; other fields are unchanged."""
        expected = dict(full_params, DT="2025-01-15")

        assert PaymentLink.from_params(full_params).to_dict() == expected

    def test_accepts_pydantic_model(self, minimal_params):
        link = PaymentLink.from_params(PaymentLinkParams(**minimal_params))

        assert link.iban == IBAN
        assert link.amount == 10

    def test_typed_fields(self, full_link):
        assert full_link.version is PayMeVersion.V1
        assert full_link.currency is CurrencyCode.EUR
        assert full_link.due_date == date(2025, 1, 15)

    def test_accepts_date_object(self, minimal_params):
        link = PaymentLink.from_params(dict(minimal_params, DT=date(2025, 3, 1)))

        assert link.params.DT == "2025-03-01"

    def test_empty_optional_strings_are_unset(self, minimal_params):
        link = PaymentLink.from_params(dict(minimal_params, PI="", MSG="", CN=""))

        assert link.to_dict() == minimal_params

    def test_parse_dispatches_mapping(self, minimal_params):
        assert PaymentLink.parse(minimal_params) == PaymentLink.from_params(minimal_params)

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidInputError):
            PaymentLink.from_params(["V", "1"])

    def test_rejects_wrong_field_types(self, minimal_params):
        with pytest.raises(InvalidInputError):
            PaymentLink.from_params(dict(minimal_params, MSG=["not", "text"]))

    @pytest.mark.parametrize("amount", [True, False])
    def test_rejects_boolean_amount(self, minimal_params, amount):
        with pytest.raises(InvalidInputError):
            PaymentLink.from_params(dict(minimal_params, AM=amount))

    def test_numeric_string_amount_is_parsed(self, minimal_params):
        assert PaymentLink.from_params(dict(minimal_params, AM="12.50")).amount == 12.5


class TestConstructionValidation:
    """Tests that construction rejects invalid fields with distinct errors."""

    def test_rejects_empty_iban(self, minimal_params):
        """Empty IBAN is only allowed for the default link."""
        with pytest.raises(InvalidIBANError):
            PaymentLink.from_params(dict(minimal_params, IBAN=""))

    def test_rejects_lowercase_iban(self, minimal_params):
        with pytest.raises(InvalidIBANError):
            PaymentLink.from_params(dict(minimal_params, IBAN=IBAN.lower()))

    def test_rejects_unknown_version(self, minimal_params):
        with pytest.raises(UnsupportedVersionError):
            PaymentLink.from_params(dict(minimal_params, V="2"))

    def test_rejects_usd_in_version_1(self, minimal_params):
        with pytest.raises(UnsupportedCurrencyError):
            PaymentLink.from_params(dict(minimal_params, CC="USD"))

    def test_rejects_missing_currency(self, minimal_params):
        del minimal_params["CC"]
        with pytest.raises(UnsupportedCurrencyError):
            PaymentLink.from_params(minimal_params)

    @pytest.mark.parametrize("amount", [-1, 10000000])
    def test_rejects_amount_out_of_range(self, minimal_params, amount):
        with pytest.raises(InvalidAmountError):
            PaymentLink.from_params(dict(minimal_params, AM=amount))

    @pytest.mark.parametrize("amount", [0, 9999999])
    def test_accepts_amount_boundaries(self, minimal_params, amount):
        assert PaymentLink.from_params(dict(minimal_params, AM=amount)).amount == amount

    def test_rejects_missing_amount(self, minimal_params):
        del minimal_params["AM"]
        with pytest.raises(InvalidAmountError):
            PaymentLink.from_params(minimal_params)

    def test_rejects_bad_due_date(self, minimal_params):
        with pytest.raises(InvalidDueDateError):
            PaymentLink.from_params(dict(minimal_params, DT="15.01.2025"))

    def test_rejects_long_payment_identifier(self, minimal_params):
        with pytest.raises(InvalidPaymentIdentifierError):
            PaymentLink.from_params(dict(minimal_params, PI="/VS1234567890/SS1234567890/KS12345"))

    def test_rejects_long_message(self, minimal_params):
        with pytest.raises(MessageTooLongError):
            PaymentLink.from_params(dict(minimal_params, MSG="m" * 141))

    def test_rejects_long_creditor_name(self, minimal_params):
        with pytest.raises(CreditorNameTooLongError):
            PaymentLink.from_params(dict(minimal_params, CN="n" * 71))

    def test_iban_checked_first(self, minimal_params):
        """With several violations, the IBAN error wins."""
        with pytest.raises(InvalidIBANError):
            PaymentLink.from_params(dict(minimal_params, IBAN="bad", CC="USD", MSG="m" * 141))

    def test_currency_checked_before_message(self, minimal_params):
        with pytest.raises(UnsupportedCurrencyError):
            PaymentLink.from_params(dict(minimal_params, CC="USD", MSG="m" * 141))


class TestUrlConstruction:
    """Tests for construction from a PayMe URL."""

    def test_parses_all_fields(self):
        link = PaymentLink.from_url(
            "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=25.40&CC=EUR"
            "&DT=20250115&PI=%2FVS123%2FSS%2FKS0308&MSG=Rent+May&CN=Jan+Novak"
        )

        assert link.iban == IBAN
        assert link.amount == 25.4
        assert link.due_date == date(2025, 1, 15)
        assert link.payment_identifier == "/VS123/SS/KS0308"
        assert link.message == "Rent May"
        assert link.creditor_name == "Jan Novak"

    def test_any_base_url(self):
        link = PaymentLink.from_url("https://example.com/pay?IBAN=SK3112000000198742637541&V=1&AM=1&CC=EUR")

        assert link.amount == 1

    def test_parse_dispatches_string(self):
        url = "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=3&CC=EUR"

        assert PaymentLink.parse(url) == PaymentLink.from_url(url)

    def test_parse_dispatches_parsed_url(self):
        url = "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=3&CC=EUR"

        assert PaymentLink.parse(urlsplit(url)) == PaymentLink.from_url(url)

    def test_rejects_url_without_iban(self):
        with pytest.raises(InvalidIBANError):
            PaymentLink.from_url("https://payme.sk/?V=1&AM=3&CC=EUR")

    def test_rejects_non_numeric_amount(self):
        with pytest.raises(InvalidAmountError):
            PaymentLink.from_url("https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=ten&CC=EUR")

    def test_rejects_malformed_due_date(self):
        with pytest.raises(InvalidDueDateError):
            PaymentLink.from_url("https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=3&CC=EUR&DT=2025-1-5")

    @pytest.mark.parametrize("value", [42, 4.2, object(), b"https://payme.sk/"])
    def test_parse_rejects_other_input_types(self, value):
        with pytest.raises(InvalidInputError):
            PaymentLink.parse(value)


# --------------------------------------------------
# Test: Setters
# --------------------------------------------------
class TestSetters:
    """Tests for field setters."""

    def test_setters_chain(self):
        link = (
            PaymentLink()
            .set_iban(IBAN)
            .set_amount(99.9)
            .set_currency("EUR")
            .set_due_date("20251231")
            .set_payment_identifier("/VS1/SS2/KS3")
            .set_message("Thanks")
            .set_creditor_name("Shop")
        )

        assert link.to_dict() == {
            "V": "1",
            "IBAN": IBAN,
            "AM": 99.9,
            "CC": "EUR",
            "DT": "2025-12-31",
            "PI": "/VS1/SS2/KS3",
            "MSG": "Thanks",
            "CN": "Shop",
        }

    def test_setter_returns_same_instance(self):
        link = PaymentLink()

        assert link.set_amount(1) is link

    def test_long_message_leaves_previous_value(self, full_link):
        """A rejected message must not replace the current one."""
        with pytest.raises(MessageTooLongError):
            full_link.set_message("m" * 141)

        assert full_link.message == "Dinner for two"

    def test_invalid_iban_leaves_previous_value(self, full_link):
        with pytest.raises(InvalidIBANError):
            full_link.set_iban("12SK34567890")

        assert full_link.iban == IBAN

    @pytest.mark.parametrize("amount", [-1, 10000000])
    def test_invalid_amount_leaves_previous_value(self, full_link, amount):
        with pytest.raises(InvalidAmountError):
            full_link.set_amount(amount)

        assert full_link.amount == 12.5

    def test_rejects_non_eur_currency(self, full_link):
        with pytest.raises(UnsupportedCurrencyError):
            full_link.set_currency("USD")

        assert full_link.currency is CurrencyCode.EUR

    def test_rejects_bad_due_date(self, full_link):
        with pytest.raises(InvalidDueDateError):
            full_link.set_due_date("not a date")

        assert full_link.due_date == date(2025, 1, 15)

    def test_due_date_accepts_date(self):
        link = PaymentLink().set_due_date(date(2026, 2, 28))

        assert link.due_date == date(2026, 2, 28)

    def test_due_date_none_clears(self, full_link):
        full_link.set_due_date(None)

        assert "DT" not in full_link.to_dict()

    def test_due_date_empty_clears(self, full_link):
        full_link.set_due_date("")

        assert full_link.due_date is None
        assert "DT" not in full_link.to_dict()

    def test_due_date_rejects_padded_string(self, full_link):
        with pytest.raises(InvalidDueDateError):
            full_link.set_due_date(" 20250301 ")

        assert full_link.due_date == date(2025, 1, 15)

    @pytest.mark.parametrize("setter, field", [
        ("set_payment_identifier", "payment_identifier"),
        ("set_message", "message"),
        ("set_creditor_name", "creditor_name"),
    ])
    def test_text_setters_reject_non_strings(self, full_link, setter, field):
        """A non-string value raises a validation error and keeps the current value."""
        previous = getattr(full_link, field)

        with pytest.raises(InvalidInputError):
            getattr(full_link, setter)(123)

        assert getattr(full_link, field) == previous

    def test_payment_identifier_pattern_enforced(self, full_link):
        with pytest.raises(InvalidPaymentIdentifierError):
            full_link.set_payment_identifier("VS123")

        assert full_link.payment_identifier == "/VS123/SS456/KS78"

    def test_payment_identifier_length_enforced(self):
        with pytest.raises(InvalidPaymentIdentifierError, match="too long"):
            PaymentLink().set_payment_identifier("/VS" + "1" * 40)

    def test_long_creditor_name_rejected(self, full_link):
        with pytest.raises(CreditorNameTooLongError):
            full_link.set_creditor_name("n" * 71)

        assert full_link.creditor_name == "Ján Novák"

    def test_set_version_accepts_supported(self):
        assert PaymentLink().set_version("1").version is PayMeVersion.V1

    def test_set_version_rejects_unknown(self):
        with pytest.raises(UnsupportedVersionError):
            PaymentLink().set_version("2")

    def test_set_version_rechecks_currency(self):
        """Changing the version re-applies the currency/version coupling."""
        link = PaymentLink()
        link.currency = CurrencyCode.USD

        with pytest.raises(UnsupportedCurrencyError):
            link.set_version("1")


# --------------------------------------------------
# Test: Serialization
# --------------------------------------------------
class TestUrlRendering:
    """Tests for canonical URL rendering."""

    def test_full_url(self, full_link):
        assert full_link.to_url() == (
            "https://payme.sk/?V=1&IBAN=SK3112000000198742637541&AM=12.5&CC=EUR"
            "&DT=2025-01-15&PI=%2FVS123%2FSS456%2FKS78&MSG=Dinner+for+two"
            "&CN=J%C3%A1n+Nov%C3%A1k"
        )

    def test_due_date_rendering(self, minimal_params):
        link = PaymentLink.from_params(dict(minimal_params, DT="20250115"))

        assert link.due_date == date(2025, 1, 15)
        assert "DT=2025-01-15" in link.to_url()

    def test_whole_amount_has_no_fraction(self, minimal_params):
        link = PaymentLink.from_params(dict(minimal_params, AM=9999999))

        assert "&AM=9999999&" in link.to_url()

    def test_get_link_matches_str(self, full_link):
        assert full_link.get_link() == str(full_link) == full_link.to_url()

    def test_custom_base_url(self, minimal_params):
        link = PaymentLink.from_params(minimal_params)

        assert link.to_url("https://pay.example.com/").startswith("https://pay.example.com/?V=1&")

    def test_url_round_trip(self, full_link):
        """Rendering and re-parsing gives an equal record."""
        assert PaymentLink.from_url(full_link.to_url()) == full_link

    def test_url_round_trip_minimal(self, minimal_params):
        link = PaymentLink.from_params(minimal_params)

        assert PaymentLink.from_url(link.to_url()).to_dict() == minimal_params


class TestPaymentSymbols:
    """Tests for variable/specific/constant symbol extraction."""

    def test_extracts_all_symbols(self, full_link):
        assert full_link.payment_symbols() == ("123", "456", "78")

    def test_no_identifier_gives_empty_symbols(self):
        assert PaymentLink().payment_symbols() == ("", "", "")

    def test_keeps_only_digits(self):
        link = PaymentLink().set_payment_identifier("/VS12ab3/SS/KS0308")

        assert link.payment_symbols() == ("123", "", "0308")

    def test_missing_segments_default_to_empty(self):
        link = PaymentLink()
        link.payment_identifier = "/VS42"

        assert link.payment_symbols() == ("42", "", "")


class TestPayBySquare:
    """Tests for delegation to the QR payload encoder."""

    def test_passes_fields_to_encoder(self, full_link):
        encoder = MockQRPayloadEncoder()

        payload = full_link.get_pay_by_square(encoder)

        payment = encoder.last_payment
        assert payment.iban == IBAN
        assert payment.amount == 12.5
        assert payment.currency_code == "EUR"
        assert payment.variable_symbol == "123"
        assert payment.specific_symbol == "456"
        assert payment.constant_symbol == "78"
        assert payment.payment_note == "Dinner for two"
        assert payload == "SK3112000000198742637541|12.50|EUR|123|456|78|Dinner for two"

    def test_defaults_without_identifier_or_message(self, minimal_params):
        encoder = MockQRPayloadEncoder()

        PaymentLink.from_params(minimal_params).get_pay_by_square(encoder)

        payment = encoder.last_payment
        assert (payment.variable_symbol, payment.specific_symbol, payment.constant_symbol) == ("", "", "")
        assert payment.payment_note == ""
