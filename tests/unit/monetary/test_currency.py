import pytest

from monetary.currency import Currency
from monetary.currency_registry import CNY, EUR, GBP, JPY, USD

ALL_PREDEFINED = [USD, EUR, JPY, CNY, GBP]


def test_currency_constants():
    assert USD.code == "USD"
    assert USD.symbol == "$"
    assert EUR.symbol == "€"
    assert JPY.symbol == "¥"
    assert CNY.symbol == "元"
    assert GBP.symbol == "£"


def test_custom_currency_creation():
    btc = Currency("BTC", "₿")
    assert btc.code == "BTC"
    assert btc.symbol == "₿"


def test_any_strings_are_accepted_verbatim():
    odd = Currency(" usd ", "")
    assert odd.code == " usd "
    assert odd.symbol == ""


@pytest.mark.parametrize("currency", ALL_PREDEFINED)
def test_rebuilt_currency_equals_original(currency):
    rebuilt = Currency(currency.code, currency.symbol)
    assert rebuilt == currency
    assert hash(rebuilt) == hash(currency)


def test_equality_needs_both_code_and_symbol():
    assert Currency("USD", "$") != Currency("USD", "US$")
    assert Currency("USD", "$") != Currency("AUD", "$")
    assert USD != "USD"


def test_currency_works_as_mapping_key():
    balances = {USD: 1, EUR: 2}
    assert balances[Currency("USD", "$")] == 1
    assert Currency("USD", "US$") not in balances


def test_currency_is_immutable():
    with pytest.raises(AttributeError):
        USD.code = "EUR"
    with pytest.raises(AttributeError):
        del USD.symbol


def test_currency_display():
    assert str(USD) == "$ (USD)"
    assert str(EUR) == "€ (EUR)"
    assert str(Currency("BTC", "₿")) == "₿ (BTC)"
    assert repr(USD) == "Currency('USD', '$')"


@pytest.mark.parametrize("currency", ALL_PREDEFINED)
def test_predefined_currencies_are_registered(currency):
    assert Currency.from_code(currency.code) is currency


def test_from_code_unknown_code():
    with pytest.raises(ValueError, match="'XYZ' not found in registry"):
        Currency.from_code("XYZ")


def test_from_code_is_exact():
    with pytest.raises(ValueError):
        Currency.from_code("usd")


def test_from_code_requires_string():
    with pytest.raises(TypeError):
        Currency.from_code(840)


def test_register_custom_currency(isolated_registry):
    btc = Currency("BTC", "₿")
    Currency.register(btc)
    assert Currency.from_code("BTC") is btc
    assert Currency.registered()["BTC"] is btc


def test_register_duplicate_code_requires_overwrite(isolated_registry):
    replacement = Currency("USD", "US$")
    with pytest.raises(ValueError, match="already exists"):
        Currency.register(replacement)
    assert Currency.from_code("USD") == USD

    Currency.register(replacement, overwrite=True)
    assert Currency.from_code("USD") is replacement


def test_register_rejects_non_currency(isolated_registry):
    with pytest.raises(TypeError):
        Currency.register("USD")


def test_registered_returns_snapshot():
    snapshot = Currency.registered()
    snapshot["FAKE"] = Currency("FAKE", "?")
    with pytest.raises(ValueError):
        Currency.from_code("FAKE")
