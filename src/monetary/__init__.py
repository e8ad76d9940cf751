"""Monetary value objects.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions and Money calculations with exact decimal
arithmetic and currency-checked operations.
"""

__version__ = "0.0.1"

from monetary.currency import Currency
from monetary.currency_registry import CNY, EUR, GBP, JPY, USD
from monetary.money import CurrencyMismatchError, Money

__all__ = ["Currency", "CurrencyMismatchError", "Money", "USD", "EUR", "JPY", "CNY", "GBP"]
