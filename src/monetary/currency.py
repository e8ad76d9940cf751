from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)


class Currency:
    """Represents a monetary unit identified by code and display symbol.

    Currencies are immutable value objects. Two currencies are equal when both
    $code and $symbol are equal, so they can be used as dictionary keys.

    No validation is done on $code or $symbol; any strings are accepted and
    stored verbatim.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        symbol (str): Display symbol (e.g., "$", "₿").
    """

    __slots__ = ("_code", "_symbol")

    # Class-level registry for looking up currencies by code
    _registry: Dict[str, "Currency"] = {}

    def __init__(self, code: str, symbol: str):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").
            symbol (str): Display symbol (e.g., "$", "₿").
        """
        object.__setattr__(self, "_code", code)
        object.__setattr__(self, "_symbol", symbol)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def symbol(self) -> str:
        """Get the currency symbol."""
        return self._symbol

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"Cannot set attribute '{name}' because `Currency` is immutable")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"Cannot delete attribute '{name}' because `Currency` is immutable")

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency in the lookup registry under its code.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite an existing currency with the same code.

        Raises:
            ValueError: If currency already exists and $overwrite is False.
            TypeError: If $currency is not Currency instance.
        """
        # Raise: only Currency instances can live in the registry
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        existing = cls._registry.get(currency.code)
        if existing is not None and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency
        if existing is None:
            logger.debug(f"Registered currency {currency!r}")
        elif existing != currency:
            logger.debug(f"Replaced registered currency {existing!r} with {currency!r}")

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Get currency from registry by code.

        Lookup is exact: codes are not normalized because they are not validated either.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The registered currency instance.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        if code not in cls._registry:
            raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}")

        return cls._registry[code]

    @classmethod
    def registered(cls) -> Dict[str, Currency]:
        """Return a snapshot of the registry, keyed by currency code."""
        return dict(cls._registry)

    def __eq__(self, other) -> bool:
        """Check equality with another Currency by code and symbol."""
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code and self.symbol == other.symbol

    def __hash__(self) -> int:
        """Hash based on code and symbol."""
        return hash((self.code, self.symbol))

    def __str__(self) -> str:
        """Return string like '$ (USD)'."""
        return f"{self.symbol} ({self.code})"

    def __repr__(self) -> str:
        """Return string like "Currency('USD', '$')"."""
        return f"{self.__class__.__name__}({self.code!r}, {self.symbol!r})"
