from __future__ import annotations

from decimal import Decimal, Inexact, InvalidOperation, getcontext, localcontext

from monetary.config import get_config
from monetary.currency import Currency
from monetary.utils.numeric_tools import DecimalLike, as_decimal


class CurrencyMismatchError(ValueError):
    """Raised when an operation needs two Money values of the same currency but they differ."""

    def __init__(self, left_code: str, right_code: str):
        self.left_code = left_code
        self.right_code = right_code
        super().__init__(f"Currency mismatch: {left_code} vs {right_code}")


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for exact base-10 arithmetic. The amount is kept exactly as
    provided (no rounding to the currency's minor unit), so the scale of results follows
    normal Decimal rules: addition keeps the larger operand scale, multiplication sums
    the operand scales.

    Money is immutable; every arithmetic operation returns a new instance.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar). Decimals are stored unchanged.
            currency (Currency): Currency object.

        Raises:
            ValueError: If $amount cannot be converted to Decimal.
            TypeError: If $currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Money.__init__` because $currency is not Currency (got type '{type(currency).__name__}')")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) cannot be converted to Decimal") from e

        object.__setattr__(self, "_amount", decimal_amount)
        object.__setattr__(self, "_currency", currency)

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"Cannot set attribute '{name}' because `Money` is immutable")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"Cannot delete attribute '{name}' because `Money` is immutable")

    def _check_same_currency(self, other: Money) -> None:
        """Check if two Money objects have the same currency.

        Args:
            other (Money): The other Money object.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    # Arithmetic operations
    @staticmethod
    def _exact_context():
        """Return a decimal context that raises `decimal.Inexact` instead of rounding a result."""
        ctx = getcontext().copy()
        ctx.prec = get_config().decimal_precision
        ctx.traps[Inexact] = True
        return localcontext(ctx)

    def add(self, other: Money) -> Money:
        """Return the sum of two Money objects with the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
            decimal.Inexact: If the exact sum needs more digits than the configured precision.
        """
        self._check_same_currency(other)
        with self._exact_context():
            return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        """Return $self minus $other; both must share a currency. Negative results are valid.

        Raises:
            CurrencyMismatchError: If currencies don't match.
            decimal.Inexact: If the exact difference needs more digits than the configured precision.
        """
        self._check_same_currency(other)
        with self._exact_context():
            return Money(self.amount - other.amount, self.currency)

    def multiply_scalar(self, factor: DecimalLike) -> Money:
        """Multiply the amount by a plain number; currency stays the same.

        Args:
            factor: Decimal-like multiplier.

        Returns:
            Money: New instance whose scale is the sum of both operand scales.

        Raises:
            ValueError: If $factor cannot be converted to Decimal.
            decimal.Inexact: If the exact product needs more digits than the configured precision.
        """
        # Raise: $factor must be convertible to Decimal
        try:
            decimal_factor = as_decimal(factor)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot call `multiply_scalar` because $factor ({factor}) cannot be converted to Decimal") from e

        with self._exact_context():
            return Money(self.amount * decimal_factor, self.currency)

    def multiply(self, other: Money) -> Money:
        """Multiply the amounts of two Money objects with the same currency.

        The result keeps $self.currency even though the unit is really currency squared.
        Prefer `multiply_scalar` unless this is genuinely what is needed.

        Raises:
            CurrencyMismatchError: If currencies don't match.
            decimal.Inexact: If the exact product needs more digits than the configured precision.
        """
        self._check_same_currency(other)
        with self._exact_context():
            return Money(self.amount * other.amount, self.currency)

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply by Money (same currency) or by a number."""
        if isinstance(other, Money):
            return self.multiply(other)
        if isinstance(other, (Decimal, int, str, float)) and not isinstance(other, bool):
            try:
                return self.multiply_scalar(other)
            except ValueError:
                return NotImplemented
        return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        """Check equality: same currency and numerically equal amount."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency == other.currency and self.amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency."""
        return hash((self.amount, self.currency))

    # String representations
    def __str__(self) -> str:
        """Return string like '$ 123.45'; always two decimal places, whatever the currency."""
        return f"{self.currency.symbol} {self.amount:.2f}"

    def __repr__(self) -> str:
        """Return string like "Money(Decimal('1.00'), Currency('USD', '$'))"."""
        return f"{self.__class__.__name__}({self.amount!r}, {self.currency!r})"
