from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def decimal_from_parts(mantissa: int, scale: int) -> Decimal:
    """Builds an exact `Decimal` equal to $mantissa * 10 ** -$scale.

    The result keeps exactly $scale fractional digits, e.g. `(12345, 2)` gives
    `Decimal("123.45")` and `(0, 2)` gives `Decimal("0.00")`. No context rounding
    is involved.

    Args:
        mantissa: Integer digits of the value, including the sign.
        scale: Number of digits to the right of the decimal point.

    Returns:
        Decimal with the requested scale.

    Raises:
        ValueError: If $scale is negative.
    """
    # Raise: scale counts fractional digits, so it cannot be negative
    if scale < 0:
        raise ValueError(f"Cannot call `decimal_from_parts` because $scale ({scale}) < 0")

    sign, digits, _ = Decimal(int(mantissa)).as_tuple()
    return Decimal((sign, digits, -scale))
