"""Integer helpers plus decimal conversion and formatting used throughout the package."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal(0)
ONE = Decimal(1)


def int_pow(base, exponent):
    """Return ``base`` raised to ``exponent``; a non-positive exponent gives 1."""
    return base**exponent if exponent > 0 else 1


def int_abs(value):
    """Return the absolute value of an integer."""
    return -value if value < 0 else value


def to_decimal(value):
    """Convert an int, float, string or Decimal to a Decimal.

    Floats go through their shortest textual form, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not decimal values")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"invalid decimal value {value!r}") from exc
    raise TypeError(f"cannot convert {type(value).__name__} to a decimal")


def format_decimal(value, places=None):
    """Render a decimal as plain text.

    With ``places`` the value is rounded to that many fractional digits;
    without it the shortest exact form is used (``"1"``, ``"0.25"``).
    """
    value = to_decimal(value)
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Inf" if value < 0 else "Inf"
    if places is None:
        if value.is_zero():
            return "0"
        return format(value.normalize(), "f")
    return format(value, f".{places}f")