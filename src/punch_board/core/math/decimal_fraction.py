"""
Decimal Fraction — Decimal string → simplified mixed number

Converts decimal-formatted strings ("1.25", "-.2", "3") into an exact
Rational (integer part + reduced fraction) for human-friendly display.

Supported only:
- optional leading sign on the integer part
- ASCII digits on both sides of a single decimal point
- fractional parts of up to 18 digits (10**digits must fit in int64)

Invariants:
1. Fraction is always stored in lowest terms
2. Zero fractional value is stored as 0/0, never 0/1
3. Integer part carries the sign when non-zero, numerator otherwise
"""

import re
from typing import Final

from punch_board.core.domain.rational import Rational

# =============================================================================
# CONSTANTS
# =============================================================================

# Signed 64-bit range used for integer part, numerator and denominator
INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)

DECIMAL_POINT: Final[str] = "."

_SIGNED_DIGITS_RE: Final = re.compile(r"[+-]?[0-9]+")
_DIGITS_RE: Final = re.compile(r"[0-9]+")
_MIXED_NUMBER_RE: Final = re.compile(
    r"(?:(?P<integer>[+-]?[0-9]+)(?: \+ (?P<frac1>[+-]?[0-9]+/[+-]?[0-9]+))?"
    r"|(?P<frac2>[+-]?[0-9]+/[+-]?[0-9]+))"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalParseError(ValueError):
    """Base class for decimal parsing failures."""

    pass


class MalformedNumber(DecimalParseError):
    """A non-digit character appeared where a digit was required."""

    pass


class RangeExceeded(DecimalParseError):
    """A parsed component does not fit in the signed 64-bit range."""

    pass


# =============================================================================
# INTEGER HELPERS
# =============================================================================


def abs_int64(x: int) -> int:
    """
    Absolute value of an integer.

    Examples:
        >>> abs_int64(-3)
        3
    """
    if x < 0:
        return -x
    return x


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor (Euclid) of two signed integers.

    Args:
        a: First integer (any sign)
        b: Second integer (any sign)

    Returns:
        Non-negative GCD. gcd(0, 0) == 0; callers must skip reduction then.

    Examples:
        >>> gcd(6, 27)
        3
        >>> gcd(-6, 27)
        3
        >>> gcd(0, 0)
        0
    """
    while b != 0:
        a, b = b, a % b
    return abs_int64(a)


def _parse_int64(text: str, source: str) -> int:
    if not _SIGNED_DIGITS_RE.fullmatch(text):
        raise MalformedNumber(f"parse_decimal: parsing {source!r}: invalid syntax in {text!r}")

    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise RangeExceeded(f"parse_decimal: parsing {text!r}: value out of range")
    return value


# =============================================================================
# PARSING
# =============================================================================


def parse_decimal(s: str) -> Rational:
    """
    Parse a decimal string into a simplified mixed number.

    Args:
        s: Decimal text, e.g. "1.25", "-3", "-.2", ".5", "" (zero)

    Returns:
        Rational with the fraction in lowest terms

    Raises:
        MalformedNumber: non-digit where a digit is required
        RangeExceeded: integer part or 10**len(fraction) outside int64

    Examples:
        >>> parse_decimal("1.2")
        Rational(integer=1, numerator=1, denominator=5)
        >>> parse_decimal("-.2")
        Rational(integer=0, numerator=-1, denominator=5)
    """
    sign = -1 if s.startswith("-") else 1

    int_text, _, frac_text = s.partition(DECIMAL_POINT)

    integer = 0
    if int_text and int_text not in ("+", "-"):
        integer = _parse_int64(int_text, s)

    numerator = 0
    denominator = 0
    if frac_text:
        if not _DIGITS_RE.fullmatch(frac_text):
            raise MalformedNumber(
                f"parse_decimal: parsing {s!r}: invalid syntax in {frac_text!r}"
            )

        d = 10 ** len(frac_text)
        if d > INT64_MAX:
            raise RangeExceeded(f"parse_decimal: parsing {frac_text!r}: value out of range")

        numerator = int(frac_text)
        if numerator != 0:
            denominator = d

        g = gcd(numerator, denominator)
        if g != 0:
            numerator //= g
            denominator //= g

        if integer == 0:
            numerator *= sign

    return Rational(integer=integer, numerator=numerator, denominator=denominator)


def parse_mixed_number(s: str) -> Rational:
    """
    Parse the rendered form of a Rational back into a Rational.

    Accepts "0", "i", "n/d" and "i + n/d" exactly as str(Rational) writes
    them. The fraction is kept as written apart from moving a negative sign
    off the denominator.

    Raises:
        MalformedNumber: text is not a rendered mixed number, or d == 0
        RangeExceeded: a component does not fit in int64
    """
    match = _MIXED_NUMBER_RE.fullmatch(s)
    if match is None:
        raise MalformedNumber(f"parse_mixed_number: parsing {s!r}: invalid syntax")

    integer = 0
    if match.group("integer") is not None:
        integer = _parse_int64(match.group("integer"), s)

    fraction = match.group("frac1") or match.group("frac2")
    if fraction is None:
        return Rational(integer=integer)

    num_text, _, den_text = fraction.partition("/")
    numerator = _parse_int64(num_text, s)
    denominator = _parse_int64(den_text, s)
    if denominator == 0:
        raise MalformedNumber(f"parse_mixed_number: parsing {s!r}: zero denominator")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    if numerator == 0:
        denominator = 0

    return Rational(integer=integer, numerator=numerator, denominator=denominator)
