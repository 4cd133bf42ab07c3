"""
Core math modules for the punch board calculator.

Closed-form envelope geometry and decimal-to-fraction conversion.
"""

# Envelope geometry
from punch_board.core.math.envelope import (
    DIST_MULTIPLIER,
    MARGIN_BASE,
    MARGIN_LOOSE_EXTRA,
    InvalidDimension,
    calculate_envelope,
    envelope_margin,
    layout_for,
    validate_dimensions,
)

# Decimal → fraction
from punch_board.core.math.decimal_fraction import (
    INT64_MAX,
    INT64_MIN,
    DecimalParseError,
    MalformedNumber,
    RangeExceeded,
    abs_int64,
    gcd,
    parse_decimal,
    parse_mixed_number,
)

__all__ = [
    # Envelope — Constants
    "DIST_MULTIPLIER",
    "MARGIN_BASE",
    "MARGIN_LOOSE_EXTRA",
    # Envelope — Exceptions
    "InvalidDimension",
    # Envelope — Functions
    "calculate_envelope",
    "envelope_margin",
    "layout_for",
    "validate_dimensions",
    # Decimal fraction — Constants
    "INT64_MAX",
    "INT64_MIN",
    # Decimal fraction — Exceptions
    "DecimalParseError",
    "MalformedNumber",
    "RangeExceeded",
    # Decimal fraction — Functions
    "abs_int64",
    "gcd",
    "parse_decimal",
    "parse_mixed_number",
]
