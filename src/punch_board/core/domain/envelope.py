"""
Envelope — Input and output models for the punch board calculator

Immutable Pydantic models describing an envelope request and the
resulting paper layout.
"""

import math

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# VALIDATION
# =============================================================================


class InvalidDimension(ValueError):
    """Envelope dimension is not a finite positive number."""

    pass


def check_dimension(name: str, value: float) -> float:
    """Return value if it is finite and > 0, else raise InvalidDimension."""
    if not math.isfinite(value):
        raise InvalidDimension(f"{name} must be a finite number, got {value}")
    if value <= 0:
        raise InvalidDimension(f"{name} must be positive, got {value}")
    return value


def validate_dimensions(length: float, width: float) -> None:
    """
    Validate envelope dimensions.

    Stricter than calculate_envelope(): rejects NaN/Inf, zero and negative
    values. Length is checked first.

    Raises:
        InvalidDimension: If a dimension is not finite or not > 0
    """
    check_dimension("length", length)
    check_dimension("width", width)


# =============================================================================
# INPUT
# =============================================================================


class EnvelopeDimensions(BaseModel):
    """
    Envelope content size plus board modifiers.

    Immutable model (frozen=True). Dimensions must be finite and positive.
    """

    length: float = Field(..., description="Content length")
    width: float = Field(..., description="Content width")
    is_loose: bool = Field(default=False, description="Loose-fitting envelope")
    is_mini: bool = Field(default=False, description="Mini punch board")

    model_config = {"frozen": True}  # Immutable

    @field_validator("length", "width")
    @classmethod
    def validate_dimension(cls, v: float, info) -> float:
        """Same rules as validate_dimensions(), one field at a time"""
        return check_dimension(info.field_name, v)


# =============================================================================
# OUTPUT
# =============================================================================


class EnvelopeLayout(BaseModel):
    """Paper layout for one envelope."""

    paper_size: float = Field(..., description="Side of the square paper sheet")
    punch_location: float = Field(..., description="Distance of the punch from the paper edge")
    margin: float = Field(..., gt=0, description="Margin used for the calculation")

    model_config = {"frozen": True}  # Immutable
