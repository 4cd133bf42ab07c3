"""
Domain models and value objects.

Contains the envelope input/output models and the Rational mixed number.
"""

from punch_board.core.domain.envelope import (
    EnvelopeDimensions,
    EnvelopeLayout,
    InvalidDimension,
    validate_dimensions,
)
from punch_board.core.domain.rational import Rational

__all__ = [
    # Envelope models
    "EnvelopeDimensions",
    "EnvelopeLayout",
    # Envelope validation
    "InvalidDimension",
    "validate_dimensions",
    # Mixed number
    "Rational",
]
