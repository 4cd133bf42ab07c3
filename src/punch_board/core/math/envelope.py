"""
Envelope — Paper size & punch location for a 1-2-3 punch board

The envelope content (length x width) is placed on a square sheet rotated
by 45°, so each side projects onto the board diagonal with factor 1/√2.

Formulas:
    margin = 1.1 (+0.4 if loose)
    dist1 = length * 1/√2
    dist2 = width * 1/√2

    paper_size = dist1 + dist2 + 2 * margin
    punch_location = margin + min(dist1, dist2)

Known limitation: the mini-board flag is accepted but does not change the
margin. Mini-board margin values are not wired in.
"""

from typing import Final

from punch_board.core.domain.envelope import (
    EnvelopeDimensions,
    EnvelopeLayout,
    InvalidDimension,
    validate_dimensions,
)

# =============================================================================
# MARGIN PARAMETERS
# =============================================================================

# Base margin around the projected envelope (same unit as the input)
MARGIN_BASE: Final[float] = 1.1

# Extra allowance for a loose-fitting envelope (1.1 + 0.4 = 1.5)
MARGIN_LOOSE_EXTRA: Final[float] = 0.4

# 1/sqrt(2), literal value
DIST_MULTIPLIER: Final[float] = 0.707106781187


# =============================================================================
# CALCULATION
# =============================================================================


def envelope_margin(is_loose: bool, is_mini: bool = False) -> float:
    """
    Margin between the projected envelope and the paper edge.

    Args:
        is_loose: Loose-fitting envelope (adds MARGIN_LOOSE_EXTRA)
        is_mini: Mini punch board (currently has no effect)

    Returns:
        1.1 or 1.5
    """
    margin = MARGIN_BASE
    if is_loose:
        margin += MARGIN_LOOSE_EXTRA
    return margin


def calculate_envelope(
    length: float,
    width: float,
    is_loose: bool,
    is_mini: bool,
) -> tuple[float, float]:
    """
    Paper size and punch location for an envelope.

    Never raises for numeric input: zero and negative dimensions produce
    numbers as-is. EnvelopeDimensions rejects them (validate_dimensions).

    Args:
        length: Envelope content length
        width: Envelope content width
        is_loose: Loose-fitting envelope
        is_mini: Mini punch board (currently has no effect)

    Returns:
        (paper_size, punch_location) in the input unit

    Examples:
        >>> paper, punch = calculate_envelope(10, 8, True, False)
        >>> round(paper, 2), round(punch, 2)
        (15.73, 7.16)
    """
    margin = envelope_margin(is_loose, is_mini)

    dist1 = length * DIST_MULTIPLIER
    dist2 = width * DIST_MULTIPLIER

    paper_size = dist1 + dist2 + 2 * margin
    punch_location = margin + min(dist1, dist2)

    return paper_size, punch_location


def layout_for(dimensions: EnvelopeDimensions) -> EnvelopeLayout:
    """
    Compute the full layout for validated dimensions.

    Args:
        dimensions: Validated envelope input

    Returns:
        EnvelopeLayout with paper size, punch location and the margin used
    """
    paper_size, punch_location = calculate_envelope(
        dimensions.length,
        dimensions.width,
        dimensions.is_loose,
        dimensions.is_mini,
    )
    return EnvelopeLayout(
        paper_size=paper_size,
        punch_location=punch_location,
        margin=envelope_margin(dimensions.is_loose, dimensions.is_mini),
    )
