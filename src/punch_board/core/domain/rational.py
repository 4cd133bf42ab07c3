"""
Rational — Mixed-number value type

Exact number of the form integer + numerator/denominator, produced by
parse_decimal() and consumed for display.

Conventions:
- numerator == 0 → denominator == 0 (no fractional part)
- integer != 0 → integer carries the sign, numerator stays positive
- integer == 0 → numerator carries the sign
"""

from fractions import Fraction

from pydantic import BaseModel, Field


class Rational(BaseModel):
    """
    Mixed number r = integer + numerator/denominator.

    Immutable model (frozen=True). Instances are built once by the parser
    and then only rendered.
    """

    integer: int = Field(default=0, description="Integer part (signed)")
    numerator: int = Field(default=0, description="Fraction numerator (signed)")
    denominator: int = Field(
        default=0, description="Fraction denominator (0 when there is no fraction)"
    )

    model_config = {"frozen": True}  # Immutable

    def __str__(self) -> str:
        """
        Render as a mixed number.

        Examples:
            >>> str(Rational(integer=1, numerator=1, denominator=5))
            '1 + 1/5'
            >>> str(Rational(numerator=-1, denominator=5))
            '-1/5'
            >>> str(Rational())
            '0'
        """
        s = ""
        if self.integer != 0:
            s += str(self.integer)

        if self.numerator != 0:
            if self.integer != 0:
                s += " + "

            n, d = self.numerator, self.denominator
            if d < 0:
                n, d = -n, -d
            s += f"{n}/{d}"

        if not s:
            s = "0"
        return s

    def has_fraction(self) -> bool:
        """True if a fractional part is present."""
        return self.numerator != 0

    def to_fraction(self) -> Fraction:
        """
        Exact value of the mixed number.

        The fractional part extends the integer part away from zero, so
        "-1 + 1/5" (parsed from "-1.2") is -6/5.

        Returns:
            fractions.Fraction equal to the represented value
        """
        if self.numerator == 0:
            return Fraction(self.integer)

        frac = Fraction(self.numerator, self.denominator)
        if self.integer < 0:
            return self.integer - frac
        return self.integer + frac
