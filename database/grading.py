"""
Percentage and letter grade derivation.

A student's percentage is the plain mean of the three subject marks. It is
rounded to two places (half-up) before it is stored, and the letter grade is
read off the rounded value using fixed bands.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

# Checked highest-first, lower bound inclusive
GRADE_BANDS = (
    (90.0, 'A'),
    (75.0, 'B'),
    (60.0, 'C'),
    (45.0, 'D'),
)
FAILING_GRADE = 'F'


def compute_percentage(sub1: float, sub2: float, sub3: float) -> float:
    """Return the unrounded mean of the three subject marks."""
    return (sub1 + sub2 + sub3) / 3.0


def round_percentage(value: float) -> float:
    """
    Round to 2 decimal places, halves away from zero.

    Works for any magnitude; infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(str(value))
    # Enough digits for the integer part plus two decimals
    context = Context(prec=max(28, exact.adjusted() + 3))
    return float(exact.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP, context=context))


def compute_grade(percentage: float) -> str:
    """
    Map a percentage onto a letter grade.

    Total over every real input: anything above 100 is still an 'A' and
    anything negative is an 'F'.
    """
    for threshold, grade in GRADE_BANDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE
