"""
Small numeric helpers shared by the scoring modules.
"""

import math

MAX_SCORE = 100

# Risk tiers: above HIGH is High Risk, above MEDIUM is Medium Risk
HIGH_RISK_THRESHOLD = 75
MEDIUM_RISK_THRESHOLD = 45


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up.

    Python's round() sends halves to the even number (round(10.5) == 10).
    Scores should behave like everyday rounding instead:
        >>> round_half_up(10.5)
        11
    """
    return int(math.floor(value + 0.5))
