from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple


def round_half_up(value: float, places: int = 2) -> float:
    # Decimal(value) keeps the exact binary expansion, same as fixed-point formatting.
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_cgpa(graded_subjects: Iterable[Tuple[int, int]], *, round_to: int = 2) -> float:
    """
    graded_subjects: iterable of (credit_weight, grade_point)
    CGPA = Σ(credit_weight * grade_point) / Σ(credit_weight)

    No graded subjects gives 0.0 rather than an error.
    """
    weighted_sum = 0
    total_credits = 0

    for credits, grade_point in graded_subjects:
        if credits <= 0:
            raise ValueError("Subject credits must be greater than 0")
        weighted_sum += credits * grade_point
        total_credits += credits

    if total_credits == 0:
        return 0.0

    return round_half_up(weighted_sum / total_credits, round_to)
