from typing import Dict, Optional, Tuple, Union

from cgpacalc.core.errors import InvalidCreditWeightError, InvalidGradeError


GRADE_POINTS: Dict[str, int] = {
    "O": 10,
    "A": 9,
    "B": 8,
    "C": 7,
    "D": 6,
    "P": 5,
    "F": 0,
}

# Display order of the credit selector.
CREDIT_WEIGHTS: Tuple[int, ...] = (4, 3, 2)


def normalize_grade(grade: Optional[str]) -> Optional[str]:
    """
    Returns the upper-case letter, or None for an unset grade ("" or None).
    """
    if grade is None:
        return None
    if not isinstance(grade, str):
        raise InvalidGradeError(f"Unsupported letter grade: {grade!r}")
    letter = grade.strip().upper()
    if not letter:
        return None
    if letter not in GRADE_POINTS:
        raise InvalidGradeError(f"Unsupported letter grade: {grade}")
    return letter


def normalize_credit_weight(weight: Union[int, str, None]) -> Optional[int]:
    """
    Accepts 2, 3, 4 (or their string form from a dropdown). None and "" mean
    no credit weight is selected.
    """
    if weight is None:
        return None
    if isinstance(weight, bool):
        raise InvalidCreditWeightError(f"Unsupported credit weight: {weight!r}")
    if isinstance(weight, str):
        value = weight.strip()
        if not value:
            return None
        try:
            weight = int(value)
        except ValueError as exc:
            raise InvalidCreditWeightError(f"Unsupported credit weight: {value}") from exc
    if weight not in CREDIT_WEIGHTS:
        raise InvalidCreditWeightError(
            f"Unsupported credit weight: {weight}. Use 2, 3, or 4."
        )
    return int(weight)


def to_grade_point(letter_grade: str) -> int:
    try:
        return GRADE_POINTS[letter_grade.upper()]
    except (KeyError, AttributeError) as exc:
        raise InvalidGradeError(f"Unsupported letter grade: {letter_grade}") from exc
