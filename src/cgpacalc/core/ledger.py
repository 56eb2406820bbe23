import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from cgpacalc.core.errors import NoCreditWeightSelectedError, SubjectIndexError
from cgpacalc.core.grades import CREDIT_WEIGHTS, normalize_credit_weight, normalize_grade, to_grade_point


logger = logging.getLogger(__name__)


@dataclass
class Subject:
    grade: Optional[str] = None

    @property
    def is_graded(self) -> bool:
        return self.grade is not None


class GradeLedger:
    """
    Subjects grouped by credit weight. Every weight in CREDIT_WEIGHTS always
    has a bucket, and subjects are addressed by their position in it.
    """

    def __init__(self) -> None:
        self._buckets: Dict[int, List[Subject]] = {weight: [] for weight in CREDIT_WEIGHTS}

    def _bucket(self, weight: int) -> List[Subject]:
        normalized = normalize_credit_weight(weight)
        if normalized is None:
            raise NoCreditWeightSelectedError("A credit weight is required to address subjects")
        return self._buckets[normalized]

    def _check_index(self, bucket: List[Subject], index: int, weight: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(bucket):
            raise SubjectIndexError(
                f"No {weight}-credit subject at position {index} (have {len(bucket)})"
            )

    def add_subject(self, weight: int) -> int:
        bucket = self._bucket(weight)
        bucket.append(Subject())
        logger.debug("Added %s-credit subject #%d", weight, len(bucket) - 1)
        return len(bucket) - 1

    def set_grade(self, weight: int, index: int, grade: Optional[str]) -> None:
        bucket = self._bucket(weight)
        self._check_index(bucket, index, weight)
        letter = normalize_grade(grade)
        bucket[index] = Subject(grade=letter)
        logger.debug("Set %s-credit subject #%d grade to %s", weight, index, letter or "<unset>")

    def delete_subject(self, weight: int, index: int) -> Subject:
        bucket = self._bucket(weight)
        self._check_index(bucket, index, weight)
        removed = bucket.pop(index)
        logger.debug("Deleted %s-credit subject #%d", weight, index)
        return removed

    def subjects(self, weight: int) -> Tuple[Subject, ...]:
        return tuple(self._bucket(weight))

    def count(self, weight: int) -> int:
        return len(self._bucket(weight))

    def has_missing_grades(self, weight: int) -> bool:
        return any(not subject.is_graded for subject in self._bucket(weight))

    def graded_entries(self) -> Iterator[Tuple[int, int]]:
        """Yields (credit_weight, grade_point) for every graded subject in every bucket."""
        for weight, bucket in self._buckets.items():
            for subject in bucket:
                if subject.is_graded:
                    yield weight, to_grade_point(subject.grade)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
