import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from cgpacalc.core.errors import MissingGradeError, NoCreditWeightSelectedError
from cgpacalc.core.gpa import calculate_cgpa
from cgpacalc.core.grades import normalize_credit_weight
from cgpacalc.core.ledger import GradeLedger, Subject


logger = logging.getLogger(__name__)

MISSING_GRADE_MESSAGE = "Please select a grade for all subjects before submitting."


@dataclass
class CgpaResult:
    value: Optional[float] = None
    is_current: bool = False

    def invalidate(self) -> None:
        self.is_current = False


@dataclass
class CalculatorSession:
    ledger: GradeLedger = field(default_factory=GradeLedger)
    selected_credit: Optional[int] = None
    is_submitted: bool = False
    cgpa: CgpaResult = field(default_factory=CgpaResult)

    @property
    def displayed_cgpa(self) -> Optional[float]:
        if self.cgpa.is_current:
            return self.cgpa.value
        return None

    def _require_selected(self) -> int:
        if self.selected_credit is None:
            raise NoCreditWeightSelectedError("Select a credit type first.")
        return self.selected_credit

    def select_credit_weight(self, weight: Union[int, str, None]) -> None:
        self.selected_credit = normalize_credit_weight(weight)
        self.is_submitted = False

    def add_more_subjects(self) -> None:
        self.select_credit_weight(None)

    def add_subject(self) -> int:
        weight = self._require_selected()
        index = self.ledger.add_subject(weight)
        self.cgpa.invalidate()
        return index

    def set_grade(self, index: int, grade: Optional[str]) -> None:
        weight = self._require_selected()
        self.ledger.set_grade(weight, index, grade)
        self.cgpa.invalidate()

    def delete_subject(self, index: int) -> None:
        weight = self._require_selected()
        self.ledger.delete_subject(weight, index)
        self.cgpa.invalidate()

    def subjects(self, weight: Union[int, str, None] = None) -> Tuple[Subject, ...]:
        if weight is None:
            return self.ledger.subjects(self._require_selected())
        return self.ledger.subjects(weight)

    def submit(self) -> None:
        weight = self._require_selected()
        if self.ledger.has_missing_grades(weight):
            logger.warning("Submit rejected: %s-credit subjects have missing grades", weight)
            raise MissingGradeError(MISSING_GRADE_MESSAGE)
        self.is_submitted = True
        logger.info("Submitted %d %s-credit subjects", self.ledger.count(weight), weight)

    def calculate_cgpa(self) -> float:
        value = calculate_cgpa(self.ledger.graded_entries())
        self.cgpa = CgpaResult(value=value, is_current=True)
        logger.info("Calculated CGPA %.2f over %d subjects", value, len(self.ledger))
        return value

    def reset(self) -> None:
        self.ledger = GradeLedger()
        self.selected_credit = None
        self.is_submitted = False
        self.cgpa = CgpaResult()
