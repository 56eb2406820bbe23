class LedgerError(Exception):
    pass


class MissingGradeError(LedgerError):
    pass


class NoCreditWeightSelectedError(LedgerError):
    pass


class SubjectIndexError(LedgerError, IndexError):
    pass


class InvalidCreditWeightError(LedgerError, ValueError):
    pass


class InvalidGradeError(LedgerError, ValueError):
    pass
