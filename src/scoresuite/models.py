class CaseDefinitionError(Exception):
    """Raised when a test case is created without valid score bounds."""


class InvalidCaseError(TypeError):
    """Raised when something that is not a test case is attached to a suite."""


class UnknownCaseError(InvalidCaseError):
    """Raised when a case identifier is not present in the case registry."""


class PercentageError(ZeroDivisionError):
    """Raised when a percentage is requested against a maximum score of zero."""


class MissingArgumentsError(Exception):
    """Raised when required command line arguments were not supplied."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"The following arguments are required: {', '.join(missing)}.")
