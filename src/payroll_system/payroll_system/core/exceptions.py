class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriodError(ValidationError):
    """Raised when a month, year or date range is outside the accepted bounds."""


class NegativeMonetaryInputError(ValidationError):
    """Raised when a salary, bonus or payment amount is negative."""


class MissingEmployeeError(DomainError):
    """Raised when no employee snapshot is available for a payroll run."""
