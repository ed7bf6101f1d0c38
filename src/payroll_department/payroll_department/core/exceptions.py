class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when raw input data is malformed before it reaches the registry."""


class PayrollError(DomainError):
    """Base for rejected payroll operations; the message carries a kind prefix."""

    prefix = "Payroll error"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"{self.prefix}: {reason}")


class InvalidRateError(PayrollError):
    """Raised when a name, base pay, bonus percent or strategy precondition is violated."""

    prefix = "Invalid rate"


class DuplicateWorkTypeError(PayrollError):
    """Raised when a work type with the same name is already registered."""

    prefix = "Duplicate work type"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"work type '{name}' already exists")


class EmptyWorkListError(PayrollError):
    """Raised when an aggregate is requested from an empty registry."""

    prefix = "Work list is empty"
