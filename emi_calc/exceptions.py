"""Custom exceptions for the EMI calculator."""


class EmiCalcError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidInputError(EmiCalcError, ValueError):
    """Raised when a loan input or a value to format is out of range."""
    pass


class ComputationOverflowError(EmiCalcError, ArithmeticError):
    """Raised when the schedule arithmetic produces a non-finite result."""
    pass
