"""Loan request and eligibility domain exceptions."""

from enum import Enum

from .base import DomainException


class InvalidLoanAmountException(DomainException):
    """Raised when the requested loan amount is outside the allowed range."""

    def __init__(self, message: str = "Invalid loan amount!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_AMOUNT",
        )


class InvalidLoanPeriodException(DomainException):
    """Raised when the requested loan period is outside the allowed range."""

    def __init__(self, message: str = "Invalid loan period!"):
        super().__init__(
            message=message,
            code="INVALID_LOAN_PERIOD",
        )


class NoValidLoanException(DomainException):
    """Raised when no loan can be offered for the given customer and terms."""

    def __init__(self, message: str = "No valid loan found!"):
        super().__init__(
            message=message,
            code="NO_VALID_LOAN",
        )


class AgeRestrictionKind(str, Enum):
    """Which side of the age window the customer falls on."""
    UNDERAGE = "UNDERAGE"
    OVERAGE = "OVERAGE"


class AgeRestrictionException(DomainException):
    """Raised when the customer's age is outside the lending age window."""

    def __init__(self, kind: AgeRestrictionKind):
        super().__init__(
            message=f"AGE_RESTRICTION:{kind.value}",
            code="AGE_RESTRICTION",
        )
        self.kind = kind
