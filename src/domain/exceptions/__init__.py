"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .identity import InvalidPersonalCodeException
from .loan import (
    AgeRestrictionException,
    AgeRestrictionKind,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    NoValidLoanException,
)

__all__ = [
    "DomainException",
    "InvalidPersonalCodeException",
    "AgeRestrictionException",
    "AgeRestrictionKind",
    "InvalidLoanAmountException",
    "InvalidLoanPeriodException",
    "NoValidLoanException",
]
