"""
Domain Interfaces (Ports)
"""

from .validators import (
    AgeValidator,
    CreditScoreCalculator,
    LoanAmountCalculator,
    PersonalCodeValidator,
)

__all__ = [
    "AgeValidator",
    "CreditScoreCalculator",
    "LoanAmountCalculator",
    "PersonalCodeValidator",
]
