"""
Lending Module for the Loan Decision Engine
"""

from .settings import LendingSettings, lending_settings
from .personal_code import RegularPersonalCodeValidator, get_segment, mask_personal_code
from .age import RegularAgeValidator, calculate_age
from .credit_modifier import credit_modifier_for, credit_modifier_for_segment
from .credit_score import (
    RegularCreditScoreCalculator,
    calculate_credit_score,
    is_score_approvable,
)
from .loan_search import SteppedLoanAmountCalculator
from .decision import DecisionEngine

__all__ = [
    # Settings
    "LendingSettings",
    "lending_settings",
    # Personal Code
    "RegularPersonalCodeValidator",
    "get_segment",
    "mask_personal_code",
    # Age
    "RegularAgeValidator",
    "calculate_age",
    # Credit Modifier
    "credit_modifier_for",
    "credit_modifier_for_segment",
    # Credit Score
    "RegularCreditScoreCalculator",
    "calculate_credit_score",
    "is_score_approvable",
    # Loan Search
    "SteppedLoanAmountCalculator",
    # Decision
    "DecisionEngine",
]
