"""
Credit Score for the Loan Decision Engine.

    credit score = ((credit modifier / loan amount) * loan period) / 10

Terms are approvable when the score is at or above the approval
threshold (0.1 by default).
"""

from src.domain.interfaces import CreditScoreCalculator
from .settings import LendingSettings, lending_settings


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Score a set of loan terms.

    Args:
        credit_modifier: Customer's credit modifier
        loan_amount: Loan amount, must be positive
        loan_period: Loan period in months

    Returns:
        Credit score
    """
    return ((credit_modifier / loan_amount) * loan_period) / 10


def is_score_approvable(
    credit_score: float,
    settings: LendingSettings = lending_settings,
) -> bool:
    """True if the score reaches the approval threshold (inclusive)."""
    return credit_score >= settings.approval_threshold


class RegularCreditScoreCalculator(CreditScoreCalculator):
    """Credit score calculator backed by calculate_credit_score()."""

    def calculate_credit_score(
        self,
        credit_modifier: int,
        loan_amount: int,
        loan_period: int,
    ) -> float:
        return calculate_credit_score(credit_modifier, loan_amount, loan_period)
