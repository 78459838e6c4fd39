"""
Loan Search for the Loan Decision Engine.

Both searches walk the same grid: the loan amount goes down in
loan_amount_step increments and, for every amount, the loan period goes
up from the requested period in loan_period_step increments until
max_loan_period. The first approvable pair wins, so a higher amount
always beats a shorter period.

When nothing on the grid is approvable the searches return a
zero-amount Decision with an error message rather than raising. The
decision engine turns that into NoValidLoanException.
"""

from typing import Iterator, Optional, Tuple

from src.domain.entities import Decision
from src.domain.interfaces import CreditScoreCalculator, LoanAmountCalculator
from .credit_score import RegularCreditScoreCalculator, is_score_approvable
from .settings import LendingSettings, lending_settings

NO_MAXIMUM_LOAN_MESSAGE = "No valid maximum loan found."
NO_VALID_LOAN_MESSAGE = "No valid loan found after adjusting amount and period."


def no_loan_found(message: str) -> Decision:
    """Build the zero-amount decision returned when a search comes up empty."""
    return Decision(loan_amount=0, loan_period=0, error_message=message)


class SteppedLoanAmountCalculator(LoanAmountCalculator):
    """
    Grid search over loan amount (descending) and period (ascending).

    Worst case is (amount range / amount step) * (period range / period step)
    score evaluations.
    """

    def __init__(
        self,
        credit_score_calculator: Optional[CreditScoreCalculator] = None,
        settings: LendingSettings = lending_settings,
    ):
        self._credit_score_calculator = credit_score_calculator or RegularCreditScoreCalculator()
        self._settings = settings

    def find_maximum_loan_amount(self, credit_modifier: int, loan_period: int) -> Decision:
        """
        Find the maximum loan amount the customer qualifies for.

        Args:
            credit_modifier: The customer's credit modifier
            loan_period: Requested loan period, the shortest period tried

        Returns:
            Decision with the maximum approved amount and period, or a
            zero-amount decision if nothing qualifies
        """
        terms = self._search(credit_modifier, self._settings.max_loan_amount, loan_period)
        if terms is None:
            return no_loan_found(NO_MAXIMUM_LOAN_MESSAGE)
        amount, period = terms
        return Decision(loan_amount=amount, loan_period=period)

    def find_valid_loan_amount(
        self,
        credit_modifier: int,
        loan_amount: int,
        loan_period: int,
    ) -> Decision:
        """
        Find valid terms at or below the requested amount.

        The requested amount is lowered only when no period up to
        max_loan_period makes it approvable.

        Args:
            credit_modifier: The customer's credit modifier
            loan_amount: Requested loan amount, the largest amount tried
            loan_period: Requested loan period, the shortest period tried

        Returns:
            Decision with the approved amount and period, or a
            zero-amount decision if nothing qualifies
        """
        terms = self._search(credit_modifier, loan_amount, loan_period)
        if terms is None:
            return no_loan_found(NO_VALID_LOAN_MESSAGE)
        amount, period = terms
        return Decision(loan_amount=amount, loan_period=period)

    def _search(
        self,
        credit_modifier: int,
        start_amount: int,
        start_period: int,
    ) -> Optional[Tuple[int, int]]:
        for amount, period in self._grid(start_amount, start_period):
            score = self._credit_score_calculator.calculate_credit_score(
                credit_modifier, amount, period
            )
            if is_score_approvable(score, self._settings):
                return amount, period
        return None

    def _grid(self, start_amount: int, start_period: int) -> Iterator[Tuple[int, int]]:
        settings = self._settings
        amount = start_amount
        while amount >= settings.min_loan_amount:
            period = start_period
            while period <= settings.max_loan_period:
                yield amount, period
                period += settings.loan_period_step
            amount -= settings.loan_amount_step
