"""
Decision Engine for the Loan Decision Engine.

This module orchestrates the complete decision-making process:
1. Validate the personal code
2. Verify the customer's age
3. Validate the requested amount and period
4. Derive the credit modifier from the personal code segment
5. Score the requested terms
6. Search for the maximum loan, or for any valid loan below the request

This is the main entry point for the lending module.
"""

from datetime import date
from typing import Callable, Optional

from src.domain.entities import Decision, LoanRequest
from src.domain.exceptions import (
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from src.domain.interfaces import (
    AgeValidator,
    CreditScoreCalculator,
    LoanAmountCalculator,
    PersonalCodeValidator,
)
from .age import RegularAgeValidator
from .credit_modifier import credit_modifier_for
from .credit_score import RegularCreditScoreCalculator, is_score_approvable
from .loan_search import SteppedLoanAmountCalculator
from .personal_code import RegularPersonalCodeValidator
from .settings import LendingSettings, lending_settings


class DecisionEngine:
    """
    Calculates an approved loan amount and period for a customer.

    The engine holds configuration and collaborators only. Everything
    derived from a request, the credit modifier included, stays local
    to calculate_approved_loan(), so one instance can serve concurrent
    requests.
    """

    def __init__(
        self,
        personal_code_validator: Optional[PersonalCodeValidator] = None,
        age_validator: Optional[AgeValidator] = None,
        credit_score_calculator: Optional[CreditScoreCalculator] = None,
        loan_amount_calculator: Optional[LoanAmountCalculator] = None,
        settings: LendingSettings = lending_settings,
        today: Callable[[], date] = date.today,
    ):
        self._settings = settings
        self._today = today
        self._personal_code_validator = personal_code_validator or RegularPersonalCodeValidator()
        self._age_validator = age_validator or RegularAgeValidator(
            self._personal_code_validator, settings
        )
        self._credit_score_calculator = credit_score_calculator or RegularCreditScoreCalculator()
        self._loan_amount_calculator = loan_amount_calculator or SteppedLoanAmountCalculator(
            self._credit_score_calculator, settings
        )

    def calculate_approved_loan(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int,
    ) -> Decision:
        """
        Calculate the loan amount and period to offer the customer.

        A loan_amount of 0 asks for the maximum loan at the requested
        period.

        Args:
            personal_code: ID code of the customer that made the request
            loan_amount: Requested loan amount, or 0 for the maximum
            loan_period: Requested loan period in months

        Returns:
            Decision with the approved loan amount and period

        Raises:
            InvalidPersonalCodeException: If the personal code is invalid
            AgeRestrictionException: If the customer is underage or overage
            InvalidLoanAmountException: If the requested amount is out of range
            InvalidLoanPeriodException: If the requested period is out of range
            NoValidLoanException: If no loan can be offered
        """
        if not self._personal_code_validator.is_valid(personal_code):
            raise InvalidPersonalCodeException()

        self._age_validator.verify_age_eligibility(personal_code, self._today())

        if loan_amount != 0 and not self.is_loan_amount_valid(loan_amount):
            raise InvalidLoanAmountException(
                f"Loan amount must be between {self._settings.min_loan_amount} "
                f"and {self._settings.max_loan_amount}!"
            )
        if not self.is_loan_period_valid(loan_period):
            raise InvalidLoanPeriodException(
                f"Loan period must be between {self._settings.min_loan_period} "
                f"and {self._settings.max_loan_period} months!"
            )

        credit_modifier = credit_modifier_for(personal_code, self._settings)
        if credit_modifier == 0:
            raise NoValidLoanException("No valid loan found: customer has debt!")

        if loan_amount == 0:
            return self._require_loan(
                self._loan_amount_calculator.find_maximum_loan_amount(credit_modifier, loan_period)
            )

        credit_score = self._credit_score_calculator.calculate_credit_score(
            credit_modifier, loan_amount, loan_period
        )

        if is_score_approvable(credit_score, self._settings):
            maximum = self._loan_amount_calculator.find_maximum_loan_amount(
                credit_modifier, loan_period
            )
            if maximum.loan_amount is not None and maximum.loan_amount > loan_amount:
                return maximum
            return Decision(loan_amount=loan_amount, loan_period=loan_period)

        return self._require_loan(
            self._loan_amount_calculator.find_valid_loan_amount(
                credit_modifier, loan_amount, loan_period
            )
        )

    def decide(self, request: LoanRequest) -> Decision:
        """Calculate the approved loan for a LoanRequest."""
        return self.calculate_approved_loan(
            request.personal_code,
            request.loan_amount,
            request.loan_period,
        )

    def is_loan_amount_valid(self, loan_amount: int) -> bool:
        return self._settings.min_loan_amount <= loan_amount <= self._settings.max_loan_amount

    def is_loan_period_valid(self, loan_period: int) -> bool:
        return self._settings.min_loan_period <= loan_period <= self._settings.max_loan_period

    @staticmethod
    def _require_loan(decision: Decision) -> Decision:
        if decision.loan_amount is not None and decision.loan_amount > 0:
            return decision
        raise NoValidLoanException(decision.error_message or "No valid loan found!")
