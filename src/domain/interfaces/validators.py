"""Interfaces for the loan decision components.

Each step of the decision is behind an abstract base class so the
engine can be assembled from fakes in tests.
"""

from abc import ABC, abstractmethod
from datetime import date

from src.domain.entities import Decision


class PersonalCodeValidator(ABC):
    """
    Validates personal ID codes and reads the data encoded in them.
    """

    @abstractmethod
    def is_valid(self, personal_code: str) -> bool:
        """
        Check a personal code's structure and checksum.

        Args:
            personal_code: The customer's personal ID code

        Returns:
            True if the code is valid

        Raises:
            InvalidPersonalCodeException: If the code is empty or invalid
        """
        ...

    @abstractmethod
    def extract_birth_date(self, personal_code: str) -> date:
        """
        Read the birth date encoded in a personal code.

        Raises:
            InvalidPersonalCodeException: If the century marker or the
                encoded date is invalid
        """
        ...


class AgeValidator(ABC):
    """Checks that a customer is inside the lending age window."""

    @abstractmethod
    def verify_age_eligibility(self, personal_code: str, today: date) -> None:
        """
        Verify the customer's age on the given day.

        Raises:
            AgeRestrictionException: If the customer is underage or overage
        """
        ...


class CreditScoreCalculator(ABC):
    """Scores a set of loan terms for a credit modifier."""

    @abstractmethod
    def calculate_credit_score(
        self,
        credit_modifier: int,
        loan_amount: int,
        loan_period: int,
    ) -> float:
        ...


class LoanAmountCalculator(ABC):
    """
    Searches the amount/period grid for approvable loan terms.

    Both searches return a zero-amount Decision with an error message
    when nothing qualifies instead of raising.
    """

    @abstractmethod
    def find_maximum_loan_amount(self, credit_modifier: int, loan_period: int) -> Decision:
        """Find the largest approvable amount at or above the given period."""
        ...

    @abstractmethod
    def find_valid_loan_amount(
        self,
        credit_modifier: int,
        loan_amount: int,
        loan_period: int,
    ) -> Decision:
        """Find approvable terms at or below the requested amount."""
        ...
