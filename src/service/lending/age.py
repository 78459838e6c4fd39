"""
Age Eligibility for the Loan Decision Engine.

A customer must be an adult and young enough to repay the longest
possible loan before reaching the configured life expectancy.
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from src.domain.exceptions import AgeRestrictionException, AgeRestrictionKind
from src.domain.interfaces import AgeValidator, PersonalCodeValidator
from .personal_code import RegularPersonalCodeValidator
from .settings import LendingSettings, lending_settings


def calculate_age(birth_date: date, today: date) -> int:
    """
    Whole years between birth_date and today.

    Args:
        birth_date: Customer's date of birth
        today: The day the age is measured on

    Returns:
        Age in completed years
    """
    return relativedelta(today, birth_date).years


class RegularAgeValidator(AgeValidator):
    """
    Rejects customers outside [min_age, max_age].

    max_age is life_expectancy minus the longest loan period in years,
    so it follows the configured max_loan_period.
    """

    def __init__(
        self,
        personal_code_validator: Optional[PersonalCodeValidator] = None,
        settings: LendingSettings = lending_settings,
    ):
        self._personal_code_validator = personal_code_validator or RegularPersonalCodeValidator()
        self._settings = settings

    def verify_age_eligibility(self, personal_code: str, today: date) -> None:
        """
        Verify the customer's age on the given day.

        Args:
            personal_code: Customer's personal ID code
            today: Current date

        Raises:
            AgeRestrictionException: If the customer is underage or overage
            InvalidPersonalCodeException: If no birth date can be read from the code
        """
        birth_date = self._personal_code_validator.extract_birth_date(personal_code)
        age = calculate_age(birth_date, today)

        if age < self._settings.min_age:
            raise AgeRestrictionException(AgeRestrictionKind.UNDERAGE)
        if age > self._settings.max_age:
            raise AgeRestrictionException(AgeRestrictionKind.OVERAGE)
