"""Loan request and decision entities."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoanRequest:
    """
    A single loan application.

    A loan_amount of 0 asks the engine for the largest loan the
    customer qualifies for at the requested period.
    """

    personal_code: str
    loan_amount: int
    loan_period: int


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a loan decision.

    Approved decisions carry loan_amount and loan_period. Inside the
    loan search a decision with loan_amount == 0 and an error_message
    means no qualifying terms were found; the engine never returns
    such a decision to its callers.
    """

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        """True when the decision carries usable loan terms."""
        return bool(self.loan_amount) and self.error_message is None
