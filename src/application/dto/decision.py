"""Data transfer objects for loan decision operations."""

from dataclasses import dataclass
from typing import List, Optional

from src.domain.entities import Decision, LoanRequest


@dataclass(frozen=True)
class DecisionRequest:
    """Input data for requesting a loan decision."""
    personal_code: str
    loan_amount: int
    loan_period: int

    def validate(self) -> List[str]:
        errors = []

        if not self.personal_code or not self.personal_code.strip():
            errors.append("personal_code is required")

        if self.loan_amount < 0:
            errors.append("loan_amount cannot be negative")

        if self.loan_period <= 0:
            errors.append("loan_period must be positive")

        return errors

    def to_entity(self) -> LoanRequest:
        return LoanRequest(
            personal_code=self.personal_code.strip(),
            loan_amount=self.loan_amount,
            loan_period=self.loan_period,
        )


@dataclass(frozen=True)
class DecisionResponse:
    """Response data for a loan decision."""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]

    @classmethod
    def from_entity(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        )
