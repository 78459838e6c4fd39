"""Lending policy endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from src.service.lending.settings import get_lending_settings

policy_router = APIRouter(prefix="/loan")


class LoanPolicyResponse(BaseModel):
    min_loan_amount: int
    max_loan_amount: int
    min_loan_period: int
    max_loan_period: int
    min_age: int
    max_age: int


@policy_router.get(
    "/policy",
    response_model=LoanPolicyResponse,
    summary="Loan Policy",
    description="Returns the amount, period and age bounds loan requests are checked against.",
)
async def loan_policy() -> LoanPolicyResponse:
    lending = get_lending_settings()
    return LoanPolicyResponse(
        min_loan_amount=lending.min_loan_amount,
        max_loan_amount=lending.max_loan_amount,
        min_loan_period=lending.min_loan_period,
        max_loan_period=lending.max_loan_period,
        min_age=lending.min_age,
        max_age=lending.max_age,
    )
