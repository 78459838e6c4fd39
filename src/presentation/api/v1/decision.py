"""Loan decision API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import DecisionRequest
from src.application.services import DecisionService
from src.core.dependencies import get_decision_service
from src.core.metrics import record_approval, record_rejection, track_decision_latency
from src.domain.exceptions import DomainException
from src.presentation.schemas import (
    DecisionRequestSchema,
    DecisionResponseSchema,
    ErrorResponseSchema,
)

decision_router = APIRouter(
    prefix="/loan",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid personal code, amount or period"},
        404: {"model": ErrorResponseSchema, "description": "No valid loan or age restriction"},
    },
)


@decision_router.post(
    "/decision",
    response_model=DecisionResponseSchema,
    status_code=200,
    summary="Request Loan Decision",
    description="""
    Calculate the loan amount and period a customer can be offered.

    A loanAmount of 0 asks for the maximum loan available at the
    requested period.
    """,
    responses={
        200: {"description": "Loan approved"},
    },
)
async def create_decision(
    request: DecisionRequestSchema,
    decision_service: Annotated[DecisionService, Depends(get_decision_service)],
) -> DecisionResponseSchema:
    """
    Request a loan decision for a customer.

    Returns the approved loan amount and period.
    """
    dto = DecisionRequest(
        personal_code=request.personal_code,
        loan_amount=request.loan_amount,
        loan_period=request.loan_period,
    )

    try:
        with track_decision_latency():
            response = decision_service.make_decision(dto)
    except DomainException as e:
        record_rejection(e.code)
        raise

    record_approval(response.loan_amount, response.loan_period)

    return DecisionResponseSchema(
        loan_amount=response.loan_amount,
        loan_period=response.loan_period,
        error_message=response.error_message,
    )
