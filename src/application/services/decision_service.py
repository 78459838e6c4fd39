"""Decision service - orchestrates the loan decision use case."""

import structlog

from src.application.dto import DecisionRequest, DecisionResponse
from src.domain.exceptions import (
    DomainException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
)
from src.service.lending import DecisionEngine, mask_personal_code

logger = structlog.get_logger(__name__)


class DecisionService:
    """
    Application service for loan decision use cases.
    """

    def __init__(self, decision_engine: DecisionEngine):
        self._engine = decision_engine

    def make_decision(self, request: DecisionRequest) -> DecisionResponse:
        """
        Process a loan decision request.

        Args:
            request: The decision request with personal code, amount and period

        Returns:
            DecisionResponse with the approved amount and period

        Raises:
            InvalidPersonalCodeException: If the personal code is invalid
            InvalidLoanAmountException: If the requested amount is invalid
            InvalidLoanPeriodException: If the requested period is invalid
            AgeRestrictionException: If the customer's age is not eligible
            NoValidLoanException: If no loan can be offered
        """
        errors = request.validate()
        if errors:
            raise self._validation_error(request, errors)

        log = logger.bind(
            personal_code=mask_personal_code(request.personal_code),
            loan_amount=request.loan_amount,
            loan_period=request.loan_period,
        )
        log.info("loan_decision_requested")

        try:
            decision = self._engine.decide(request.to_entity())
        except DomainException as e:
            log.info("loan_decision_rejected", code=e.code, message=e.message)
            raise

        log.info(
            "loan_decision_made",
            approved_amount=decision.loan_amount,
            approved_period=decision.loan_period,
        )

        return DecisionResponse.from_entity(decision)

    @staticmethod
    def _validation_error(request: DecisionRequest, errors: list) -> DomainException:
        """Pick the exception matching the first invalid field."""
        message = "; ".join(errors)
        if not request.personal_code or not request.personal_code.strip():
            return InvalidPersonalCodeException(message)
        if request.loan_amount < 0:
            return InvalidLoanAmountException(message)
        return InvalidLoanPeriodException(message)
