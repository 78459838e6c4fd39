"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    AgeRestrictionException,
    DomainException,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from src.presentation.schemas import ErrorResponseSchema
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponseSchema(
        error_message=message,
        error=code,
        request_id=get_request_id(),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidPersonalCodeException)
    async def invalid_personal_code_handler(
        request: Request,
        exc: InvalidPersonalCodeException,
    ) -> JSONResponse:
        """Handle invalid personal code errors."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(InvalidLoanAmountException)
    async def invalid_loan_amount_handler(
        request: Request,
        exc: InvalidLoanAmountException,
    ) -> JSONResponse:
        """Handle out of range loan amounts."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(InvalidLoanPeriodException)
    async def invalid_loan_period_handler(
        request: Request,
        exc: InvalidLoanPeriodException,
    ) -> JSONResponse:
        """Handle out of range loan periods."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(AgeRestrictionException)
    async def age_restriction_handler(
        request: Request,
        exc: AgeRestrictionException,
    ) -> JSONResponse:
        """Handle customers outside the lending age window."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(NoValidLoanException)
    async def no_valid_loan_handler(
        request: Request,
        exc: NoValidLoanException,
    ) -> JSONResponse:
        """Handle requests no loan can be offered for."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
