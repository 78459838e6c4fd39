"""Pydantic schema for API error responses."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponseSchema(BaseModel):
    """
    Error response format for all API errors.

    Keeps the loan decision response shape (null amount and period)
    and adds a machine-readable error code.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "loanAmount": None,
                    "loanPeriod": None,
                    "errorMessage": "AGE_RESTRICTION:UNDERAGE",
                    "error": "AGE_RESTRICTION",
                    "requestId": "abc123",
                }
            ]
        },
    )
    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid personal ID code!"],
    )
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_PERSONAL_CODE"],
    )
    request_id: Optional[str] = Field(
        None,
        description="Request ID for tracing",
    )
