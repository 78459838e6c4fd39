"""Loan decision Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DecisionRequestSchema(BaseModel):
    """Schema for POST /v1/loan/decision request body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "personalCode": "49002010987",
                    "loanAmount": 4000,
                    "loanPeriod": 12,
                }
            ]
        },
    )
    personal_code: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Customer's Estonian personal ID code",
        examples=["49002010987"],
    )
    loan_amount: int = Field(
        ...,
        ge=0,
        description="Requested loan amount in euros; 0 asks for the maximum loan",
        examples=[4000],
    )
    loan_period: int = Field(
        ...,
        gt=0,
        description="Requested loan period in months",
        examples=[12],
    )

    @field_validator("personal_code")
    @classmethod
    def validate_personal_code(cls, v: str) -> str:
        """Strip surrounding whitespace from the personal code."""
        return v.strip()


class DecisionResponseSchema(BaseModel):
    """Schema for POST /v1/loan/decision response body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "loanAmount": 10000,
                    "loanPeriod": 36,
                    "errorMessage": None,
                }
            ]
        },
    )
    loan_amount: Optional[int] = Field(
        None,
        description="Approved loan amount in euros",
        examples=[10000],
    )
    loan_period: Optional[int] = Field(
        None,
        description="Approved loan period in months",
        examples=[36],
    )
    error_message: Optional[str] = Field(
        None,
        description="Why no loan was approved (null on success)",
    )
