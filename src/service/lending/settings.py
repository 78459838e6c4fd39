"""
Lending Settings for the Loan Decision Engine.

This module contains the policy constants used by the decision engine:
amount and period bounds, search step sizes, segment credit modifiers,
the credit score approval threshold and the age window.

Environment variables use the LENDING_ prefix:
    LENDING_MAX_LOAN_PERIOD=60
    LENDING_SEGMENT_2_CREDIT_MODIFIER=300
    LENDING_APPROVAL_THRESHOLD=0.1

Usage:
    from src.service.lending.settings import lending_settings

    # Use default settings (loaded from env)
    max_amount = lending_settings.max_loan_amount

    # Or create custom settings for testing
    custom = LendingSettings(max_loan_period=60)
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LendingSettings(BaseSettings):
    """
    Configurable parameters for the loan decision algorithm.

    All settings can be overridden via environment variables with LENDING_ prefix.
    Amounts are in whole euros, periods in months.
    """

    model_config = SettingsConfigDict(
        env_prefix="LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Loan Amount ===
    min_loan_amount: int = Field(
        default=2000,
        gt=0,
        description="Smallest loan amount that can be requested or approved",
    )
    max_loan_amount: int = Field(
        default=10000,
        gt=0,
        description="Largest loan amount that can be requested or approved",
    )
    loan_amount_step: int = Field(
        default=100,
        gt=0,
        description="Amount the search lowers the loan by on each step",
    )

    # === Loan Period ===
    min_loan_period: int = Field(
        default=12,
        gt=0,
        description="Shortest loan period in months",
    )
    max_loan_period: int = Field(
        default=48,
        gt=0,
        description="Longest loan period in months",
    )
    loan_period_step: int = Field(
        default=6,
        gt=0,
        description="Months the search extends the period by on each step",
    )

    # === Credit Modifiers ===
    segment_1_credit_modifier: int = Field(
        default=100,
        ge=0,
        description="Credit modifier for segment 1 customers",
    )
    segment_2_credit_modifier: int = Field(
        default=300,
        ge=0,
        description="Credit modifier for segment 2 customers",
    )
    segment_3_credit_modifier: int = Field(
        default=1000,
        ge=0,
        description="Credit modifier for segment 3 customers",
    )

    # === Segment Boundaries (last two digits of the personal code) ===
    segment_1_floor: int = Field(
        default=75,
        ge=0,
        le=99,
        description="Lowest segment value in segment 1; anything below is debt",
    )
    segment_2_floor: int = Field(
        default=85,
        ge=0,
        le=99,
        description="Lowest segment value in segment 2",
    )
    segment_3_floor: int = Field(
        default=95,
        ge=0,
        le=99,
        description="Lowest segment value in segment 3",
    )

    # === Credit Score ===
    approval_threshold: float = Field(
        default=0.1,
        gt=0.0,
        description="Minimum credit score (inclusive) for loan terms to be approved",
    )

    # === Age Window ===
    min_age: int = Field(
        default=18,
        ge=0,
        description="Customers younger than this are underage",
    )
    life_expectancy: int = Field(
        default=78,
        gt=0,
        description="Expected lifetime used to derive the maximum customer age",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "LendingSettings":
        """Reject inverted ranges and an empty age window."""
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError(
                f"min_loan_amount ({self.min_loan_amount}) > max_loan_amount ({self.max_loan_amount})"
            )
        if self.min_loan_period > self.max_loan_period:
            raise ValueError(
                f"min_loan_period ({self.min_loan_period}) > max_loan_period ({self.max_loan_period})"
            )
        if not self.segment_1_floor < self.segment_2_floor < self.segment_3_floor:
            raise ValueError("Segment floors must be strictly ascending")
        if self.max_age < self.min_age:
            raise ValueError(
                f"max_age ({self.max_age}) < min_age ({self.min_age}); "
                "max_loan_period is too long for the configured life expectancy"
            )
        return self

    @property
    def max_loan_period_years(self) -> int:
        """Longest loan period in whole years."""
        return self.max_loan_period // 12

    @property
    def max_age(self) -> int:
        """Oldest age at which a customer can still repay the longest loan."""
        return self.life_expectancy - self.max_loan_period_years


@lru_cache
def get_lending_settings() -> LendingSettings:
    """Get cached lending settings instance."""
    return LendingSettings()


lending_settings = get_lending_settings()
