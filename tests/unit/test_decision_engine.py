"""
Unit Tests for the Decision Engine.

These tests verify:
1. Validation order: personal code, age, amount, period, segment
2. Amount and period bounds are inclusive
3. Maximum loan search when the requested terms already score
4. Valid loan search when they do not
5. The "0 means maximum" amount
6. Zero-amount search results never reach the caller

The first group drives the real components; the second swaps in fakes
through the validator interfaces.
"""

from datetime import date
from typing import Optional

import pytest

from src.domain.entities import Decision, LoanRequest
from src.domain.exceptions import (
    AgeRestrictionException,
    AgeRestrictionKind,
    InvalidLoanAmountException,
    InvalidLoanPeriodException,
    InvalidPersonalCodeException,
    NoValidLoanException,
)
from src.domain.interfaces import (
    AgeValidator,
    CreditScoreCalculator,
    LoanAmountCalculator,
    PersonalCodeValidator,
)
from src.service.lending import DecisionEngine, LendingSettings
from src.service.lending.loan_search import NO_VALID_LOAN_MESSAGE, SteppedLoanAmountCalculator
from tests.personal_codes import (
    BAD_CHECKSUM_CODE,
    DEBT_CODE,
    OVERAGE_CODE,
    SEGMENT_1_CODE,
    SEGMENT_2_CODE,
    SEGMENT_3_CODE,
    SEGMENT_50_CODE,
    SEGMENT_90_CODE,
    TODAY,
    UNDERAGE_CODE,
)


# =============================================================================
# Test Fixtures
# =============================================================================

class SpyLoanAmountCalculator(SteppedLoanAmountCalculator):
    """Real loan search that records which search ran."""

    def __init__(self, settings: LendingSettings):
        super().__init__(settings=settings)
        self.calls = []

    def find_maximum_loan_amount(self, credit_modifier, loan_period):
        self.calls.append(("maximum", credit_modifier, loan_period))
        return super().find_maximum_loan_amount(credit_modifier, loan_period)

    def find_valid_loan_amount(self, credit_modifier, loan_amount, loan_period):
        self.calls.append(("valid", credit_modifier, loan_amount, loan_period))
        return super().find_valid_loan_amount(credit_modifier, loan_amount, loan_period)


class AcceptingPersonalCodeValidator(PersonalCodeValidator):
    def is_valid(self, personal_code: str) -> bool:
        return True

    def extract_birth_date(self, personal_code: str) -> date:
        return date(1990, 2, 1)


class RejectingPersonalCodeValidator(AcceptingPersonalCodeValidator):
    def is_valid(self, personal_code: str) -> bool:
        return False


class NoopAgeValidator(AgeValidator):
    def __init__(self):
        self.checked = []

    def verify_age_eligibility(self, personal_code: str, today: date) -> None:
        self.checked.append((personal_code, today))


class UnderageValidator(AgeValidator):
    def verify_age_eligibility(self, personal_code: str, today: date) -> None:
        raise AgeRestrictionException(AgeRestrictionKind.UNDERAGE)


class FixedCreditScoreCalculator(CreditScoreCalculator):
    def __init__(self, score: float):
        self.score = score

    def calculate_credit_score(self, credit_modifier, loan_amount, loan_period) -> float:
        return self.score


class FixedLoanAmountCalculator(LoanAmountCalculator):
    """Returns canned decisions and records the credit modifier it was given."""

    def __init__(self, maximum: Decision, valid: Decision):
        self.maximum = maximum
        self.valid = valid
        self.modifiers = []

    def find_maximum_loan_amount(self, credit_modifier, loan_period) -> Decision:
        self.modifiers.append(credit_modifier)
        return self.maximum

    def find_valid_loan_amount(self, credit_modifier, loan_amount, loan_period) -> Decision:
        self.modifiers.append(credit_modifier)
        return self.valid


@pytest.fixture
def settings() -> LendingSettings:
    return LendingSettings()


@pytest.fixture
def spy(settings) -> SpyLoanAmountCalculator:
    return SpyLoanAmountCalculator(settings)


@pytest.fixture
def engine(settings, spy) -> DecisionEngine:
    """Engine with the real components and a fixed clock."""
    return DecisionEngine(
        loan_amount_calculator=spy,
        settings=settings,
        today=lambda: TODAY,
    )


def fake_engine(
    score: float,
    maximum: Decision,
    valid: Decision = Decision(0, 0, NO_VALID_LOAN_MESSAGE),
    personal_code_validator: Optional[PersonalCodeValidator] = None,
    age_validator: Optional[AgeValidator] = None,
) -> DecisionEngine:
    return DecisionEngine(
        personal_code_validator=personal_code_validator or AcceptingPersonalCodeValidator(),
        age_validator=age_validator or NoopAgeValidator(),
        credit_score_calculator=FixedCreditScoreCalculator(score),
        loan_amount_calculator=FixedLoanAmountCalculator(maximum, valid),
        today=lambda: TODAY,
    )


# =============================================================================
# Identity and Age
# =============================================================================

class TestIdentityAndAge:
    """Personal code and age checks run before anything else."""

    def test_invalid_personal_code(self, engine, spy):
        with pytest.raises(InvalidPersonalCodeException):
            engine.calculate_approved_loan(BAD_CHECKSUM_CODE, 4000, 12)
        assert spy.calls == []

    def test_empty_personal_code(self, engine):
        with pytest.raises(InvalidPersonalCodeException):
            engine.calculate_approved_loan("", 4000, 12)

    @pytest.mark.parametrize("code", ["4900201097 6", "490020 10976"])
    def test_personal_code_with_inner_whitespace(self, engine, spy, code):
        """A code that only checks out after compacting is rejected, not scored."""
        with pytest.raises(InvalidPersonalCodeException):
            engine.calculate_approved_loan(code, 4000, 12)
        assert spy.calls == []

    def test_validator_returning_false_is_rejected(self):
        engine = fake_engine(
            0.2,
            Decision(5000, 12),
            personal_code_validator=RejectingPersonalCodeValidator(),
        )
        with pytest.raises(InvalidPersonalCodeException):
            engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12)

    def test_underage(self, engine, spy):
        with pytest.raises(AgeRestrictionException) as exc_info:
            engine.calculate_approved_loan(UNDERAGE_CODE, 4000, 12)
        assert exc_info.value.kind == AgeRestrictionKind.UNDERAGE
        assert spy.calls == []

    def test_overage(self, engine):
        with pytest.raises(AgeRestrictionException) as exc_info:
            engine.calculate_approved_loan(OVERAGE_CODE, 4000, 12)
        assert exc_info.value.kind == AgeRestrictionKind.OVERAGE

    def test_age_checked_before_amount(self, engine):
        """An underage customer asking for too much is told about the age first."""
        with pytest.raises(AgeRestrictionException):
            engine.calculate_approved_loan(UNDERAGE_CODE, 15000, 12)

    def test_age_checked_against_injected_clock(self):
        age_validator = NoopAgeValidator()
        engine = fake_engine(0.2, Decision(5000, 12), age_validator=age_validator)

        engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12)

        assert age_validator.checked == [(SEGMENT_3_CODE, TODAY)]

    def test_age_restriction_propagates_from_fake(self):
        engine = fake_engine(0.2, Decision(5000, 12), age_validator=UnderageValidator())
        with pytest.raises(AgeRestrictionException):
            engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12)


# =============================================================================
# Amount and Period Bounds
# =============================================================================

class TestBounds:
    """Amount and period bounds are inclusive."""

    @pytest.mark.parametrize("amount", [2000, 10000])
    def test_amount_bounds_accepted(self, engine, amount):
        decision = engine.calculate_approved_loan(SEGMENT_3_CODE, amount, 12)
        assert decision.is_approved

    @pytest.mark.parametrize("amount", [1999, 10001, 15000, -100])
    def test_amount_out_of_range(self, engine, spy, amount):
        with pytest.raises(InvalidLoanAmountException) as exc_info:
            engine.calculate_approved_loan(SEGMENT_3_CODE, amount, 12)
        assert exc_info.value.code == "INVALID_LOAN_AMOUNT"
        assert spy.calls == []

    @pytest.mark.parametrize("period", [12, 48])
    def test_period_bounds_accepted(self, engine, period):
        decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, period)
        assert decision.is_approved

    @pytest.mark.parametrize("period", [0, 11, 49, 60])
    def test_period_out_of_range(self, engine, spy, period):
        with pytest.raises(InvalidLoanPeriodException) as exc_info:
            engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, period)
        assert exc_info.value.code == "INVALID_LOAN_PERIOD"
        assert spy.calls == []

    def test_period_bound_follows_settings(self):
        settings = LendingSettings(max_loan_period=60)
        engine = DecisionEngine(settings=settings, today=lambda: TODAY)
        decision = engine.calculate_approved_loan(SEGMENT_1_CODE, 6000, 60)
        assert decision == Decision(6000, 60)


# =============================================================================
# Segments
# =============================================================================

class TestSegments:
    """Customers with debt never get a loan."""

    @pytest.mark.parametrize("code", [DEBT_CODE, SEGMENT_50_CODE])
    @pytest.mark.parametrize("amount, period", [(2000, 48), (4000, 12), (10000, 48), (0, 12)])
    def test_debt_segment_never_approved(self, engine, spy, code, amount, period):
        with pytest.raises(NoValidLoanException):
            engine.calculate_approved_loan(code, amount, period)
        assert spy.calls == []


# =============================================================================
# Decisions with the Real Components
# =============================================================================

class TestDecisions:
    """End-to-end decisions through the real validators and loan search."""

    def test_segment_3_gets_maximum(self, engine, spy):
        decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12)

        assert decision == Decision(10000, 12)
        assert spy.calls == [("maximum", 1000, 12)]

    def test_segment_2_period_extended(self, engine, spy):
        """300 / 4000 * 12 / 10 = 0.09, so a longer period is searched for."""
        decision = engine.calculate_approved_loan(SEGMENT_2_CODE, 4000, 12)

        assert decision == Decision(4000, 18)
        assert spy.calls == [("valid", 300, 4000, 12)]

    def test_segment_1_period_extended(self, engine):
        assert engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12) == Decision(4000, 42)

    def test_segment_1_amount_lowered(self, engine):
        assert engine.calculate_approved_loan(SEGMENT_1_CODE, 6000, 12) == Decision(4800, 48)

    def test_segment_1_minimum_amount(self, engine):
        assert engine.calculate_approved_loan(SEGMENT_1_CODE, 2000, 12) == Decision(2000, 24)

    def test_segment_90_scenario(self, engine):
        """Segment 90, 3000 over 24 months, aged 30: the amount is maximized."""
        decision = engine.calculate_approved_loan(SEGMENT_90_CODE, 3000, 24)

        assert decision.loan_amount >= 3000
        assert 24 <= decision.loan_period <= 48
        assert decision == Decision(10000, 36)
        assert decision.error_message is None

    def test_maximum_not_larger_returns_request(self, engine):
        """10000 over 48 months already is the maximum for segment 2."""
        assert engine.calculate_approved_loan(SEGMENT_2_CODE, 10000, 48) == Decision(10000, 48)

    def test_scoring_request_never_gets_less(self, engine):
        """Whenever the request scores, the decision is at least the request."""
        for amount in range(2000, 10001, 500):
            for period in (12, 24, 36, 48):
                decision = engine.calculate_approved_loan(SEGMENT_3_CODE, amount, period)
                assert decision.loan_amount >= amount

    def test_idempotent(self, engine):
        first = engine.calculate_approved_loan(SEGMENT_2_CODE, 5500, 18)
        second = engine.calculate_approved_loan(SEGMENT_2_CODE, 5500, 18)
        assert first == second

    def test_decide_with_loan_request(self, engine):
        request = LoanRequest(personal_code=SEGMENT_2_CODE, loan_amount=4000, loan_period=12)
        assert engine.decide(request) == Decision(4000, 18)

    def test_no_valid_loan_after_search(self):
        """With a tiny credit modifier even 2000 over 48 months does not score."""
        settings = LendingSettings(segment_1_credit_modifier=10)
        engine = DecisionEngine(settings=settings, today=lambda: TODAY)

        with pytest.raises(NoValidLoanException) as exc_info:
            engine.calculate_approved_loan(SEGMENT_1_CODE, 4000, 12)
        assert exc_info.value.message == NO_VALID_LOAN_MESSAGE


# =============================================================================
# Maximum Loan Request (amount 0)
# =============================================================================

class TestMaximumRequest:
    """A requested amount of 0 asks for the maximum loan."""

    def test_segment_1_maximum(self, engine, spy):
        assert engine.calculate_approved_loan(SEGMENT_1_CODE, 0, 12) == Decision(4800, 48)
        assert spy.calls == [("maximum", 100, 12)]

    def test_segment_3_maximum(self, engine):
        assert engine.calculate_approved_loan(SEGMENT_3_CODE, 0, 24) == Decision(10000, 24)

    def test_no_maximum_raises(self):
        settings = LendingSettings(segment_1_credit_modifier=10)
        engine = DecisionEngine(settings=settings, today=lambda: TODAY)

        with pytest.raises(NoValidLoanException):
            engine.calculate_approved_loan(SEGMENT_1_CODE, 0, 12)

    def test_period_still_validated(self, engine):
        with pytest.raises(InvalidLoanPeriodException):
            engine.calculate_approved_loan(SEGMENT_1_CODE, 0, 6)


# =============================================================================
# Decisions with Fakes
# =============================================================================

class TestWithFakes:
    """Orchestration checked against canned component results."""

    def test_larger_maximum_is_returned(self):
        engine = fake_engine(0.2, maximum=Decision(8000, 24))
        assert engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24) == Decision(8000, 24)

    def test_equal_maximum_returns_request(self):
        engine = fake_engine(0.2, maximum=Decision(3000, 24))
        assert engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24) == Decision(3000, 24)

    def test_empty_maximum_returns_request(self):
        """The score cleared the threshold, so the request stands."""
        engine = fake_engine(0.2, maximum=Decision(0, 0, "No valid maximum loan found."))
        decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24)
        assert decision == Decision(3000, 24)
        assert decision.error_message is None

    def test_threshold_score_takes_maximum_path(self):
        engine = fake_engine(0.1, maximum=Decision(9000, 30))
        assert engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24) == Decision(9000, 30)

    def test_low_score_uses_valid_search(self):
        engine = fake_engine(0.05, maximum=Decision(9000, 30), valid=Decision(2500, 36))
        assert engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24) == Decision(2500, 36)

    def test_empty_valid_search_raises(self):
        engine = fake_engine(0.05, maximum=Decision(9000, 30))
        with pytest.raises(NoValidLoanException):
            engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24)

    def test_credit_modifier_passed_per_request(self):
        """Each request hands its own modifier to the loan search."""
        engine = fake_engine(0.2, maximum=Decision(9000, 30))
        calculator = engine._loan_amount_calculator

        engine.calculate_approved_loan(SEGMENT_1_CODE, 3000, 24)
        engine.calculate_approved_loan(SEGMENT_3_CODE, 3000, 24)
        engine.calculate_approved_loan(SEGMENT_2_CODE, 3000, 24)

        assert calculator.modifiers == [100, 1000, 300]
