"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- A decision engine pinned to a fixed date
- Request bodies for common customers
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_decision_engine
from src.service.lending import DecisionEngine, LendingSettings
from tests.personal_codes import (
    DEBT_CODE,
    SEGMENT_1_CODE,
    SEGMENT_2_CODE,
    SEGMENT_3_CODE,
    TODAY,
)


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def decision_engine() -> DecisionEngine:
    """Decision engine with default settings and a fixed clock."""
    return DecisionEngine(settings=LendingSettings(), today=lambda: TODAY)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(decision_engine: DecisionEngine) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the engine dependency overridden.

    The real engine has no external collaborators; only the clock is
    pinned so age checks do not drift with the calendar.
    """
    app.dependency_overrides[get_decision_engine] = lambda: decision_engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def segment_1_request() -> dict:
    """Segment 1 customer whose request needs a longer period."""
    return {
        "personalCode": SEGMENT_1_CODE,
        "loanAmount": 4000,
        "loanPeriod": 12,
    }


@pytest.fixture
def segment_2_request() -> dict:
    """Segment 2 customer whose request needs a longer period."""
    return {
        "personalCode": SEGMENT_2_CODE,
        "loanAmount": 4000,
        "loanPeriod": 12,
    }


@pytest.fixture
def segment_3_request() -> dict:
    """Segment 3 customer who qualifies for the maximum amount."""
    return {
        "personalCode": SEGMENT_3_CODE,
        "loanAmount": 4000,
        "loanPeriod": 12,
    }


@pytest.fixture
def debt_request() -> dict:
    """Customer with debt."""
    return {
        "personalCode": DEBT_CODE,
        "loanAmount": 4000,
        "loanPeriod": 12,
    }
