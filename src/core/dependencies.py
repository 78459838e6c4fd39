"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.application.services import DecisionService
from src.service.lending import DecisionEngine
from src.service.lending.settings import get_lending_settings


# Engine dependencies
@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Get the shared DecisionEngine instance (stateless between requests)."""
    return DecisionEngine(settings=get_lending_settings())


# Service dependencies
def get_decision_service(
    decision_engine: Annotated[DecisionEngine, Depends(get_decision_engine)],
) -> DecisionService:
    """Get a DecisionService instance with all dependencies."""
    return DecisionService(decision_engine=decision_engine)
