"""Application services (use cases)."""

from .decision_service import DecisionService

__all__ = [
    "DecisionService",
]
