"""Domain Entities - Core business objects."""

from .decision import Decision, LoanRequest

__all__ = [
    "Decision",
    "LoanRequest",
]
