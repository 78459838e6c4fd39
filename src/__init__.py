"""
Loan Decision Gateway - Loan Eligibility & Amount Service

A FastAPI-based microservice that decides whether a customer qualifies
for a loan and calculates the maximum amount and period they can be
offered, based on their Estonian personal ID code.
"""

__version__ = "0.1.0"
