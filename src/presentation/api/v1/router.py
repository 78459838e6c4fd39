from fastapi import APIRouter

from .decision import decision_router
from .health import health_router
from .policy import policy_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(decision_router, tags=["Loan Decisions"])
router.include_router(policy_router, tags=["Loan Decisions"])
