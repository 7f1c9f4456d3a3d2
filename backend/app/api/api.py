"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from app.api.v1 import auth, users, positions, applicants

api_router = APIRouter()

# Include all v1 routers with their prefixes and tags
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

api_router.include_router(
    positions.router,
    prefix="/positions",
    tags=["Positions"],
)

api_router.include_router(
    applicants.router,
    prefix="/applicants",
    tags=["Applicants"],
)
