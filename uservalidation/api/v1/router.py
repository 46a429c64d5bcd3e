"""
Version 1 API router.

Aggregates the routers of every bounded context under ``/api/v1``.
"""

from fastapi import APIRouter

from uservalidation.interfaces.health import router as health_router
from uservalidation.interfaces.users.router import router as users_router

API_V1_PREFIX = "/api/v1"

api_router = APIRouter(prefix=API_V1_PREFIX)
api_router.include_router(health_router)
api_router.include_router(users_router)
