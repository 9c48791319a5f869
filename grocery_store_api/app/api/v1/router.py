"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import customers, health

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
# The health router defines its own "/health" path.
router.include_router(health.router, tags=["health"])
