"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from snippetbox.api.endpoints import snippets, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(snippets.router, tags=["Snippets"])
api_router.include_router(users.router, prefix="/user", tags=["Users"])
