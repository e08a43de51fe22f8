from fastapi import APIRouter

from .endpoints import health
from .endpoints import relay

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(relay.router, prefix="", tags=["relay"])
