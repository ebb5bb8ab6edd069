"""Top-level routers: the greeting/health routes at the root, CRUD under /api."""

from fastapi import APIRouter

from portfolio_api.api.routes import health, projects

root_router = APIRouter()
root_router.include_router(health.router, tags=["Health"])

api_router = APIRouter(prefix="/api")
api_router.include_router(projects.router)
