from fastapi import FastAPI

from .github_hook import router as github_hook_router
from .health import router as health_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(github_hook_router)
