from contextlib import asynccontextmanager

from fastapi import FastAPI

from pingbot.interfaces.api.routes import register_routes
from pingbot.infrastructure.database import initialize_database, engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the ledger tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the webhook application."""

    app = FastAPI(title="pingbot", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
