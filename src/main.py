"""FastAPI application. Serve with: uvicorn src.main:app"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from src.api.routes import register_exception_handlers, router
from src.core.config import configure_logging
from src.db.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Othello", version="0.1.0", lifespan=lifespan)
    app.include_router(router)
    register_exception_handlers(app)
    return app


app = create_app()
