from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from storage.collection_file import build_default_collection_file

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    source = build_default_collection_file()
    logger.info("Serving collection", extra={"path": str(source.path)})
    try:
        yield
    finally:
        build_default_collection_file.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Railists",
        description="Model railway collection listing, depot and yearly statistics.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
