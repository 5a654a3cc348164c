# keypub/app.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from tortoise.contrib.fastapi import RegisterTortoise

from config import DB_URL, WEBSITE_NAME
from .store import KeyStore, StoreError
from .validation import ValidationError
from .web import router as web_router

logger = logging.getLogger(__name__)


def create_app(db_url: str = DB_URL, website_name: str = WEBSITE_NAME) -> FastAPI:
    # --- Lifespan manager: open the database, create the table, build the store ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with RegisterTortoise(
            app,
            db_url=db_url,
            modules={"models": ["keypub.database"]},
            generate_schemas=True,
        ):
            app.state.store = KeyStore()
            yield

    app = FastAPI(title="Key publish site", lifespan=lifespan)
    app.state.website_name = website_name

    app.include_router(web_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(
            "Database error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc.detail,
        )
        return PlainTextResponse("database error", status_code=500)

    return app
