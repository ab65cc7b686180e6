import json
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from categories import router as categories_router
from comments import router as comments_router
from core import config, db
from core.errors import install_error_handlers
from reviews import router as reviews_router
from users import router as users_router

ENDPOINTS_PATH = Path(__file__).resolve().parent / "core" / "endpoints.json"


@lru_cache(maxsize=1)
def endpoints_document() -> dict:
    return json.loads(ENDPOINTS_PATH.read_text(encoding="utf-8"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool(app)
    try:
        yield
    finally:
        await db.close_pool(app)


def create_app() -> FastAPI:
    logging.basicConfig(level=config.log_level())

    app = FastAPI(title="Board Game Reviews API", lifespan=lifespan)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)

    app.include_router(categories_router.router, tags=["categories"])
    app.include_router(reviews_router.router, tags=["reviews"])
    app.include_router(comments_router.router, tags=["comments"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/api", tags=["meta"])
    def get_endpoints() -> dict:
        return endpoints_document()

    @app.get("/health", tags=["meta"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
