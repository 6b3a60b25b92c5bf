# app.py
# FastAPI backend for the Baldur's Gate 3 guide browser.
# - In-memory guide store, seeded once at startup and owned by the app
# - Categories (two levels), guides, substring search, related guides
# - Per-session recently viewed list and community tips
# - Plain pass-through routes; all data logic lives in stores.py

import logging
import os
from typing import Optional

import structlog
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from seed import build_store
from stores import DuplicateSlugError, GuideStore, StoreError
from utils import env_flag

# Load environment variables
load_dotenv()

# ----------------------------
# Environment & settings
# ----------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class Settings(BaseModel):
    front_origin: str = Field(default_factory=lambda: os.getenv("FRONT_ORIGIN", "http://localhost:5173"))

    # Reject duplicate slugs and dangling references on create
    strict_integrity: bool = Field(default_factory=lambda: env_flag("GUIDES_STRICT_INTEGRITY"))

    # Query defaults
    related_limit: int = 3
    recent_limit: int = 5
    search_min_chars: int = 2


# --- Configure structlog + stdlib logging
logging.basicConfig(format="%(message)s", level=getattr(logging, LOG_LEVEL, logging.INFO))
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, LOG_LEVEL, logging.INFO)),
    processors=[structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
)
logger = structlog.get_logger("app")


# ----------------------------
# Error mapping
# ----------------------------

def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    # Only a strict store raises; duplicates conflict, dangling ids are bad input.
    status_code = 409 if isinstance(exc, DuplicateSlugError) else 400
    logger.warning("store_rejected_write", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# ----------------------------
# FastAPI app
# ----------------------------
from routes.categories import router as categories_router  # noqa: E402
from routes.guides import router as guides_router  # noqa: E402
from routes.recently_viewed import router as recently_viewed_router  # noqa: E402
from routes.tips import router as tips_router  # noqa: E402
from routes.health import router as health_router  # noqa: E402
from routes.docs import router as docs_router  # noqa: E402


def create_app(store: Optional[GuideStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around one store instance (seeded when not given)."""
    settings = settings or Settings()
    if store is None:
        store = build_store(strict=settings.strict_integrity)

    application = FastAPI(title="Guide Atlas - Backend")
    application.state.store = store
    application.state.settings = settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.front_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StoreError, store_error_handler)

    application.include_router(categories_router)
    application.include_router(guides_router)
    application.include_router(recently_viewed_router)
    application.include_router(tips_router)
    application.include_router(health_router)
    application.include_router(docs_router)

    logger.info("app_ready", strict=store.strict, front_origin=settings.front_origin)
    return application


app = create_app()
