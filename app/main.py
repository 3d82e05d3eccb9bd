import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.api.api import api_router
from app.core.config import settings
from app.db.errors import StoreError
from app.db.mock_db import MemoryStore
from app.db.seed import seed_data

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Invalid request data", "errors": exc.errors()}),
    )


def create_app(store: Optional[MemoryStore] = None) -> FastAPI:
    """Build the API around ``store``; a fresh, seeded store is used when none is given."""
    logging.basicConfig(level=settings.LOG_LEVEL)

    if store is None:
        store = MemoryStore()
        seed_data(store, sample=settings.SEED_SAMPLE_DATA)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s started with %d classes, %d services",
                    settings.PROJECT_NAME, len(store.classes), len(store.services))
        yield
        logger.info("%s shutting down; in-memory data is discarded", settings.PROJECT_NAME)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    return app


app = create_app()
