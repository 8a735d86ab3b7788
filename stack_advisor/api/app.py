"""
StackAdvisor — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn stack_advisor.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stack_advisor import __version__
from .config import config
from .dependencies import catalog_manager
from .routes import (
    health_router,
    catalog_router,
    sessions_router,
)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — завантаження каталогу при старті.
    """
    logger.info("StackAdvisor API starting...")

    if catalog_manager.load():
        logger.info("API ready: http://%s:%s/docs", config.host, config.port)
    else:
        logger.warning("API starting in limited mode: %s", catalog_manager.error)

    yield

    logger.info("StackAdvisor API stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "%s %s → %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )

    return response


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(catalog_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)
