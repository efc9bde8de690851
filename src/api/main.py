"""
FastAPI Application.

Main entry point for the listing search API server.
"""

import logging
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load .env file at startup
load_dotenv()

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from loguru import logger  # noqa: E402
from starlette.exceptions import HTTPException as StarletteHTTPException  # noqa: E402

from config.settings import get_settings  # noqa: E402

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]: <14}</cyan> | <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str) -> None:
    """Send loguru and uvicorn logs to stderr at the given level."""
    logger.configure(extra={"module": "Server"})
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers = [InterceptHandler()]
        uv_logger.propagate = False


settings = get_settings()
configure_logging(settings.log_level)

log = logger.bind(module="App")

from src.api.routes import (  # noqa: E402
    health_router,
    search_router,
    telegram_router,
)
from src.api.routes.telegram import auto_setup_webhook, init_bot  # noqa: E402
from src.middleware import setup_middleware  # noqa: E402
from src.modules.listings import DataUnavailable, get_listing_store  # noqa: E402
from src.search import DATA_UNAVAILABLE_MESSAGE  # noqa: E402


async def warm_listing_cache() -> None:
    """
    Load the listing dump on startup.

    Failure is not fatal: the store stays empty and the first search
    retries the load.
    """
    try:
        listings = await get_listing_store().get()
        log.info(f"Startup: listing cache ready ({len(listings):,} listings)")
    except DataUnavailable as e:
        log.error(f"Startup: listing cache not loaded: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    await warm_listing_cache()

    if await init_bot():
        await auto_setup_webhook()

    yield

    log.info("Server stopped")


app = FastAPI(
    title="Eodisallae Listing Search API",
    description="Local real-estate listing search for the advisor chat",
    version="0.1.0",
    lifespan=lifespan,
)

setup_middleware(app, settings)

app.include_router(health_router)
app.include_router(search_router)
app.include_router(telegram_router)


# Unified error response format: {"success": false, "message": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
    )


@app.exception_handler(DataUnavailable)
async def data_unavailable_handler(request: Request, exc: DataUnavailable):
    """Listing dump could not be loaded; the client may retry later."""
    log.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"success": False, "message": DATA_UNAVAILABLE_MESSAGE},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report the first validation error as "<field>: <message>"."""
    errors = exc.errors()
    if not errors:
        message = "Validation error"
    else:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get("loc", []))
        msg = first_error.get("msg", "Validation error")
        message = f"{field}: {msg}" if field else msg

    return JSONResponse(
        status_code=422,
        content={"success": False, "message": message},
    )
