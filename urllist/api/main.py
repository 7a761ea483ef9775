import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from urllist.api.deps import get_rules, get_settings, init_db
from urllist.api.schemas import error_response
from urllist.app_shell.config import validate_settings

logging.basicConfig(
    level=os.environ.get("URLLIST_LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Fail fast on bad rules or config
    try:
        rules = get_rules()
        validate_settings(settings, rules)
        init_db(settings.db_path)
    except Exception:
        logger.critical("Startup failed", exc_info=True)
        raise

    logger.info("URL List API ready")
    yield


app = FastAPI(
    title="URL List API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from urllist.api.routes import links, lists, publish  # noqa: E402

app.include_router(lists.router, prefix="/api", tags=["Lists"])
app.include_router(publish.router, prefix="/api", tags=["Publish"])
app.include_router(links.router, prefix="/api", tags=["Links"])


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and parameters get the same {"error": ...} shape as everything else."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request."
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(400, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for failures outside route bodies (e.g. database initialisation)."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, "Internal server error.")


# CORS (Allow Frontend)
origins = [
    origin.strip()
    for origin in os.environ.get(
        "URLLIST_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
