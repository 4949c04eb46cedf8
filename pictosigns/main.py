# pictosigns/main.py
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pictosigns import models  # noqa: F401  (registers SQLAlchemy models)
from pictosigns.core.errors import CatalogError, ConfigurationError
from pictosigns.core.logging_config import logger, setup_logging
from pictosigns.core.settings import settings
from pictosigns.db import Base, engine
from pictosigns.routers import ALL_ROUTERS


# --- Auth safety guard (no anonymous signing key) ---
def assert_jwt_secret_configured():
    if not (settings.JWT_SECRET or "").strip():
        raise ConfigurationError(
            "JWT_SECRET is not set. Put it in the environment or in .env "
            "before starting the API."
        )


# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version="0.1.0")

setup_logging()
logger.info("startup", service="pictosigns-api")


@app.on_event("startup")
def _startup_guard():
    # runs at app startup, not at import
    assert_jwt_secret_configured()


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    client_ip = request.client.host if request.client else "unknown"

    bound_logger = logger.bind(
        request_id=request_id,
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    status_code = 500  # unless call_next returns
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        latency_ms = round((time.time() - start) * 1000, 2)
        bound_logger.bind(status_code=status_code, latency_ms=latency_ms).info(
            "request_finished"
        )


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ----------------------------------------------------
# Error handlers (plain text, the admin UI shows the body as-is)
# ----------------------------------------------------
@app.exception_handler(CatalogError)
def catalog_error_handler(request: Request, exc: CatalogError):
    cause = exc.__cause__
    logger.bind(
        endpoint=str(request.url.path),
        detail=exc.detail,
        cause=repr(cause) if cause is not None else None,
    ).error("catalog_error")
    return PlainTextResponse(exc.description, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.bind(endpoint=str(request.url.path), error_count=len(exc.errors())).info(
        "malformed_request"
    )
    return PlainTextResponse("Malformed request", status_code=422)


@app.exception_handler(StarletteHTTPException)
def http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
for router in ALL_ROUTERS:
    app.include_router(router)


# ----------------------------------------------------
# Startup
# ----------------------------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
