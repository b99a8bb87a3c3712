"""
ClinicBoard BFF - FastAPI Application
Backend-for-frontend for user, patient and appointment management
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

from clinicboard_bff.config import settings
from clinicboard_bff.models.schemas import ErrorResponse
from clinicboard_bff.routes import health, auth, users, patients, appointments
from clinicboard_bff.utils.http_request import HttpRequestClient, UpstreamRequestError
from clinicboard_bff.utils.logger import setup_logging, get_request_logger
from clinicboard_bff.utils.redis_client import init_redis_client, close_redis_client
from clinicboard_bff.utils.token_storage import RedisTokenStorage

logger = logging.getLogger(__name__)
request_logger = get_request_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    setup_logging(settings.logging_config_path, settings.log_level, settings.log_format)
    logger.info("BFF starting up...")

    redis_client = await init_redis_client(settings)
    token_storage = RedisTokenStorage(
        redis_client,
        key=settings.access_token_key,
        ttl=settings.access_token_ttl_seconds
    )
    http_client = HttpRequestClient(token_storage)
    await http_client.start()

    app.state.redis = redis_client
    app.state.token_storage = token_storage
    app.state.http_client = http_client

    logger.info(f"BFF startup complete - upstreams: {settings.base_urls}")

    yield

    # Shutdown
    logger.info("BFF shutting down...")
    await http_client.stop()
    await close_redis_client()


# Create FastAPI application
app = FastAPI(
    title="ClinicBoard BFF",
    description="Backend-for-frontend gateway for the user and business services",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-correlation-id"],
)


@app.middleware("http")
async def add_correlation_id(request: Request, call_next):
    correlation_id = request.headers.get("x-correlation-id") or uuid.uuid4().hex
    request.state.correlation_id = correlation_id
    started = time.perf_counter()
    response = await call_next(request)
    response.headers["x-correlation-id"] = correlation_id
    request_logger.log_request(
        request.method,
        request.url.path,
        response.status_code,
        time.perf_counter() - started,
        correlation_id=correlation_id
    )
    return response


BODYLESS_STATUSES = frozenset({204, 205, 304})


def error_response(status_code: int, message: Any) -> Response:
    # No body allowed on these statuses
    if status_code < 200 or status_code in BODYLESS_STATUSES:
        return Response(status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content={
            "error": True,
            "message": message,
            "status_code": status_code
        }
    )


@app.exception_handler(UpstreamRequestError)
async def upstream_exception_handler(request: Request, exc: UpstreamRequestError):
    """Render normalized upstream failures with the upstream status and body"""
    return error_response(exc.status_code, exc.message)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom HTTP exception handler"""
    return error_response(exc.status_code, exc.detail)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(400, jsonable_errors(exc))


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


# Include routers
upstream_errors = {
    400: {"model": ErrorResponse, "description": "Upstream service unreachable"},
    500: {"description": "Token cache unavailable"},
}

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix="/auth", tags=["Authentication"], responses=upstream_errors)
app.include_router(users.router, prefix="/users", tags=["Users"], responses=upstream_errors)
app.include_router(patients.router, prefix="/patient", tags=["Patients"], responses=upstream_errors)
app.include_router(appointments.router, prefix="/appointment", tags=["Appointments"], responses=upstream_errors)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "ClinicBoard BFF",
        "version": "1.0.0",
        "description": "Gateway for user, patient and appointment management",
        "docs": "/docs"
    }
