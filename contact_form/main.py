"""
Contact Form API

Thin FastAPI backend that turns contact form submissions into Plain threads.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contact_form.config import get_settings
from contact_form.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from contact_form.routers import contact_form
from contact_form.services.http_client import close_shared_client, get_shared_client
from contact_form.services.plain import PlainClient

logger = logging.getLogger(__name__)

settings = get_settings()

SERVICE_NAME = "contact-form-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: build the Plain client, close HTTP on shutdown.

    A missing PLAIN_API_KEY raises ConfigurationError here, so the server
    refuses to start instead of failing on the first submission.
    """
    s = get_settings()
    http = get_shared_client(timeout=s.plain_timeout_seconds)
    try:
        app.state.plain_client = PlainClient.from_settings(s, http)
        logger.info("Plain client ready (%s)", s.plain_api_url)
        yield
    finally:
        await close_shared_client()


app = FastAPI(
    title="Contact Form API",
    description="Contact form submissions delivered to Plain as support threads",
    version=VERSION,
    lifespan=lifespan,
)

# Request ID and security headers on every response
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(contact_form.router, prefix="/api")


def _check_config() -> str:
    """Verify required configuration is loaded. Returns 'ok' or 'fail'."""
    return "ok" if get_settings().plain_api_key else "fail"


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check verifying required configuration."""
    checks = {"config": _check_config()}
    failed = [k for k, v in checks.items() if v != "ok"]
    if failed:
        logger.warning("Health check failed: %s", ", ".join(failed))

    result: dict[str, Any] = {
        "status": "fail" if failed else "ok",
        "service": SERVICE_NAME,
        "version": VERSION,
        "checks": checks,
    }
    return JSONResponse(content=result, status_code=503 if failed else 200)
