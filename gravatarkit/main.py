"""Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gravatarkit.config import config
from gravatarkit.logging_config import ACCESS_LOGGER, configure_logging
from gravatarkit.routes import avatar
from gravatarkit.utils.gravatar import OutOfRangeError

configure_logging(debug=config.DEBUG)


app = FastAPI(
    title="gravatarkit",
    description="Build Gravatar image URLs from email addresses",
    version="0.1.0",
)


access_logger = logging.getLogger(ACCESS_LOGGER)
logger = logging.getLogger("gravatarkit")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests similar to the access log."""

    response = await call_next(request)
    client_host = "-"
    if request.client is not None:
        client_host = request.client.host or "-"

    access_logger.info(
        '%s - "%s %s" %s',
        client_host,
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


@app.exception_handler(OutOfRangeError)
async def out_of_range_handler(request: Request, exc: OutOfRangeError) -> JSONResponse:
    """Report rejected avatar options as validation errors."""
    logger.warning("Rejected %s=%s on %s", exc.name, exc.value, request.url.path)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "field": exc.name},
    )


# Health check endpoint
@app.get("/healthz")
async def healthz() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(avatar.router)
