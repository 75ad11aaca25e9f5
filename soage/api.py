"""FastAPI web server for the Stack Overflow user age checker."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from soage import ProfileLookup, ServiceConfig, __version__
from soage.core.exporter import to_dict
from soage.exceptions import InvalidFormatError, ProfileNotFoundError, UpstreamError
from soage.logging import configure_logging, get_logger


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error body returned for every failed lookup."""

    error: str
    details: Any = None


# Global lookup instance
_lookup: Optional[ProfileLookup] = None
_log = get_logger("api")


def get_lookup() -> ProfileLookup:
    """Shared ProfileLookup, created on first use outside the lifespan."""
    global _lookup
    if _lookup is None:
        _lookup = ProfileLookup(ServiceConfig())
    return _lookup


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and the lookup pipeline."""
    global _lookup
    config = ServiceConfig()
    configure_logging(config)
    _lookup = ProfileLookup(config)
    _log.info("service_start", site=config.site, port=config.port)
    yield
    _lookup = None


app = FastAPI(
    title="Stack Overflow User Age Checker API",
    description="Account age and profile summary for Stack Overflow users",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ServiceConfig().cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidFormatError)
async def invalid_format_handler(request: Request, exc: InvalidFormatError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ProfileNotFoundError)
async def not_found_handler(request: Request, exc: ProfileNotFoundError):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    status_code = exc.status_code if exc.status_code and exc.status_code >= 400 else 500
    _log.error(
        "stack_exchange_api_error",
        path=request.url.path,
        status=exc.status_code,
        data=exc.details,
        message=exc.message,
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.message or "Failed to fetch Stack Overflow data",
            "details": exc.details or "No additional details",
        },
    )


@app.get("/", response_class=PlainTextResponse, tags=["System"])
async def root():
    """Liveness string."""
    return "Stack Overflow User Age Checker API is running"


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@app.get(
    "/api/stackoverflow/id/{user_id}",
    tags=["Lookup"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def lookup_by_id(user_id: str, lookup: ProfileLookup = Depends(get_lookup)):
    """
    Look up a Stack Overflow user by numeric id.

    Returns a single normalized profile.
    """
    result = await lookup.lookup_id(user_id)
    return to_dict(result)


@app.get(
    "/api/stackoverflow/{username:path}",
    tags=["Lookup"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def lookup_by_username(username: str, lookup: ProfileLookup = Depends(get_lookup)):
    """
    Look up a Stack Overflow user by display name.

    A single match returns the profile itself. Several matches (up to 5)
    return `{"users": [...], "note": "..."}` with every confidence lowered to
    Medium, so the caller can pick one by `user_id` or `profile_link`.
    """
    result = await lookup.lookup_username(username)
    return to_dict(result)


if __name__ == "__main__":
    import uvicorn
    config = ServiceConfig()
    uvicorn.run(app, host=config.host, port=config.port)
