"""
SMART Agent - FastAPI Application Entry Point

Publishes SMART data for all local block devices as JSON on GET /smart.
"""

import logging
import shutil
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smart_agent import __version__
from smart_agent.config import settings
from smart_agent.errors import SmartAgentError
from smart_agent.routers import smart

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"SMART Agent v{__version__} starting...")
    logger.info(f"Listening on {settings.api_host}:{settings.api_port}")

    for binary in (settings.lsblk_binary, settings.smartctl_binary):
        if shutil.which(binary):
            logger.info(f"Found {binary}")
        else:
            logger.warning(f"{binary} not found - /smart requests will report errors")

    yield

    logger.info("SMART Agent shutting down...")


# Create FastAPI app
app = FastAPI(
    title="SMART Agent API",
    description="Disk SMART telemetry collected from lsblk and smartctl",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None
)


@app.exception_handler(SmartAgentError)
async def smart_agent_exception_handler(request: Request, exc: SmartAgentError):
    logger.error(f"{request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.error_code}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": str(exc)}
    )


app.include_router(smart.router)


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "smart_agent.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
