# server.py
# ---------------------------------------------------------
# HTTP boundary for the pinmap organizer.
# ---------------------------------------------------------
# Endpoints:
#   GET  /                → hello + timestamp
#   GET  /health          → liveness with process uptime
#   POST /organize-files  → run one organize pass, return the summary
# ---------------------------------------------------------

import logging
import os
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pinsorter.config import OrganizerConfig, load_config
from pinsorter.errors import PinSorterError
from pinsorter.logging_setup import setup_logging
from pinsorter.organizer import organize

logger = logging.getLogger("pinsorter.server")

_STARTED = time.monotonic()


# =========================================================
# Response Models
# =========================================================
class HelloResponse(BaseModel):
    message: str
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    uptime: float


class OrganizeResponse(BaseModel):
    success: bool
    sessionId: str
    totalFolders: int
    pdfGroupCount: int
    orphanFolderCount: int
    destinationRoot: str
    filesCopied: int
    errorCount: int
    perGroupResults: List[Dict[str, Any]]
    orphanResults: List[Dict[str, Any]]
    skippedFolders: List[Dict[str, Any]]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


def get_config() -> OrganizerConfig:
    return load_config()


# =========================================================
# App
# =========================================================
app = FastAPI(
    title="Pinmap Organizer API",
    description="Groups staged pinmap folders by their source PDF into timestamped sessions.",
    version="1.0.0",
)


@app.get("/", response_model=HelloResponse)
async def hello():
    return {"message": "Hello World!", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Simple health endpoint to verify the API is running."""
    return {"status": "healthy", "uptime": time.monotonic() - _STARTED}


@app.post(
    "/organize-files",
    response_model=OrganizeResponse,
    responses={500: {"model": ErrorResponse}},
)
def organize_files(config: OrganizerConfig = Depends(get_config)):
    """
    Scan the staging directory, group pinmaps by PDF and copy them
    into a new session folder under the output root.
    """
    logger.info("Received organize request")
    return organize(config).to_dict()


@app.exception_handler(PinSorterError)
async def pinsorter_error_handler(request: Request, exc: PinSorterError):
    # Covers config loading in get_config as well as the run itself.
    logger.error("Organize failed: %s", exc)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    import uvicorn

    setup_logging()
    uvicorn.run(
        app,
        host=host or os.getenv("HOST", "127.0.0.1"),
        port=port or int(os.getenv("PORT", "3000")),
    )


if __name__ == "__main__":
    run()
