"""Apartment parking registry: FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from utils.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.apartments import router as apartments_router
from api.fees import router as fees_router
from api.routes import router
from api.vehicles import router as vehicles_router
from schemas.health import HealthResponse
from utils.vehicle_view import UnresolvedReferenceError

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Apartment Parking Registry",
    description="Residents' vehicles registered against their apartments",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(apartments_router, prefix="/api")
app.include_router(vehicles_router, prefix="/api")
app.include_router(fees_router, prefix="/api")


@app.exception_handler(UnresolvedReferenceError)
def unresolved_reference_handler(request: Request, exc: UnresolvedReferenceError) -> JSONResponse:
    """A stored vehicle without type or apartment is a data fault, not a client error."""
    LOG.error("Cannot project vehicle %s for %s: %s", exc.vehicle_id, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Explicit health route so /api/health is always available."""
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database schema is up to date")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "apartment-parking", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
