"""Location Registry — FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.config import CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

from db import dispose_engine
from api.locations import router as locations_router
from api.routes import router
from registry import BackendUnavailable

app = FastAPI(
    title="Location Registry",
    description="Save named locations, look them up and measure distances between them",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(locations_router, prefix="/api")


@app.exception_handler(BackendUnavailable)
async def backend_unavailable_handler(_: Request, exc: BackendUnavailable) -> JSONResponse:
    """Database failures become 503; the client may retry later."""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "message": str(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep FastAPI's detail and add the message field the globe client displays."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """422 with the usual error list plus a readable message."""
    message = "; ".join(err["msg"] for err in exc.errors())
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "message": message},
    )


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
    logger.info("Database schema is up to date")


@app.on_event("shutdown")
def shutdown() -> None:
    """Release the database connection pool."""
    dispose_engine()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "location-registry", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
