# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
FastAPI application.

Responsibilities
----------------
* Instantiate the FastAPI app.
* Register CORS middleware and the request-logging middleware.
* Render every error as ``{"error": <message>}``.
* Mount the three feature routers (auth, content, forms).
* Create missing tables and purge expired sessions on startup.
* Serve the static site files so a single ``uvicorn`` process serves both
  the API and the pages.
* Expose a /health endpoint for container liveness checks.

Run with:
    uvicorn main:app --app-dir backend
"""

import time
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from auth.router import router as auth_router
from content.router import router as content_router
from forms.router import router as forms_router
from core.config import settings
from core.errors import ApiError, StorageError
from core.logger import logger
from core.sessions import DatabaseSessionStore
from database import SessionLocal, init_db

app = FastAPI(title="eSports Hub", version="1.0.0")

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
# Credentials are allowed so the browser sends the session cookie; that rules
# out a wildcard origin.  List the exact site origins in CORS_ORIGINS.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


# ---------------------------------------------------------------------------
# Request-logging middleware
# ---------------------------------------------------------------------------
# Logs every inbound request: method, path, client IP, status, latency.
# Request bodies (passwords, form contents) and cookies are NOT echoed.


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, client IP, response status and latency (ms)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        client_ip = request.client.host if request.client else "unknown"

        logger.info(
            "%s %s | client=%s status=%d latency=%.1fms",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            elapsed_ms,
        )
        return response


app.add_middleware(_RequestLogMiddleware)

# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(ApiError)
async def _api_error(request: Request, exc: ApiError):
    return _error(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def _body_error(request: Request, exc: RequestValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")


@app.exception_handler(SQLAlchemyError)
async def _db_error(request: Request, exc: SQLAlchemyError):
    # Only reached from dependencies; handler bodies run inside error_boundary
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return _error(StorageError.status_code, StorageError.message)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(auth_router)
app.include_router(content_router)
app.include_router(forms_router)

# ---------------------------------------------------------------------------
# Startup / health
# ---------------------------------------------------------------------------


@app.on_event("startup")
def _on_startup():
    logger.info("eSports Hub service starting up")
    try:
        init_db()
        if settings.session_backend != "memory":
            db = SessionLocal()
            try:
                store = DatabaseSessionStore(db, max_age=timedelta(minutes=settings.session_expire_minutes))
                removed = store.purge_expired()
            finally:
                db.close()
            if removed:
                logger.info("Purged %d expired sessions", removed)
    except SQLAlchemyError:
        logger.exception("Database initialization failed. Check DATABASE_URL.")


@app.on_event("shutdown")
def _on_shutdown():
    logger.info("eSports Hub service shutting down")


@app.get("/health")
def health():
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Static files – site pages
# ---------------------------------------------------------------------------
# The site is the router's fallback app rather than a mount at "/": a mount
# would claim every path, turning a wrong verb on an API route into a 404
# instead of a 405.  ``html=True`` serves index.html for directory requests.
_SITE_DIR = Path(__file__).resolve().parent.parent / "site"


def serve_site(application: FastAPI, directory: Path) -> None:
    application.router.default = StaticFiles(directory=str(directory), html=True)


if _SITE_DIR.is_dir():
    serve_site(app, _SITE_DIR)
