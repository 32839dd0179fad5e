# ============================================================================
# FILE: mixtape/main.py
# ============================================================================
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from mixtape.api.v1.router import api_router
from mixtape.core.exceptions import MixtapeError, NotFound
from mixtape.core.logging import setup_logging
from mixtape.config import settings
from typing import Optional
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

HOME_PAGES = ["index.html", "biblioteca.html", "inicio.html", "home.html"]

def resolve_frontend_dir(path: str) -> Optional[str]:
    """
    Locate the static frontend. A copy unpacked one level too deep
    (frontend/frontend/index.html) is picked up as well.
    """
    path = os.path.abspath(path)
    if not os.path.isdir(path):
        return None
    nested = os.path.join(path, os.path.basename(path))
    if not os.path.exists(os.path.join(path, "index.html")) and \
            os.path.exists(os.path.join(nested, "index.html")):
        return nested
    return path

# Create FastAPI app instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Personal playlists with per-user ownership",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,  # Token travels in the Authorization header
    allow_methods=["*"],
    allow_headers=["*"],
)

# Every error leaves as {"error": "..."}
@app.exception_handler(MixtapeError)
async def mixtape_error_handler(request: Request, exc: MixtapeError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if any((error.get("loc") or ("",))[0] == "path" for error in errors):
        # A malformed id cannot match any row
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": NotFound.message})
    message = errors[0].get("msg", "Datos inválidos") if errors else "Datos inválidos"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Error interno"})

# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)

frontend_path = resolve_frontend_dir(settings.FRONTEND_DIR)

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info(f"Starting {settings.APP_NAME}")
    # Create database tables
    from mixtape.db.base import Base
    from mixtape.db.session import engine
    Base.metadata.create_all(bind=engine)
    logger.info(f"DB => {engine.url.render_as_string(hide_password=True)}")
    logger.info(f"Public dir => {frontend_path}")

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    from mixtape.db.session import engine
    engine.dispose()
    logger.info(f"Shutting down {settings.APP_NAME}")

@app.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def serve_frontend():
    """Serve the first home page found in the frontend directory"""
    if frontend_path:
        for name in HOME_PAGES:
            candidate = os.path.join(frontend_path, name)
            if os.path.exists(candidate):
                return FileResponse(candidate)
    return PlainTextResponse(
        f"No se encontró página de inicio. Busqué: {', '.join(HOME_PAGES)} en {frontend_path or settings.FRONTEND_DIR}",
        status_code=status.HTTP_404_NOT_FOUND,
    )

# Serve static files last so API routes take precedence
if frontend_path:
    app.mount("/", StaticFiles(directory=frontend_path), name="static")
