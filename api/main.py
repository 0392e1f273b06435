"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import articles_router, auth_router, saved_articles_router, users_router
from api.services.sessions import MemorySessionStore, RedisSessionStore, SessionStore
from database.connection import DatabaseConnection, create_storage
from database.repositories import Storage
from shared.config import settings

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    if app.state.sessions is None:
        redis_client = await DatabaseConnection.init_redis()
        app.state.sessions = RedisSessionStore(redis_client)
        logger.info("Using Redis session store")

    yield

    # Shutdown
    await app.state.sessions.close()
    await DatabaseConnection.close_connections()


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"] if item != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts) or "Invalid request"


def create_app(
    storage: Optional[Storage] = None,
    sessions: Optional[SessionStore] = None
) -> FastAPI:
    """
    Build the application around an explicit storage and session store.

    Without a session store, the configured backend is used: the memory store
    is built here, the Redis store is connected during startup.
    """
    app = FastAPI(
        title=settings.app_name,
        description="Categorized news browsing, search and saved articles",
        version="1.0.0",
        lifespan=lifespan
    )

    if sessions is None and settings.session_backend == "memory":
        sessions = MemorySessionStore()

    app.state.storage = storage if storage is not None else create_storage()
    app.state.sessions = sessions

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render client errors as {"message": ...}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed input is a 400, not FastAPI's default 422."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _format_validation_error(exc)}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"}
        )

    # Include routers
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(articles_router)
    app.include_router(saved_articles_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug
    )
