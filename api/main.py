"""Main FastAPI application."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import exercise_router, log_router, split_router
from api.errors import register_exception_handlers
from config.settings import settings
from models.database import connect_to_mongo
from utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    logger.info("Starting application...")
    app.state.store = await connect_to_mongo(settings.mongodb_url, settings.database_name)
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    app.state.store.close()
    logger.info("Application shut down")


def create_app() -> FastAPI:
    """Build the application with its routers, middleware and error handlers."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Exercise catalog, workout splits and exercise logs",
        lifespan=lifespan,
    )

    logger.info(f"CORS configured with origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(exercise_router.router)
    app.include_router(split_router.router)
    app.include_router(log_router.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
