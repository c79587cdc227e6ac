"""FastAPI application initialization and configuration."""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, PlainTextResponse
from tech_therapy.agent.model_providers import ModelProviderFactory
from tech_therapy.config import Config
from tech_therapy.logging_config import setup_logging
from tech_therapy.modes import InvalidModeError
from .routes import therapy, modes, models

# Setup logging
logger = setup_logging(Config.LOG_LEVEL, Config.LOG_TO_FILE, Config.LOG_TO_CONSOLE)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(title="Tech Therapy API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Mount static files
    app.mount("/static", StaticFiles(directory=Config.FRONTEND_DIR), name="static")

    app.include_router(therapy.router)
    app.include_router(modes.router)
    app.include_router(models.router)

    @app.exception_handler(InvalidModeError)
    async def invalid_mode_handler(request: Request, exc: InvalidModeError):
        """Reject unknown modes with a plain-text 400 and no stream."""
        logger.warning(f"Rejected request with invalid mode: {exc.value!r}")
        return PlainTextResponse("Invalid mode", status_code=400)

    # Root endpoint
    @app.get("/")
    async def read_root():
        """Serve the single-page front end."""
        return FileResponse(Config.FRONTEND_DIR / "index.html")

    # Health check endpoint
    @app.get("/api/health")
    async def health_check():
        """Check API health status."""
        return {"status": "healthy", "provider": ModelProviderFactory.get_default_provider()}

    logger.info("FastAPI application initialized successfully")
    return app
