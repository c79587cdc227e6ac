"""FastAPI backend for the tech therapy application - Main entry point."""
import warnings

# Suppress OpenTelemetry context detach warnings (known issue with async context management)
warnings.filterwarnings("ignore", message=".*Failed to detach context.*")
warnings.filterwarnings("ignore", message=".*was created in a different Context.*")

from tech_therapy.api import create_app
from tech_therapy.config import Config

# Create the FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn
    host, port = Config.get_server_config()
    uvicorn.run(
        "backend:app",
        host=host,
        port=port,
        reload=True,
        reload_dirs=[".", "tech_therapy"],
        log_level="warning"  # Application logs go through tech_therapy.logging_config
    )
