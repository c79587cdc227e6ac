"""Model provider endpoints."""
from fastapi import APIRouter
from tech_therapy.agent.model_providers import ModelProviderFactory
from tech_therapy.logging_config import get_logger

logger = get_logger("tech_therapy.routes.models")

router = APIRouter(prefix="/api/models", tags=["models"])


@router.get("/providers")
async def get_providers():
    """
    Get list of model providers.

    Returns:
        Dictionary with known providers and the configured default
    """
    providers = ModelProviderFactory.get_available_providers()
    default_provider = ModelProviderFactory.get_default_provider()
    logger.debug(f"Providers: {providers}, default: {default_provider}")

    return {
        "providers": providers,
        "default": default_provider
    }
