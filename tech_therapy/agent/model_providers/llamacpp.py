"""LlamaCpp model provider for a locally running llama-server."""
from typing import Optional
import requests
from strands.models.llamacpp import LlamaCppModel
from .base import BaseModelProvider
from ...config import Config
from ...logging_config import get_logger

logger = get_logger("tech_therapy.model_providers.llamacpp")


def is_server_running(base_url: str) -> bool:
    """Check whether llama-server answers its health endpoint."""
    try:
        response = requests.get(f"{base_url.rstrip('/')}/health", timeout=2)
        return response.status_code == 200
    except requests.RequestException:
        return False


class LlamaCppProvider(BaseModelProvider):
    """Provider for an already running llama.cpp server."""

    def __init__(self, base_url: Optional[str] = None, model_id: Optional[str] = None):
        """
        Initialize LlamaCpp provider.

        Args:
            base_url: Server URL (default: from LLAMA_CPP_URL env var)
            model_id: Model name reported to the server (default: from LLAMA_CPP_MODEL_ID)
        """
        self.base_url = base_url or Config.LLAMA_CPP_URL
        self.model_id = model_id or Config.LLAMA_CPP_MODEL_ID
        self.params = Config.get_llm_params()

    def get_model(self) -> LlamaCppModel:
        """
        Get LlamaCpp model instance.

        Returns:
            Initialized LlamaCppModel
        """
        logger.debug(f"LlamaCpp model {self.model_id} at {self.base_url}")
        return LlamaCppModel(
            base_url=self.base_url,
            model_id=self.model_id,
            params={**self.params, "repeat_penalty": 1.1},
        )

    def get_provider_name(self) -> str:
        """Get provider name."""
        return "llamacpp"

    def is_available(self) -> bool:
        """
        Check if the llama.cpp server is reachable.

        Returns:
            True if the server health check succeeds
        """
        return is_server_running(self.base_url)
