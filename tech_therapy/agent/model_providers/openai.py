"""OpenAI model provider implementation."""
from typing import Optional
from strands.models.openai import OpenAIModel
from .base import BaseModelProvider
from ...config import Config
from ...logging_config import get_logger

logger = get_logger("tech_therapy.openai_provider")


class OpenAIProvider(BaseModelProvider):
    """Provider for OpenAI models."""

    def __init__(self, model_id: Optional[str] = None):
        """
        Initialize OpenAI provider.

        Args:
            model_id: OpenAI model ID to use (default: from OPENAI_MODEL_ID env var)
        """
        self.api_key = Config.OPENAI_API_KEY
        self.model_id = model_id or Config.OPENAI_MODEL_ID
        self.params = Config.get_llm_params()

    def get_model(self) -> OpenAIModel:
        """
        Get OpenAI model instance.

        Returns:
            Initialized OpenAIModel
        """
        logger.debug(f"[OPENAI] Creating model {self.model_id} with params {self.params}")
        return OpenAIModel(
            client_args={"api_key": self.api_key},
            model_id=self.model_id,
            params=dict(self.params),
        )

    def get_provider_name(self) -> str:
        """Get provider name."""
        return "openai"

    def is_available(self) -> bool:
        """
        Check if OpenAI is available.

        Returns:
            True if OPENAI_API_KEY is configured
        """
        return bool(self.api_key)
