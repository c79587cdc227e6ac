"""Factory for creating model provider instances."""
from .base import BaseModelProvider
from .llamacpp import LlamaCppProvider
from .openai import OpenAIProvider
from ...config import Config


class ModelProviderFactory:
    """Factory for creating model provider instances."""

    # Registry of available providers
    _providers = {
        "openai": OpenAIProvider,
        "llamacpp": LlamaCppProvider,
    }

    _display_names = {
        "openai": "OpenAI GPT",
        "llamacpp": "LlamaCpp (Local)",
    }

    @classmethod
    def create_provider(cls, provider_name: str, **kwargs) -> BaseModelProvider:
        """
        Create a model provider instance.

        Args:
            provider_name: Name of the provider ('openai', 'llamacpp')
            **kwargs: Additional arguments to pass to the provider constructor

        Returns:
            Initialized provider instance

        Raises:
            ValueError: If provider_name is not recognized or provider is not available
        """
        provider_name = provider_name.lower()

        if provider_name not in cls._providers:
            available = ", ".join(cls._providers.keys())
            raise ValueError(
                f"Unknown provider '{provider_name}'. Available providers: {available}"
            )

        provider = cls._providers[provider_name](**kwargs)

        if not provider.is_available():
            raise ValueError(
                f"Provider '{provider_name}' is not properly configured. "
                f"Please check your configuration settings."
            )

        return provider

    @classmethod
    def get_available_providers(cls) -> list[dict]:
        """
        Get list of known providers and whether each is configured.

        Returns:
            List of dicts with provider info (name, display_name, available)
        """
        return [
            {
                "name": name,
                "display_name": cls._display_names.get(name, name),
                "available": provider_class().is_available(),
            }
            for name, provider_class in cls._providers.items()
        ]

    @classmethod
    def get_default_provider(cls) -> str:
        """Get the configured default provider name."""
        return Config.MODEL_PROVIDER.lower()
