"""Tech therapist agent that streams a single completion.

Uses the Strands async iterator (``stream_async``) and forwards only the text
deltas. A new Agent is built for every request, so no conversation history is
carried between users.
"""
from typing import AsyncGenerator, Optional

from strands import Agent

from ..config import Config
from ..logging_config import get_logger
from .model_providers import ModelProviderFactory

logger = get_logger("tech_therapy.agent")


class ProviderStreamError(RuntimeError):
    """Raised when the model provider fails while producing a completion."""


class Therapist:
    """Streams completions for a prompt with the therapist persona."""

    def __init__(self, provider_name: Optional[str] = None, system_prompt: Optional[str] = None):
        """
        Args:
            provider_name: Model provider to use (default: MODEL_PROVIDER)
            system_prompt: Persona instruction (default: Config.SYSTEM_PROMPT)
        """
        self.provider_name = provider_name or ModelProviderFactory.get_default_provider()
        self.system_prompt = system_prompt or Config.get_system_prompt()

    def create_agent(self) -> Agent:
        """Create a fresh, tool-less Strands agent for one request."""
        provider = ModelProviderFactory.create_provider(self.provider_name)
        logger.info(f"Using model provider: {provider.get_provider_name()} ({provider.model_id})")
        return Agent(
            model=provider.get_model(),
            system_prompt=self.system_prompt,
            callback_handler=None  # No callback handler needed with stream_async
        )

    async def stream(self, prompt: str) -> AsyncGenerator[str, None]:
        """
        Stream the completion for a prompt.

        Args:
            prompt: Fully built user prompt

        Yields:
            Text fragments in the order the model produces them

        Raises:
            ProviderStreamError: If the provider cannot be set up or fails mid-stream
        """
        try:
            agent = self.create_agent()
            async for event in agent.stream_async(prompt):
                if "data" in event and event["data"]:
                    yield event["data"]
        except Exception as e:
            logger.error(f"Provider '{self.provider_name}' failed: {e}", exc_info=True)
            raise ProviderStreamError(f"{self.provider_name} stream failed: {e}") from e


def get_therapist() -> Therapist:
    """FastAPI dependency returning a therapist for the default provider."""
    return Therapist()
