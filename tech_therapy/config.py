"""Configuration management for the tech therapy application."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
env_path = PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=env_path)


class Config:
    """Application configuration."""

    # Model provider selection ('openai' or 'llamacpp')
    MODEL_PROVIDER: str = os.getenv("MODEL_PROVIDER", "openai")

    # OpenAI API Configuration
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL_ID: str = os.getenv("OPENAI_MODEL_ID", "gpt-4")

    # LlamaCpp Server (OpenAI-compatible local server)
    LLAMA_CPP_URL: str = os.getenv("LLAMA_CPP_URL", "http://127.0.0.1:8033")
    LLAMA_CPP_MODEL_ID: str = os.getenv("LLAMA_CPP_MODEL_ID", "default")

    # LLM Parameters
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))
    LLM_MAX_TOKENS: int = int(os.getenv("LLM_MAX_TOKENS", "1024"))

    # FastAPI Server
    FASTAPI_HOST: str = os.getenv("FASTAPI_HOST", "0.0.0.0")
    FASTAPI_PORT: int = int(os.getenv("FASTAPI_PORT", "8000"))

    # Client
    THERAPY_API_URL: str = os.getenv("THERAPY_API_URL", "http://127.0.0.1:8000")
    CLIENT_CONNECT_TIMEOUT: float = float(os.getenv("CLIENT_CONNECT_TIMEOUT", "10"))

    # Static front end
    FRONTEND_DIR: Path = Path(__file__).parent / "frontend"

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "True").lower() in ("true", "1", "yes")
    LOG_TO_CONSOLE: bool = os.getenv("LOG_TO_CONSOLE", "True").lower() in ("true", "1", "yes")

    # Therapist persona sent with every prompt
    SYSTEM_PROMPT: str = (
        "You are an empathetic tech therapist who specializes in supporting "
        "developers through their technical frustrations."
    )

    @classmethod
    def get_server_config(cls) -> tuple[str, int]:
        """Get FastAPI server configuration."""
        return cls.FASTAPI_HOST, cls.FASTAPI_PORT

    @classmethod
    def get_system_prompt(cls) -> str:
        """Get therapist system prompt."""
        return cls.SYSTEM_PROMPT

    @classmethod
    def get_api_url(cls) -> str:
        """Get the base URL the client talks to."""
        return cls.THERAPY_API_URL.rstrip("/")

    @classmethod
    def get_llm_params(cls) -> dict:
        """Get sampling parameters shared by all providers."""
        return {
            "max_tokens": cls.LLM_MAX_TOKENS,
            "temperature": cls.LLM_TEMPERATURE,
        }
