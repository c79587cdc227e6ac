"""Model providers package for different LLM backends."""

from .base import BaseModelProvider
from .llamacpp import LlamaCppProvider
from .openai import OpenAIProvider
from .factory import ModelProviderFactory

__all__ = [
    'BaseModelProvider',
    'LlamaCppProvider',
    'OpenAIProvider',
    'ModelProviderFactory'
]
