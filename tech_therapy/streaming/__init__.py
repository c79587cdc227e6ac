"""Streaming module for relaying completions."""
from .stream_handler import relay_text, relay_sse, STREAM_HEADERS

__all__ = ['relay_text', 'relay_sse', 'STREAM_HEADERS']
