"""Agent module for the tech therapy application."""
from .therapist import Therapist, ProviderStreamError, get_therapist

__all__ = ['Therapist', 'ProviderStreamError', 'get_therapist']
