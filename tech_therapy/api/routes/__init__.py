"""API route modules."""
from . import therapy, modes, models

__all__ = ['therapy', 'modes', 'models']
