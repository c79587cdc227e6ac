"""API module for the tech therapy application."""
from .app import create_app
from .models import TherapyRequest

__all__ = ['create_app', 'TherapyRequest']
