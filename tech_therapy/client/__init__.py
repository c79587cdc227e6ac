"""Client for the tech therapy API."""
from .http_client import ApiError, InvalidModeError, TherapyClient
from .reveal import ResponseViewer, char_schedule, line_duration, split_lines
from .session import SessionState, SessionStateError, TherapySession
from .terminal import TerminalPlayer

__all__ = [
    'ApiError',
    'InvalidModeError',
    'TherapyClient',
    'ResponseViewer',
    'char_schedule',
    'line_duration',
    'split_lines',
    'SessionState',
    'SessionStateError',
    'TherapySession',
    'TerminalPlayer'
]
