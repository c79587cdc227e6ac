"""Tech therapy: streamed affirmations, encouragement and roasts for frustrated developers."""

__version__ = "0.1.0"
