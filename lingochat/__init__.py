"""LingoChat: chat transcript with language detection, summaries and translation."""

__version__ = "1.0.0"
