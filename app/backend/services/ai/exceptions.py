"""
Exceptions for the AI field extraction.
"""


class AIServiceError(Exception):
    """Raised when the extraction service fails or returns malformed data."""

    pass
