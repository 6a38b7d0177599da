from typing import Optional


class VimeoEmbedError(Exception):
    """Exception raised for errors while embedding Vimeo videos."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        full_message = message
        if details:
            full_message += f"\nDetails: {details}"
        super().__init__(full_message)


class InvalidUrlError(VimeoEmbedError):
    """Raised when no video id can be extracted from a URL."""


class MalformedResponseError(VimeoEmbedError):
    """Raised when the Vimeo API answers with a body that cannot be parsed."""
