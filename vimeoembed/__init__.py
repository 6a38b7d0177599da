"""
Vimeo Embed

Fetches Vimeo video metadata through the authenticated API and renders it
as HTML snippets for embedding videos or video thumbnails in web pages.
"""

__version__ = "0.1.0"

from .core import embed, thumbnail

__all__ = ["embed", "thumbnail"]
