"""
Entry points used by page templates to embed Vimeo videos.
"""

import logging
from typing import Optional

from .Config import Config
from .ConfigManager import ConfigManager
from .Credential import resolve_credential
from .Renderer import render_embed, render_thumbnail
from .VideoMetadata import VideoMetadata
from .VimeoClient import VimeoClient

logger = logging.getLogger(__name__)


def fetch_metadata(url: str, config: Optional[Config] = None) -> VideoMetadata:
    """Resolve the credential and fetch the metadata of the video at ``url``."""
    if config is None:
        config = ConfigManager().load_config()
    credential = resolve_credential(config)
    return VimeoClient(config, credential).fetch_metadata(url)


def embed(url: str, config: Optional[Config] = None) -> str:
    """Embed a Vimeo video with its title and cast follow links.

    Args:
        url: URL of the Vimeo page for the video, e.g. https://vimeo.com/12345
        config: Configuration, loaded with ConfigManager when omitted

    Returns:
        The HTML snippet
    """
    metadata = fetch_metadata(url, config)
    logger.debug(f"Rendering embed for video {metadata.video_id}")
    return render_embed(metadata)


def thumbnail(url: str, config: Optional[Config] = None) -> str:
    """Embed a Vimeo video thumbnail card linking to the site's video page.

    Args:
        url: URL of the Vimeo page for the video
        config: Configuration, loaded with ConfigManager when omitted

    Returns:
        The HTML snippet
    """
    if config is None:
        config = ConfigManager().load_config()
    metadata = fetch_metadata(url, config)
    logger.debug(f"Rendering thumbnail for video {metadata.video_id}")
    return render_thumbnail(metadata, config.site_base_url)
