"""
Resolution of the OAuth1 credential used to sign Vimeo API requests.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from requests_oauthlib import OAuth1

from .Config import Config

logger = logging.getLogger(__name__)

# Config field -> where an operator is expected to set it
REQUIRED_FIELDS = (
    ("vimeo_client_secret", "environment variables"),
    ("vimeo_client_id", "the site configuration"),
    ("vimeo_access_token_secret", "environment variables"),
    ("vimeo_access_token", "the site configuration"),
)


@dataclass(frozen=True)
class Credential:
    """Signed-request capability for the Vimeo API."""

    client_id: str
    client_secret: str
    access_token: str
    access_token_secret: str
    api_url: str

    @property
    def auth(self) -> OAuth1:
        """OAuth1 auth object signing requests in the Authorization header."""
        return OAuth1(
            self.client_id,
            client_secret=self.client_secret,
            resource_owner_key=self.access_token,
            resource_owner_secret=self.access_token_secret,
            signature_type="AUTH_HEADER",
        )

    def __repr__(self) -> str:
        """Repr without the secrets."""
        return f"Credential(client_id={self.client_id!r}, api_url={self.api_url!r})"


def resolve_credential(config: Config) -> Optional[Credential]:
    """Build a credential from config, or None if any required value is missing.

    Each missing value is logged; no partial credential is ever returned and
    no network call is made.
    """
    missing = [(name, source) for name, source in REQUIRED_FIELDS if not getattr(config, name)]
    for name, source in missing:
        logger.warning(f"Cannot fetch video info from vimeo, {name} is missing from {source}")
    if missing:
        return None

    return Credential(
        client_id=config.vimeo_client_id,
        client_secret=config.vimeo_client_secret,
        access_token=config.vimeo_access_token,
        access_token_secret=config.vimeo_access_token_secret,
        api_url=config.api_url,
    )
