from dataclasses import dataclass
from typing import Tuple

from vimeoembed.CastMember import CastMember

UNKNOWN_AUTHOR = CastMember(real_name="Unknown")


@dataclass(frozen=True)
class VideoMetadata:
    """Metadata for a Vimeo video."""

    video_id: str
    title: str
    duration: str = "00:00:00"  # Format: "00:02:05"
    duration_seconds: int = 0
    upload_date: str = ""  # Format: "2014-03-01 10:00:00"
    description: str = ""
    thumbnail_url: str = ""
    cast: Tuple[CastMember, ...] = ()

    @property
    def author(self) -> CastMember:
        """First cast member, or an Unknown placeholder when there is no cast."""
        return self.cast[0] if self.cast else UNKNOWN_AUTHOR
