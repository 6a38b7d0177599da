"""
Client fetching video metadata from the Vimeo Advanced API.
"""

import json
import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import requests

from vimeoembed.CastMember import CastMember
from vimeoembed.Config import Config
from vimeoembed.Credential import Credential
from vimeoembed.VideoMetadata import VideoMetadata
from vimeoembed.VimeoEmbedError import InvalidUrlError, MalformedResponseError

UNAVAILABLE_TITLE = "Unable to fetch video info from vimeo"


class VimeoClient:
    """Fetches and parses Vimeo video metadata using signed API requests."""

    def __init__(self, config: Config, credential: Optional[Credential]) -> None:
        """Initialize the client.

        Args:
            config: Configuration object
            credential: Resolved credential, or None to skip every API call
        """
        self.config = config
        self.credential = credential
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def get_video_id(url: str) -> str:
        """Extract the video ID, the trailing digits of a Vimeo URL."""
        match = re.match(r"^.*/([0-9]+)$", url.strip())
        if not match:
            raise InvalidUrlError(f"Invalid Vimeo URL: {url}", "Expected a URL ending in /<digits>")
        return match.group(1)

    def fetch_metadata(self, url: str) -> VideoMetadata:
        """Fetch info, thumbnail and cast for the video at ``url``."""
        video_id = self.get_video_id(url)
        self.logger.debug(f"Fetching metadata for Vimeo video {video_id}")

        with requests.Session() as session:
            info = self._fetch_info(session, video_id)
            thumbnail_url = self._fetch_thumbnail_url(session, video_id)
            cast = self._fetch_cast(session, video_id)

        duration_seconds = self._to_seconds(info.get("duration"))
        return VideoMetadata(
            video_id=video_id,
            title=str(info.get("title") or ""),
            duration=self.format_duration(duration_seconds),
            duration_seconds=duration_seconds,
            upload_date=self.format_upload_date(info.get("upload_date")),
            description=self.truncate_description(info.get("description"), self.config.description_max_length),
            thumbnail_url=thumbnail_url,
            cast=cast,
        )

    def exec_method(self, session: requests.Session, method: str, video_id: str) -> Optional[Dict[str, Any]]:
        """Execute a method against the Vimeo API.

        Returns the decoded JSON body, or None when there is no credential or
        the request did not succeed. Raises MalformedResponseError when a body
        was received that is not a JSON object.
        """
        if self.credential is None:
            return None

        params = {"method": method, "video_id": video_id, "format": "json"}
        try:
            response = session.get(
                self.credential.api_url,
                params=params,
                auth=self.credential.auth,
                timeout=self.config.request_timeout,
            )
        except requests.exceptions.Timeout:
            self.logger.warning(f"{method} for video {video_id} timed out after {self.config.request_timeout}s")
            return None
        except requests.exceptions.RequestException as e:
            self.logger.warning(f"{method} for video {video_id} failed: {e}")
            return None

        if not response.ok:
            self.logger.warning(f"{method} for video {video_id} returned HTTP {response.status_code}")
            return None
        if not response.text.strip():
            self.logger.warning(f"{method} for video {video_id} returned an empty body")
            return None

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Vimeo returned malformed JSON for {method} (video {video_id})", f"{e}: {response.text[:200]}"
            )
        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Vimeo returned an unexpected body for {method} (video {video_id})", response.text[:200]
            )

        # The v2 API reports errors as {"stat": "fail", "err": {...}}
        if body.get("stat") == "fail":
            err = body.get("err") or {}
            self.logger.warning(f"{method} for video {video_id} failed: {err.get('msg', 'unknown error')}")
            return None

        return body

    def _fetch_info(self, session: requests.Session, video_id: str) -> Dict[str, Any]:
        """Fetch the info record of the video, or a placeholder title when unavailable."""
        method = "vimeo.videos.getInfo"
        body = self.exec_method(session, method, video_id)
        if body is None:
            return {"title": UNAVAILABLE_TITLE}
        try:
            video = body["video"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise self._malformed(method, video_id, body, e)
        if not isinstance(video, dict):
            raise self._malformed(method, video_id, body, TypeError("video entry is not an object"))
        return video

    def _fetch_thumbnail_url(self, session: requests.Session, video_id: str) -> str:
        """Fetch the medium thumbnail URL, or an empty string when unavailable."""
        method = "vimeo.videos.getThumbnailUrls"
        body = self.exec_method(session, method, video_id)
        if body is None:
            return ""
        try:
            # Index 1 is the medium sized thumbnail
            return str(body["thumbnails"]["thumbnail"][1]["_content"])
        except (KeyError, IndexError, TypeError) as e:
            raise self._malformed(method, video_id, body, e)

    def _fetch_cast(self, session: requests.Session, video_id: str) -> Tuple[CastMember, ...]:
        """Fetch the cast of the video, empty when unavailable."""
        method = "vimeo.videos.getCast"
        body = self.exec_method(session, method, video_id)
        if body is None:
            return ()
        try:
            members = body["cast"].get("member", [])
        except (KeyError, AttributeError) as e:
            raise self._malformed(method, video_id, body, e)
        # A lone member is returned as an object rather than a list
        if isinstance(members, dict):
            members = [members]
        if not isinstance(members, list) or not all(isinstance(m, dict) for m in members):
            raise self._malformed(method, video_id, body, TypeError("cast members are not objects"))
        return self.parse_cast(members, self.config.excluded_username)

    @staticmethod
    def _malformed(method: str, video_id: str, body: Dict[str, Any], error: Exception) -> MalformedResponseError:
        """Build the error for a JSON body lacking the expected structure."""
        return MalformedResponseError(
            f"Vimeo returned an unexpected structure for {method} (video {video_id})",
            f"{type(error).__name__}: {error}; body: {json.dumps(body)[:200]}",
        )

    @staticmethod
    def parse_cast(members: List[Dict[str, Any]], excluded_username: str) -> Tuple[CastMember, ...]:
        """Wrap API cast entries, dropping the excluded user name, order preserved."""
        cast = (CastMember.from_api(member) for member in members)
        return tuple(member for member in cast if member.user_name != excluded_username)

    @staticmethod
    def _to_seconds(value: Any) -> int:
        """Whole seconds from an API duration such as "125" or "125.0", 0 when invalid."""
        try:
            return max(int(float(value)), 0)
        except (TypeError, ValueError, OverflowError):
            return 0

    @staticmethod
    def format_duration(seconds: int) -> str:
        """Format seconds as a clock time, e.g. 125 -> "00:02:05".

        Formatted as a time of day, so durations of a day or more roll over.
        """
        hours, rem = divmod(seconds % 86400, 3600)
        minutes, secs = divmod(rem, 60)
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"

    @staticmethod
    def format_upload_date(value: Optional[str]) -> str:
        """Reformat an API date-time as "YYYY-MM-DD HH:MM:SS", keeping wall-clock values."""
        if not value:
            return ""
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logging.getLogger(__name__).debug(f"Could not parse upload date {value!r}, keeping it as is")
            return str(value)
        return parsed.strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def truncate_description(description: Optional[str], max_length: int = 150) -> str:
        """Keep whole leading sentences while their total length stays within max_length."""
        out = ""
        if not description:
            return out

        total = 0
        for sentence in re.findall(r"[^.!?]+[.!?]", description):
            sentence = sentence.strip()
            total += len(sentence)
            if total > max_length:
                break
            out += sentence
        return out
