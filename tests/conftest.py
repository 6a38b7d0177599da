"""
Shared fixtures for the Vimeo embed tests.
"""

import json

import pytest
import requests

from vimeoembed.Config import Config
from vimeoembed.Credential import resolve_credential


def make_response(body, status_code=200):
    """Build a real requests.Response carrying ``body`` (dict -> JSON, str as is)."""
    response = requests.Response()
    response.status_code = status_code
    text = body if isinstance(body, str) else json.dumps(body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


INFO_BODY = {
    "generated_in": "0.0200",
    "stat": "ok",
    "video": [
        {
            "id": "12345",
            "title": "Intro to X",
            "description": "Learn X in minutes. It is fast! Want more?",
            "upload_date": "2014-03-01T10:00:00Z",
            "duration": "125",
        }
    ],
}

THUMBNAIL_BODY = {
    "stat": "ok",
    "thumbnails": {
        "thumbnail": [
            {"height": "75", "width": "100", "_content": "https://i.vimeocdn.com/video/1_100x75.jpg"},
            {"height": "150", "width": "200", "_content": "https://i.vimeocdn.com/video/1_200x150.jpg"},
            {"height": "480", "width": "640", "_content": "https://i.vimeocdn.com/video/1_640.jpg"},
        ]
    },
}

CAST_BODY = {
    "stat": "ok",
    "cast": {
        "member": [
            {"id": "1", "username": "pmuir", "realname": "Pete Muir", "role": "Speaker"},
            {"id": "2", "username": "jbossdeveloper", "realname": "JBoss Developer", "role": "Owner"},
            {"id": "3", "username": "mstanley", "realname": "Marc Stanley", "role": "Speaker"},
        ]
    },
}

BODIES = {
    "vimeo.videos.getInfo": INFO_BODY,
    "vimeo.videos.getThumbnailUrls": THUMBNAIL_BODY,
    "vimeo.videos.getCast": CAST_BODY,
}


@pytest.fixture
def config():
    return Config(
        site_base_url="https://developers.example.org",
        vimeo_client_id="client-id",
        vimeo_access_token="access-token",
        vimeo_client_secret="client-secret",
        vimeo_access_token_secret="access-token-secret",
    )


@pytest.fixture
def credential(config):
    return resolve_credential(config)


@pytest.fixture
def api_get():
    """Side effect answering each API method with its canned body."""

    def get(url, params=None, **kwargs):
        return make_response(BODIES[params["method"]])

    return get
