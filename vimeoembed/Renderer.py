"""
HTML fragments for Vimeo videos.

Markup (class names and nesting) is consumed by the site's CSS, keep it stable.
"""

from html import escape

from vimeoembed.CastMember import CastMember
from vimeoembed.VideoMetadata import VideoMetadata

PLAYER_URL = "//player.vimeo.com/video/{video_id}?title=0&byline=0&portrait=0&badge=0&color=2664A2"

EMBED_TEMPLATE = (
    '<div class="embedded-media">'
    "<h4>{title}</h4>"
    '<iframe src="{player_url}" width="500" height="313" frameborder="0" '
    "webkitallowfullscreen mozallowfullscreen allowfullscreen></iframe>"
    "{follow_links}"
    "</div>"
)

# TODO: wire the icons to the member's blog, facebook, twitter and linkedin profiles
FOLLOW_TEMPLATE = (
    '<div class="follow-links">'
    '<span class="title">Follow {first_name}</span>'
    '<a><i class="icon-rss"></i></a>'
    '<a><i class="icon-facebook"></i></a>'
    '<a><i class="icon-twitter"></i></a>'
    '<a><i class="icon-linkedin"></i></a>'
    "</div>"
)

THUMBNAIL_TEMPLATE = (
    '<a href="{page_url}"><img src="{thumbnail_url}" /></a>'
    '<span class="label material-duration">{duration}</span>'
    '<h4><a href="{thumbnail_url}">{title}</a></h4>'
    '<p class="author">Author: <a href="#">{author}</a></p>'
    '<p class="material-datestamp">Added {upload_date}</p>'
    '<div class="body"><p>{description}</p></div>'
)


def render_follow_links(member: CastMember) -> str:
    """Render the follow block of a cast member, addressed by first name."""
    return FOLLOW_TEMPLATE.format(first_name=escape(member.first_name))


def render_embed(metadata: VideoMetadata) -> str:
    """Render the player iframe with a title and follow links for each cast member."""
    return EMBED_TEMPLATE.format(
        title=escape(metadata.title),
        player_url=PLAYER_URL.format(video_id=metadata.video_id),
        follow_links="".join(render_follow_links(member) for member in metadata.cast),
    )


def render_thumbnail(metadata: VideoMetadata, site_base_url: str = "") -> str:
    """Render a thumbnail card linking to the site's own page for the video."""
    page_url = f"{site_base_url.rstrip('/')}/video/vimeo/{metadata.video_id}"
    return THUMBNAIL_TEMPLATE.format(
        page_url=escape(page_url),
        thumbnail_url=escape(metadata.thumbnail_url),
        duration=escape(metadata.duration),
        title=escape(metadata.title),
        author=escape(metadata.author.real_name),
        upload_date=escape(metadata.upload_date),
        description=escape(metadata.description),
    )
