"""
Unit tests for the HTML renderers.
"""

from vimeoembed.CastMember import CastMember
from vimeoembed.Renderer import render_embed, render_thumbnail
from vimeoembed.VideoMetadata import VideoMetadata

FOLLOW_ICONS = (
    '<a><i class="icon-rss"></i></a>'
    '<a><i class="icon-facebook"></i></a>'
    '<a><i class="icon-twitter"></i></a>'
    '<a><i class="icon-linkedin"></i></a>'
)


def sample_metadata(**overrides):
    values = dict(
        video_id="12345",
        title="Intro to X",
        duration="00:02:05",
        duration_seconds=125,
        upload_date="2014-03-01 10:00:00",
        description="Learn X in minutes.",
        thumbnail_url="https://i.vimeocdn.com/video/1_200x150.jpg",
        cast=(
            CastMember(real_name="Pete Muir", user_name="pmuir"),
            CastMember(real_name="Marc Stanley", user_name="mstanley"),
        ),
    )
    values.update(overrides)
    return VideoMetadata(**values)


class TestRenderEmbed:
    """Test the embed renderer"""

    def test_markup(self):
        """Title, player iframe and one follow block per cast member"""
        html = render_embed(sample_metadata())

        assert html == (
            '<div class="embedded-media">'
            "<h4>Intro to X</h4>"
            '<iframe src="//player.vimeo.com/video/12345?title=0&byline=0&portrait=0&badge=0&color=2664A2" '
            'width="500" height="313" frameborder="0" webkitallowfullscreen mozallowfullscreen allowfullscreen>'
            "</iframe>"
            f'<div class="follow-links"><span class="title">Follow Pete</span>{FOLLOW_ICONS}</div>'
            f'<div class="follow-links"><span class="title">Follow Marc</span>{FOLLOW_ICONS}</div>'
            "</div>"
        )

    def test_no_cast(self):
        html = render_embed(sample_metadata(cast=()))

        assert "follow-links" not in html
        assert html.endswith("</iframe></div>")

    def test_empty_real_name(self):
        """A member without a real name still renders"""
        html = render_embed(sample_metadata(cast=(CastMember(real_name=""),)))
        assert '<span class="title">Follow </span>' in html

    def test_title_is_escaped(self):
        html = render_embed(sample_metadata(title="Q&A <live>"))
        assert "<h4>Q&amp;A &lt;live&gt;</h4>" in html

    def test_idempotent(self):
        """Rendering twice yields identical output"""
        metadata = sample_metadata()
        assert render_embed(metadata) == render_embed(metadata)


class TestRenderThumbnail:
    """Test the thumbnail renderer"""

    def test_markup(self):
        """Thumbnail card links to the site's own video page"""
        html = render_thumbnail(sample_metadata(), "https://developers.example.org")

        assert html == (
            '<a href="https://developers.example.org/video/vimeo/12345">'
            '<img src="https://i.vimeocdn.com/video/1_200x150.jpg" /></a>'
            '<span class="label material-duration">00:02:05</span>'
            '<h4><a href="https://i.vimeocdn.com/video/1_200x150.jpg">Intro to X</a></h4>'
            '<p class="author">Author: <a href="#">Pete Muir</a></p>'
            '<p class="material-datestamp">Added 2014-03-01 10:00:00</p>'
            '<div class="body"><p>Learn X in minutes.</p></div>'
        )

    def test_unknown_author(self):
        """Zero cast members render the author as Unknown"""
        html = render_thumbnail(sample_metadata(cast=()), "https://developers.example.org")
        assert '<p class="author">Author: <a href="#">Unknown</a></p>' in html

    def test_trailing_slash_in_base_url(self):
        html = render_thumbnail(sample_metadata(), "https://developers.example.org/")
        assert html.startswith('<a href="https://developers.example.org/video/vimeo/12345">')

    def test_all_defaults(self):
        """Metadata from a completely failed fetch still renders"""
        metadata = VideoMetadata(video_id="1", title="Unable to fetch video info from vimeo")

        html = render_thumbnail(metadata)

        assert html.startswith('<a href="/video/vimeo/1"><img src="" /></a>')
        assert '<span class="label material-duration">00:00:00</span>' in html
        assert '<p class="material-datestamp">Added </p>' in html
        assert html.endswith('<div class="body"><p></p></div>')

    def test_idempotent(self):
        metadata = sample_metadata()
        assert render_thumbnail(metadata, "https://a.example") == render_thumbnail(metadata, "https://a.example")
