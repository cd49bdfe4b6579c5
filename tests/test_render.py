"""Tests for widget markup rendering."""

from unittest.mock import Mock

from embed_youtube.models import EmbedConfig
from embed_youtube.render import (
    get_styles,
    render,
    render_iframe,
    stylesheet_path,
)


class TestRenderIframe:
    """Tests for render_iframe function."""

    def test_presentation_attributes(self) -> None:
        """Test that the iframe carries the player attributes."""
        markup = render_iframe("https://www.youtube.com/embed/abc123", 640, 360)
        assert markup.startswith("<iframe ")
        assert 'width="640"' in markup
        assert 'height="360"' in markup
        assert 'frameborder="0"' in markup
        assert 'referrerpolicy="strict-origin-when-cross-origin"' in markup
        assert " allowfullscreen " in markup
        assert (
            'allow="accelerometer; autoplay; clipboard-write; encrypted-media; '
            'gyroscope; picture-in-picture"'
        ) in markup
        assert 'title="YouTube video player"' in markup

    def test_src_is_escaped(self) -> None:
        """Test that ampersands in the URL are HTML-escaped."""
        markup = render_iframe("https://www.youtube.com/embed/x?a=1&b=2", 1, 1)
        assert 'src="https://www.youtube.com/embed/x?a=1&amp;b=2"' in markup


class TestRender:
    """Tests for render function."""

    def test_renders_player(self, mock_logger: Mock) -> None:
        """Test that a valid config renders the wrapped iframe."""
        markup = render(EmbedConfig(video_id="abc123"), mock_logger)
        assert markup.startswith('<div class="embed-youtube-wrapper"><iframe ')
        assert markup.endswith("</iframe></div>")
        assert "https://www.youtube.com/embed/abc123?version=3" in markup

    def test_missing_source_renders_error(self, mock_logger: Mock) -> None:
        """Test that a config without a source renders the dimmed message."""
        markup = render(EmbedConfig(), mock_logger)
        assert "<iframe" not in markup
        assert '<div class="dimmed light small">' in markup
        assert "YouTube module configuration error. Please check logs." in markup
        mock_logger.error.assert_called_once()

    def test_corrected_dimensions_used(self, mock_logger: Mock) -> None:
        """Test that corrected dimensions reach the iframe."""
        markup = render(EmbedConfig(video_id="x", width=0, height=-5), mock_logger)
        assert 'width="560"' in markup
        assert 'height="315"' in markup

    def test_renders_are_independent(self, mock_logger: Mock) -> None:
        """Test that a correction is redone on every render."""
        config = EmbedConfig(video_id="x", width=0)
        render(config, mock_logger)
        render(config, mock_logger)
        assert mock_logger.warning.call_count == 2


class TestStyles:
    """Tests for stylesheet exposure."""

    def test_get_styles(self) -> None:
        """Test the stylesheet resource name."""
        assert get_styles() == ["embed_youtube.css"]

    def test_stylesheet_bundled(self) -> None:
        """Test that the named stylesheet ships with the package."""
        path = stylesheet_path()
        assert path.name == get_styles()[0]
        assert path.is_file()
        assert ".embed-youtube-wrapper" in path.read_text(encoding="utf-8")
