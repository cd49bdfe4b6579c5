"""HTML rendering for the YouTube embed widget."""

from html import escape
from pathlib import Path

from .embed_url import build_embed_url
from .models import EmbedConfig
from .validation import WidgetLogger, validate_config

STYLESHEET = "embed_youtube.css"
STATIC_DIR = Path(__file__).parent / "static"

WRAPPER_CLASS = "embed-youtube-wrapper"
IFRAME_TITLE = "YouTube video player"
REFERRER_POLICY = "strict-origin-when-cross-origin"
ALLOW_PERMISSIONS = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
)
ERROR_MESSAGE = "YouTube module configuration error. Please check logs."


def get_styles() -> list[str]:
    """Stylesheet resource names for the host to load."""
    return [STYLESHEET]


def stylesheet_path() -> Path:
    """Location of the bundled stylesheet."""
    return STATIC_DIR / STYLESHEET


def render_iframe(url: str, width: int, height: int) -> str:
    """Render the player iframe.

    Args:
        url: Embed URL for the iframe source
        width: Width in pixels
        height: Height in pixels

    Returns:
        iframe markup
    """
    return (
        f'<iframe width="{width}" height="{height}" src="{escape(url)}" '
        f'frameborder="0" referrerpolicy="{REFERRER_POLICY}" allowfullscreen '
        f'allow="{ALLOW_PERMISSIONS}" title="{IFRAME_TITLE}"></iframe>'
    )


def render_error() -> str:
    return f'<div class="dimmed light small">{ERROR_MESSAGE}</div>'


def render(config: EmbedConfig, log: WidgetLogger | None = None) -> str:
    """Render the widget markup for a config.

    Invalid configs render the dimmed error message instead of a player.
    Each call validates its own copy of the config; corrected dimensions
    are never stored back.

    Args:
        config: Widget configuration
        log: Logger for validation problems (default: validator's logger)

    Returns:
        Wrapper div containing the iframe or the error message
    """
    result = validate_config(config, log)

    if not result.ok:
        body = render_error()
    else:
        corrected = result.corrected_config
        body = render_iframe(build_embed_url(corrected), corrected.width, corrected.height)

    return f'<div class="{WRAPPER_CLASS}">{body}</div>'
