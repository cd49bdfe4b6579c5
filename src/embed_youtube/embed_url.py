"""YouTube embed URL construction."""

from .models import DEFAULT_COLOR, EmbedConfig

EMBED_BASE_URL = "https://www.youtube.com/embed/"


def _flag(value: bool) -> str:
    return "1" if value else "0"


def video_path(config: EmbedConfig) -> str:
    """Determine the embed path for a single video or a playlist.

    A playlist takes priority over a video id.

    Args:
        config: Widget configuration

    Returns:
        Path segment (including its own query part) after /embed/
    """
    if config.playlist:
        return f"playlist?list={config.playlist}"
    return f"{config.video_id}?version=3"


def playlist_param(config: EmbedConfig) -> str | None:
    """Build the ``playlist`` parameter used for lists and looping.

    YouTube only loops a single video when the same id is also passed as a
    playlist, so a lone video id is repeated here.

    Args:
        config: Widget configuration

    Returns:
        Parameter string, or None if no parameter is needed
    """
    if config.video_list:
        return f"playlist={','.join(config.video_list)}"

    if not config.playlist and config.video_id:
        return f"playlist={config.video_id}"

    return None


def build_url_params(config: EmbedConfig) -> str:
    """Build the query string of player parameters.

    Args:
        config: Widget configuration

    Returns:
        Parameters joined with ``&``, in a fixed order
    """
    params = [
        f"autoplay={_flag(config.autoplay)}",
        f"cc_load_policy={_flag(config.cc_load_policy)}",
        f"controls={_flag(config.controls)}",
        f"rel={_flag(config.rel)}",
        f"showinfo={_flag(config.show_info)}",
    ]

    if config.color and config.color != DEFAULT_COLOR:
        params.append(f"color={config.color}")

    if config.disable_keyboard:
        params.append("disablekb=1")

    # Fullscreen is on unless disabled, so fs=1 is never sent
    if not config.fullscreen:
        params.append("fs=0")

    if config.modest_branding:
        params.append("modestbranding=1")

    playlist = playlist_param(config)
    if playlist:
        params.append(playlist)

    if config.loop:
        params.append("loop=1")

    return "&".join(params)


def build_embed_url(config: EmbedConfig) -> str:
    """Build the full YouTube embed URL for a validated config.

    Performs no validation. Call validate_config() first; a config without
    any video source yields a URL that YouTube cannot play.

    Args:
        config: Validated widget configuration

    Returns:
        Embed URL for use as an iframe source
    """
    return f"{EMBED_BASE_URL}{video_path(config)}?{build_url_params(config)}"
