"""Command-line interface for embed-youtube."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from .config import build_embed_config, get_settings, load_embed_config
from .embed_url import build_embed_url
from .exceptions import EmbedConfigError
from .logging import setup_logging
from .models import EmbedConfig
from .render import get_styles, render, stylesheet_path
from .validation import validate_config

app = typer.Typer(
    name="embed-youtube",
    help="YouTube Embed Widget - preview embed URLs and player markup",
    add_completion=False,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Widget config JSON file (default: from EMBED_YOUTUBE_CONFIG_FILE)",
    ),
]
VideoIdOption = Annotated[str | None, typer.Option("--video-id", help="YouTube video ID")]
PlaylistOption = Annotated[str | None, typer.Option("--playlist", help="YouTube playlist ID")]
VideoListOption = Annotated[
    str | None,
    typer.Option("--video-list", help="Comma-separated video IDs to play in order"),
]
LoopOption = Annotated[bool | None, typer.Option("--loop/--no-loop", help="Loop playback")]
AutoplayOption = Annotated[
    bool | None, typer.Option("--autoplay/--no-autoplay", help="Start playback on load")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]


def _load_config(
    config_file: Path | None,
    video_id: str | None,
    playlist: str | None,
    video_list: str | None,
    loop: bool | None,
    autoplay: bool | None,
) -> EmbedConfig:
    """Build the widget config from a file and command-line overrides."""
    overrides: dict[str, Any] = {}
    if video_id is not None:
        overrides["video_id"] = video_id
    if playlist is not None:
        overrides["playlist"] = playlist
    if video_list is not None:
        overrides["video_list"] = [v.strip() for v in video_list.split(",") if v.strip()]
    if loop is not None:
        overrides["loop"] = loop
    if autoplay is not None:
        overrides["autoplay"] = autoplay

    config_file = config_file or get_settings().config_file

    try:
        if config_file is not None:
            return load_embed_config(config_file, overrides)
        return build_embed_config(overrides)
    except EmbedConfigError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e


def _init_logging(verbose: bool) -> None:
    try:
        setup_logging(verbose)
    except RuntimeError as e:
        typer.echo(f"❌ Configuration error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def url(
    config_file: ConfigOption = None,
    video_id: VideoIdOption = None,
    playlist: PlaylistOption = None,
    video_list: VideoListOption = None,
    loop: LoopOption = None,
    autoplay: AutoplayOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the embed URL for a widget config.

    Examples:
        embed-youtube url --video-id dQw4w9WgXcQ --loop
        embed-youtube url --config widget.json
    """
    _init_logging(verbose)
    config = _load_config(config_file, video_id, playlist, video_list, loop, autoplay)

    result = validate_config(config)
    if not result.ok:
        typer.echo("❌ No video_id, playlist, or video_list provided", err=True)
        raise typer.Exit(1)

    typer.echo(build_embed_url(result.corrected_config))


@app.command(name="render")
def render_command(
    config_file: ConfigOption = None,
    video_id: VideoIdOption = None,
    playlist: PlaylistOption = None,
    video_list: VideoListOption = None,
    loop: LoopOption = None,
    autoplay: AutoplayOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the widget markup for a widget config.

    A config without a video source renders the error message, as the
    dashboard would show it.
    """
    _init_logging(verbose)
    config = _load_config(config_file, video_id, playlist, video_list, loop, autoplay)

    markup = render(config)
    logging.getLogger("embed_youtube.cli").info(
        "Widget rendered",
        extra={"has_video_source": config.has_video_source},
    )
    typer.echo(markup)


@app.command()
def styles() -> None:
    """List the stylesheets the host should load."""
    for name in get_styles():
        typer.echo(name)
    typer.echo(f"   Bundled at: {stylesheet_path()}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo("embed-youtube v0.1.0")
    typer.echo("YouTube Embed Widget for dashboards")


if __name__ == "__main__":
    app()
