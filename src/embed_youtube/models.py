"""Data models for the YouTube embed widget."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_WIDTH = 560
DEFAULT_HEIGHT = 315
DEFAULT_COLOR = "red"

MISSING_VIDEO_SOURCE = "missing_video_source"


class EmbedConfig(BaseModel):
    """Widget options for a single embedded player.

    Accepts both the snake_case field names and the option keys used by
    dashboard configs (``video_id``, ``disablekb``, ``fs``, ``showinfo``, ...).
    Instances are frozen; corrections produce a new copy.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    video_id: str = Field(
        default="",
        validation_alias=AliasChoices("video_id", "videoId"),
        description="YouTube video ID",
    )
    playlist: str = Field(default="", description="YouTube playlist ID")
    video_list: tuple[str, ...] = Field(
        default=(),
        validation_alias=AliasChoices("video_list", "videoList"),
        description="Video IDs to play in order",
    )
    width: int = Field(default=DEFAULT_WIDTH, description="Player width in pixels")
    height: int = Field(default=DEFAULT_HEIGHT, description="Player height in pixels")

    # Player flags
    autoplay: bool = Field(default=False, description="Start playback on load")
    cc_load_policy: bool = Field(
        default=False,
        validation_alias=AliasChoices("cc_load_policy", "ccLoadPolicy"),
        description="Show closed captions by default",
    )
    controls: bool = Field(default=True, description="Show player controls")
    disable_keyboard: bool = Field(
        default=False,
        validation_alias=AliasChoices("disable_keyboard", "disablekb", "disableKeyboard"),
        description="Ignore keyboard controls",
    )
    fullscreen: bool = Field(
        default=True,
        validation_alias=AliasChoices("fullscreen", "fs"),
        description="Allow the fullscreen button",
    )
    modest_branding: bool = Field(
        default=False,
        validation_alias=AliasChoices("modest_branding", "modestbranding", "modestBranding"),
        description="Hide the YouTube logo in the control bar",
    )
    rel: bool = Field(default=False, description="Show related videos from other channels")
    show_info: bool = Field(
        default=False,
        validation_alias=AliasChoices("show_info", "showinfo", "showInfo"),
        description="Show video title and uploader",
    )
    loop: bool = Field(default=False, description="Loop the video or list")
    color: str = Field(default=DEFAULT_COLOR, description="Progress bar color")

    @field_validator("video_id", "playlist", "color", mode="before")
    @classmethod
    def none_as_empty_string(cls, v: Any) -> Any:
        """Treat an explicit null as an unset string option."""
        return "" if v is None else v

    @field_validator("video_list", mode="before")
    @classmethod
    def normalize_video_list(cls, v: Any) -> Any:
        """Read null as empty and list entries as strings, so numeric ids are accepted."""
        if v is None:
            return ()
        if isinstance(v, (list, tuple)):
            return tuple(str(item) for item in v)
        return v

    @property
    def has_video_source(self) -> bool:
        """True if a video id, playlist, or non-empty video list is set."""
        return bool(self.video_id or self.playlist or self.video_list)


class ValidationResult(BaseModel):
    """Outcome of validating an EmbedConfig."""

    model_config = ConfigDict(frozen=True)

    ok: bool = Field(..., description="Whether the config can be rendered")
    corrected_config: EmbedConfig = Field(
        ..., description="Config with invalid dimensions replaced by defaults"
    )
    error: str | None = Field(default=None, description="Error code when ok is False")
