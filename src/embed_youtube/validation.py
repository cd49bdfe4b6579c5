"""Widget configuration validation."""

import logging
from typing import Any, Protocol

from .models import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MISSING_VIDEO_SOURCE,
    EmbedConfig,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class WidgetLogger(Protocol):
    """Minimal logging capability needed by the validator.

    Satisfied by stdlib loggers, structlog loggers, or a host adapter.
    """

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> Any: ...


def validate_config(config: EmbedConfig, log: WidgetLogger | None = None) -> ValidationResult:
    """Validate a widget config before rendering.

    A missing video source fails validation. Non-positive dimensions are
    replaced with the defaults on a copy of the config and only logged.

    Args:
        config: Widget configuration
        log: Logger to report problems to (default: module logger)

    Returns:
        ValidationResult with the config to render
    """
    log = log or logger

    if not config.has_video_source:
        log.error("No video_id, playlist, or video_list provided")
        return ValidationResult(ok=False, corrected_config=config, error=MISSING_VIDEO_SOURCE)

    if config.width <= 0 or config.height <= 0:
        log.warning(
            f"Invalid width or height ({config.width}x{config.height}), "
            f"using defaults {DEFAULT_WIDTH}x{DEFAULT_HEIGHT}"
        )
        config = config.model_copy(update={"width": DEFAULT_WIDTH, "height": DEFAULT_HEIGHT})

    return ValidationResult(ok=True, corrected_config=config)
