"""Render configuration.

``RenderConfig`` gathers every resource and constant the renderer and the
window need (font, colours, text inset, window title, poll cadence). It is
built once at startup, usually by :mod:`intentglyph.cli`, and passed down
explicitly.
"""

from dataclasses import dataclass
from typing import Optional

from intentglyph.errors import ConfigurationError
from intentglyph.types import RGB


DEFAULT_FONT_SIZE = 24
DEFAULT_FILL: RGB = (200, 200, 200)
DEFAULT_CLEAR_COLOR: RGB = (20, 20, 20)
DEFAULT_TEXT_COLOR: RGB = (255, 255, 255)
DEFAULT_TEXT_INSET = 10
DEFAULT_TITLE = "IntentGlyph Viewer"
DEFAULT_POLL_INTERVAL_MS = 16


def _check_color(name: str, color: RGB) -> None:
    if len(color) != 3 or not all(
        isinstance(c, int) and 0 <= c <= 255 for c in color
    ):
        raise ConfigurationError(
            f"expected three integers in 0..255, got {color!r}", field=name
        )


@dataclass(frozen=True)
class RenderConfig:
    """Startup configuration for rendering and presentation.

    Attributes:
        font_path: TrueType/OpenType font used for every text overlay. ``None``
            selects Pillow's built-in default font.
        font_size: Font size in points.
        default_fill: Background fill painted under every cell.
        clear_color: Colour the canvas is cleared to before painting.
        text_color: Colour of text overlays.
        text_inset: Offset of text from the cell's top-left corner, both axes.
        title: Window title.
        poll_interval_ms: Sleep between quit-signal polls.
        strict_text: If True, a failing text overlay aborts the render instead
            of being logged and skipped.
    """

    font_path: Optional[str] = None
    font_size: int = DEFAULT_FONT_SIZE
    default_fill: RGB = DEFAULT_FILL
    clear_color: RGB = DEFAULT_CLEAR_COLOR
    text_color: RGB = DEFAULT_TEXT_COLOR
    text_inset: int = DEFAULT_TEXT_INSET
    title: str = DEFAULT_TITLE
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    strict_text: bool = False

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ConfigurationError(
                f"must be positive, got {self.font_size}", field="font_size"
            )
        if self.poll_interval_ms < 0:
            raise ConfigurationError(
                f"must be >= 0, got {self.poll_interval_ms}", field="poll_interval_ms"
            )
        _check_color("default_fill", self.default_fill)
        _check_color("clear_color", self.clear_color)
        _check_color("text_color", self.text_color)


def parse_color(value: str) -> RGB:
    """Parse ``"R,G,B"`` into an RGB tuple."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise ConfigurationError(f"expected R,G,B, got {value!r}")
    try:
        r, g, b = (int(p) for p in parts)
    except ValueError as e:
        raise ConfigurationError(f"expected R,G,B integers, got {value!r}") from e
    color = (r, g, b)
    _check_color("color", color)
    return color
