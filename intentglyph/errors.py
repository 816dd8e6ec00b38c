"""Error taxonomy.

Every failure raised by the engine derives from :class:`IntentGlyphError` so
the command line entry point can map it to a diagnostic and a non-zero exit
status. Recoverability is decided by the caller:

* :class:`ConfigurationError` and :class:`DegenerateGridError` abort startup
  before any window is created.
* :class:`AssetLoadError` is contained per cell; the image step is skipped.
* :class:`TextRenderError` is contained per cell unless strict text rendering
  is requested in :class:`intentglyph.config.RenderConfig`.
* :class:`CanvasWriteError` always propagates.
"""

from typing import Optional


class IntentGlyphError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(IntentGlyphError, ValueError):
    """The scene document or render configuration is structurally invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        if field is not None:
            message = f"{field}: {message}"
        super().__init__(message)


class DegenerateGridError(IntentGlyphError, ValueError):
    """A layer grid declares zero (or negative) rows or columns."""

    def __init__(self, grid_rows: int, grid_cols: int):
        self.grid_rows = grid_rows
        self.grid_cols = grid_cols
        super().__init__(
            f"Degenerate grid {grid_rows}x{grid_cols}: rows and columns must be positive"
        )


class AssetLoadError(IntentGlyphError):
    """An image asset could not be opened or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not load image '{path}': {reason}")


class TextRenderError(IntentGlyphError):
    """Rasterising a text overlay failed."""


class CanvasWriteError(IntentGlyphError):
    """Writing to the canvas or the window surface failed."""
