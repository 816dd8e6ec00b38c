"""Per-cell paint pipeline.

Each cell is painted at its resolved rectangle in a fixed order:

1. background fill (always),
2. image, stretched to the rectangle (skipped with a warning if it fails to load),
3. text overlay at a small inset from the top-left corner, natural size.

Text comes last so it stays legible over the image. Canvas level failures
propagate as :class:`CanvasWriteError`.
"""

import logging

from PIL import Image, ImageDraw

from intentglyph.config import RenderConfig
from intentglyph.errors import AssetLoadError, CanvasWriteError, TextRenderError
from intentglyph.scene import Cell, Layer
from intentglyph.types import Rect, to_rgba
from intentglyph.utils.font import Font, text_size
from intentglyph.utils.grid import rect_within_surface, resolve_rect
from intentglyph.utils.image import load_image

logger = logging.getLogger(__name__)


def fill_rect(canvas: Image.Image, rect: Rect, config: RenderConfig) -> None:
    try:
        canvas.paste(to_rgba(config.default_fill), rect.box)
    except (ValueError, OSError) as e:
        raise CanvasWriteError(f"Failed to fill {tuple(rect)}: {e}") from e


def draw_image(canvas: Image.Image, rect: Rect, path: str) -> bool:
    """Stretch the image at ``path`` over ``rect``.

    Returns False (after logging) if the asset could not be loaded.
    """
    logger.debug(f"Loading image: {path}")
    try:
        texture = load_image(path, rect.w, rect.h)
    except AssetLoadError as e:
        logger.warning(f"{e}; skipping image")
        return False
    try:
        canvas.alpha_composite(texture, (rect.x, rect.y))
    except (ValueError, OSError) as e:
        raise CanvasWriteError(f"Failed to composite '{path}': {e}") from e
    return True


def draw_text(
    canvas: Image.Image, rect: Rect, content: str, font: Font, config: RenderConfig
) -> None:
    """Draw ``content`` anchored at the configured inset from ``rect``'s corner.

    Raises:
        TextRenderError: If the font cannot shape or rasterise the string.
    """
    position = (rect.x + config.text_inset, rect.y + config.text_inset)
    try:
        w, h = text_size(font, content)
        ImageDraw.Draw(canvas).text(
            position, content, font=font, fill=to_rgba(config.text_color)
        )
    except (OSError, UnicodeError, ValueError) as e:
        raise TextRenderError(f"Failed to render text {content!r}: {e}") from e
    logger.debug(f"Drew text {content!r} at {position} size {w}x{h}")


def render_cell(
    canvas: Image.Image,
    font: Font,
    cell: Cell,
    layer: Layer,
    surface_width: int,
    surface_height: int,
    config: RenderConfig,
) -> Rect:
    """Paint one cell onto ``canvas`` and return its rectangle.

    Arguments:
        canvas: RGBA canvas, mutated in place.
        font: Font used for the text overlay.
        cell: Cell to paint.
        layer: Layer owning the cell; provides the grid dimensions.
        surface_width: Surface width used for geometry.
        surface_height: Surface height used for geometry.
        config: Colours, inset and text strictness.

    Raises:
        DegenerateGridError: If the layer grid has no rows or columns.
        CanvasWriteError: If the canvas rejects a write.
        TextRenderError: Only when ``config.strict_text`` is set.
    """
    rect = resolve_rect(
        surface_width,
        surface_height,
        layer.grid_rows,
        layer.grid_cols,
        cell.row,
        cell.col,
        cell.span_rows,
        cell.span_cols,
    )
    if not rect_within_surface(rect, surface_width, surface_height):
        logger.warning(
            f"Cell at row {cell.row}, col {cell.col} resolves to {tuple(rect)} "
            f"outside the {surface_width}x{surface_height} surface"
        )
    if rect.is_empty:
        logger.debug(f"Cell at row {cell.row}, col {cell.col} has no area")
        return rect

    fill_rect(canvas, rect, config)

    if cell.image is not None:
        draw_image(canvas, rect, cell.image)

    if cell.content is not None:
        try:
            draw_text(canvas, rect, cell.content, font, config)
        except TextRenderError as e:
            if config.strict_text:
                raise
            logger.warning(f"{e}; skipping text")

    return rect
