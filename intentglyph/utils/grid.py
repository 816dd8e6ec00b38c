"""Grid geometry helpers.

Pure functions mapping layer grid coordinates to pixel rectangles. Grid units
are truncated to whole pixels, so a surface that is not evenly divided by the
grid keeps an unpainted residual strip on its right and bottom edges.
"""

from typing import Tuple

from intentglyph.errors import DegenerateGridError
from intentglyph.types import Rect


def check_grid(grid_rows: int, grid_cols: int) -> None:
    """Raise ``DegenerateGridError`` unless both grid dimensions are positive."""
    if grid_rows <= 0 or grid_cols <= 0:
        raise DegenerateGridError(grid_rows, grid_cols)


def cell_size(
    surface_width: int, surface_height: int, grid_rows: int, grid_cols: int
) -> Tuple[int, int]:
    """Return the ``(width, height)`` of one grid unit in pixels."""
    check_grid(grid_rows, grid_cols)
    return surface_width // grid_cols, surface_height // grid_rows


def resolve_rect(
    surface_width: int,
    surface_height: int,
    grid_rows: int,
    grid_cols: int,
    row: int,
    col: int,
    span_rows: int,
    span_cols: int,
) -> Rect:
    """Resolve a cell position to its pixel rectangle.

    Columns map to the horizontal axis and rows to the vertical axis. Row and
    column 0 are clamped to 1 so offsets are never negative. The result is not
    clipped to the surface.

    Arguments:
        surface_width: Output surface width in pixels.
        surface_height: Output surface height in pixels.
        grid_rows: Number of rows in the layer grid.
        grid_cols: Number of columns in the layer grid.
        row: 1-based row of the cell's top-left unit.
        col: 1-based column of the cell's top-left unit.
        span_rows: Number of rows covered.
        span_cols: Number of columns covered.

    Returns:
        Rect: ``(x, y, w, h)`` in pixels.

    Raises:
        DegenerateGridError: If ``grid_rows`` or ``grid_cols`` is not positive.
    """
    unit_w, unit_h = cell_size(surface_width, surface_height, grid_rows, grid_cols)
    x = max(col - 1, 0) * unit_w
    y = max(row - 1, 0) * unit_h
    return Rect(x, y, span_cols * unit_w, span_rows * unit_h)


def rect_within_surface(rect: Rect, surface_width: int, surface_height: int) -> bool:
    """Return True if ``rect`` lies entirely inside the surface."""
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.w <= surface_width
        and rect.y + rect.h <= surface_height
    )
