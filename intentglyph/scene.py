"""Immutable scene description.

A :class:`Scene` is the value tree produced once at startup from the JSON
scene document (see :mod:`intentglyph.loader`) and read by the renderer. It
never changes afterwards; re-rendering the same scene always yields the same
frame.

Design notes:

* Sequences are **persistent vectors** (``pyrsistent.PVector``). Their order
    is the paint order: later layers paint over earlier ones and, inside a
    layer, later cells paint over earlier ones.
* Every layer lays a uniform ``grid_rows x grid_cols`` grid over the *whole*
    surface; layers do not have their own size or offset.
* Cells reference their image by path and their text by value. Nothing is
    shared between cells and no asset handle is stored here.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector


@dataclass(frozen=True)
class Cell:
    """A rectangular region of a layer grid.

    Attributes:
        row (int): 1-based grid row of the top-left unit (0 is treated as 1).
        col (int): 1-based grid column of the top-left unit (0 is treated as 1).
        span_rows (int): Number of grid rows covered.
        span_cols (int): Number of grid columns covered.
        content (str | None): Optional text drawn over the cell.
        image (str | None): Optional path of an image stretched over the cell.
    """

    row: int
    col: int
    span_rows: int = 1
    span_cols: int = 1
    content: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class Layer:
    """Uniform grid over the full surface with an ordered list of cells."""

    grid_rows: int
    grid_cols: int
    cells: PVector[Cell] = pvector()


@dataclass(frozen=True)
class Scene:
    """Top-level renderable description.

    Attributes:
        width (int): Surface width in pixels.
        height (int): Surface height in pixels.
        layers (PVector[Layer]): Layers in paint order.
    """

    width: int
    height: int
    layers: PVector[Layer] = pvector()

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def cell_count(self) -> int:
        return sum(len(layer.cells) for layer in self.layers)

    def iter_cells(self) -> Iterator[Tuple[Layer, Cell]]:
        """Yield ``(layer, cell)`` pairs in paint order."""
        for layer in self.layers:
            for cell in layer.cells:
                yield layer, cell
