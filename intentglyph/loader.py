"""Scene document loading.

Bridges the JSON scene document and the immutable :class:`~intentglyph.scene.Scene`
tree. Validation is strict about structure (required fields, integer types,
non-negative values) and lenient about extras (unknown keys are ignored).

Every failure is reported as :class:`ConfigurationError` naming the offending
field path, e.g. ``layers[0].cells[2].span_cols``. Layers with zero rows or
columns raise :class:`DegenerateGridError` here already, so a broken scene is
rejected before any window exists.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from pyrsistent import pvector

from intentglyph.errors import ConfigurationError
from intentglyph.scene import Cell, Layer, Scene
from intentglyph.utils.grid import check_grid

logger = logging.getLogger(__name__)

DEFAULT_SCENE_PATH = "scene.json"


def _require(document: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in document:
        raise ConfigurationError("missing required field", field=_join(where, key))
    return document[key]


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _int_field(
    document: Mapping[str, Any], key: str, where: str, minimum: int = 0
) -> int:
    value = _require(document, key, where)
    # bool is a subclass of int; JSON true/false is never a valid dimension
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"expected integer, got {type(value).__name__}", field=_join(where, key)
        )
    if value < minimum:
        raise ConfigurationError(
            f"must be >= {minimum}, got {value}", field=_join(where, key)
        )
    return value


def _optional_str(document: Mapping[str, Any], key: str, where: str) -> Optional[str]:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(
            f"expected string or null, got {type(value).__name__}",
            field=_join(where, key),
        )
    return value


def _list_field(document: Mapping[str, Any], key: str, where: str) -> List[Any]:
    value = _require(document, key, where)
    if not isinstance(value, list):
        raise ConfigurationError(
            f"expected list, got {type(value).__name__}", field=_join(where, key)
        )
    return value


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"expected object, got {type(value).__name__}", field=where
        )
    return value


def cell_from_dict(document: Any, where: str = "cell") -> Cell:
    data = _mapping(document, where)
    return Cell(
        row=_int_field(data, "row", where),
        col=_int_field(data, "col", where),
        span_rows=_int_field(data, "span_rows", where),
        span_cols=_int_field(data, "span_cols", where),
        content=_optional_str(data, "content", where),
        image=_optional_str(data, "image", where),
    )


def layer_from_dict(document: Any, where: str = "layer") -> Layer:
    data = _mapping(document, where)
    grid_rows = _int_field(data, "grid_rows", where)
    grid_cols = _int_field(data, "grid_cols", where)
    check_grid(grid_rows, grid_cols)
    cells = _list_field(data, "cells", where)
    return Layer(
        grid_rows=grid_rows,
        grid_cols=grid_cols,
        cells=pvector(
            cell_from_dict(cell, f"{where}.cells[{i}]") for i, cell in enumerate(cells)
        ),
    )


def scene_from_dict(document: Any) -> Scene:
    """Build a :class:`Scene` from a decoded scene document.

    Arguments:
        document: Mapping with ``width``, ``height`` and ``layers`` fields.

    Returns:
        Scene: Immutable scene tree.

    Raises:
        ConfigurationError: On any structural problem.
        DegenerateGridError: If a layer declares zero rows or columns.
    """
    data = _mapping(document, "scene")
    width = _int_field(data, "width", "", minimum=1)
    height = _int_field(data, "height", "", minimum=1)
    layers = _list_field(data, "layers", "")
    return Scene(
        width=width,
        height=height,
        layers=pvector(
            layer_from_dict(layer, f"layers[{i}]") for i, layer in enumerate(layers)
        ),
    )


def load_scene(path: Union[str, Path] = DEFAULT_SCENE_PATH) -> Scene:
    """Read and parse the JSON scene document at ``path``."""
    path = Path(path)
    logger.info(f"Loading scene from: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"cannot read scene document: {e}") from e
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"invalid JSON in {path}: {e}") from e
    scene = scene_from_dict(document)
    logger.info(
        f"Loaded scene {scene.width}x{scene.height} with "
        f"{len(scene.layers)} layers and {scene.cell_count} cells"
    )
    return scene
