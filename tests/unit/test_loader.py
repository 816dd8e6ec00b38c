import json
from pathlib import Path
from typing import Any, Dict

import pytest

from intentglyph.errors import ConfigurationError, DegenerateGridError
from intentglyph.loader import load_scene, scene_from_dict
from intentglyph.scene import Cell
from tests.test_utils import make_scene_document


def test_scene_from_dict_builds_tree() -> None:
    scene = scene_from_dict(make_scene_document())
    assert scene.size == (800, 600)
    assert len(scene.layers) == 1
    layer = scene.layers[0]
    assert (layer.grid_rows, layer.grid_cols) == (4, 4)
    assert layer.cells[0] == Cell(
        row=1, col=1, span_rows=2, span_cols=2, content="Hi", image=None
    )
    assert scene.cell_count == 1


def test_optional_fields_may_be_absent() -> None:
    doc = make_scene_document(
        layers=[
            {
                "grid_rows": 2,
                "grid_cols": 2,
                "cells": [{"row": 1, "col": 2, "span_rows": 1, "span_cols": 1}],
            }
        ]
    )
    cell = scene_from_dict(doc).layers[0].cells[0]
    assert cell.content is None
    assert cell.image is None


def test_unknown_keys_are_ignored() -> None:
    doc = make_scene_document()
    doc["background"] = "ignored"
    doc["layers"][0]["name"] = "ignored"
    assert scene_from_dict(doc).cell_count == 1


def test_iter_cells_follows_paint_order() -> None:
    doc = make_scene_document(
        layers=[
            {
                "grid_rows": 1,
                "grid_cols": 2,
                "cells": [
                    {"row": 1, "col": 1, "span_rows": 1, "span_cols": 1, "content": "a"},
                    {"row": 1, "col": 2, "span_rows": 1, "span_cols": 1, "content": "b"},
                ],
            },
            {
                "grid_rows": 1,
                "grid_cols": 1,
                "cells": [{"row": 1, "col": 1, "span_rows": 1, "span_cols": 1, "content": "c"}],
            },
        ]
    )
    scene = scene_from_dict(doc)
    assert [cell.content for _, cell in scene.iter_cells()] == ["a", "b", "c"]


@pytest.mark.parametrize("field", ["width", "height", "layers"])
def test_missing_top_level_field(field: str) -> None:
    doc = make_scene_document()
    del doc[field]
    with pytest.raises(ConfigurationError) as excinfo:
        scene_from_dict(doc)
    assert excinfo.value.field == field


def test_missing_cell_field_reports_path() -> None:
    doc = make_scene_document()
    del doc["layers"][0]["cells"][0]["span_cols"]
    with pytest.raises(ConfigurationError) as excinfo:
        scene_from_dict(doc)
    assert excinfo.value.field == "layers[0].cells[0].span_cols"


@pytest.mark.parametrize(
    "patch",
    [
        {"width": "800"},
        {"width": 0},
        {"height": -5},
        {"width": True},
        {"layers": {}},
    ],
)
def test_invalid_top_level_values(patch: Dict[str, Any]) -> None:
    doc = make_scene_document()
    doc.update(patch)
    with pytest.raises(ConfigurationError):
        scene_from_dict(doc)


@pytest.mark.parametrize(
    "key,value",
    [("row", 1.5), ("col", -1), ("span_rows", None), ("content", 42), ("image", ["x"])],
)
def test_invalid_cell_values(key: str, value: Any) -> None:
    doc = make_scene_document()
    doc["layers"][0]["cells"][0][key] = value
    with pytest.raises(ConfigurationError):
        scene_from_dict(doc)


def test_non_object_document() -> None:
    with pytest.raises(ConfigurationError):
        scene_from_dict([1, 2, 3])


def test_zero_grid_is_degenerate() -> None:
    doc = make_scene_document()
    doc["layers"][0]["grid_cols"] = 0
    with pytest.raises(DegenerateGridError):
        scene_from_dict(doc)


def test_load_scene_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(make_scene_document()))
    scene = load_scene(path)
    assert scene.layers[0].cells[0].content == "Hi"


def test_load_scene_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_scene(tmp_path / "absent.json")


def test_load_scene_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "scene.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        load_scene(path)


def test_load_scene_rejects_non_utf8_bytes(tmp_path: Path) -> None:
    path = tmp_path / "scene.json"
    path.write_bytes(b'{"width": 800, "height": 600, "layers": [], "x": "\xff"}')
    with pytest.raises(ConfigurationError) as excinfo:
        load_scene(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
