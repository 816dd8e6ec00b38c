import json
from pathlib import Path

import pytest

from intentglyph import cli
from intentglyph.errors import ConfigurationError
from intentglyph.types import QuitReason
from tests.test_utils import make_scene_document


class RecordingDisplay:
    def __init__(self) -> None:
        self.frames = []
        self.closed = False

    def open(self, size, title) -> None:
        self.size = size
        self.title = title

    def show(self, frame) -> None:
        self.frames.append(frame)

    def poll_quit(self):
        return QuitReason.WINDOW_CLOSE

    def wait(self, milliseconds: int) -> None:
        pass

    def close(self) -> None:
        self.closed = True


def _write_scene(tmp_path: Path, document) -> str:
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(document))
    return str(path)


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.scene == "scene.json"
    config = cli.config_from_args(args)
    assert config.font_path is None
    assert config.font_size == 24
    assert config.title == "IntentGlyph Viewer"


def test_parser_overrides() -> None:
    args = cli.build_parser().parse_args(
        ["my.json", "--fill", "1,2,3", "--strict-text", "--poll-ms", "50", "-t", "X"]
    )
    config = cli.config_from_args(args)
    assert args.scene == "my.json"
    assert config.default_fill == (1, 2, 3)
    assert config.strict_text
    assert config.poll_interval_ms == 50
    assert config.title == "X"


def test_bad_color_is_rejected_by_parser() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--fill", "red"])


def test_run_renders_once_and_presents(tmp_path: Path) -> None:
    scene_path = _write_scene(tmp_path, make_scene_document())
    args = cli.build_parser().parse_args([scene_path])
    display = RecordingDisplay()
    assert cli.run(args, display=display) == 0
    assert display.size == (800, 600)
    assert display.title == "IntentGlyph Viewer"
    assert len(display.frames) == 1
    assert display.closed


def test_run_fails_before_window_on_bad_scene(tmp_path: Path) -> None:
    document = make_scene_document()
    del document["layers"]
    args = cli.build_parser().parse_args([_write_scene(tmp_path, document)])
    display = RecordingDisplay()
    with pytest.raises(ConfigurationError):
        cli.run(args, display=display)
    assert display.frames == []


def test_main_returns_error_status(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    status = cli.main([str(tmp_path / "missing.json")])
    assert status == 1
    assert "error:" in capsys.readouterr().err


def test_main_reports_degenerate_grid(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    document = make_scene_document()
    document["layers"][0]["grid_rows"] = 0
    status = cli.main([_write_scene(tmp_path, document)])
    assert status == 1
    assert "Degenerate grid" in capsys.readouterr().err


def test_main_reports_undecodable_scene(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "scene.json"
    path.write_bytes(b"\xff\xfe{}")
    status = cli.main([str(path)])
    assert status == 1
    assert "cannot read scene document" in capsys.readouterr().err
