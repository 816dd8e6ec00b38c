import pytest

from intentglyph.config import RenderConfig, parse_color
from intentglyph.errors import ConfigurationError
from intentglyph.utils.font import load_font, text_size


def test_default_config_values() -> None:
    config = RenderConfig()
    assert config.font_size == 24
    assert config.default_fill == (200, 200, 200)
    assert config.clear_color == (20, 20, 20)
    assert config.text_color == (255, 255, 255)
    assert config.text_inset == 10
    assert config.title == "IntentGlyph Viewer"
    assert not config.strict_text


@pytest.mark.parametrize(
    "overrides",
    [
        {"font_size": 0},
        {"poll_interval_ms": -1},
        {"default_fill": (256, 0, 0)},
        {"text_color": (1, 2)},
    ],
)
def test_invalid_config_rejected(overrides) -> None:
    with pytest.raises(ConfigurationError):
        RenderConfig(**overrides)


def test_parse_color() -> None:
    assert parse_color("1, 2,3") == (1, 2, 3)
    with pytest.raises(ConfigurationError):
        parse_color("1,2")
    with pytest.raises(ConfigurationError):
        parse_color("a,b,c")
    with pytest.raises(ConfigurationError):
        parse_color("0,0,300")


def test_default_font_measures_text() -> None:
    font = load_font(RenderConfig())
    w, h = text_size(font, "Hi")
    assert w > 0
    assert h > 0


def test_unloadable_font_is_configuration_error(tmp_path) -> None:
    bogus = tmp_path / "font.ttf"
    bogus.write_bytes(b"nope")
    with pytest.raises(ConfigurationError) as excinfo:
        load_font(RenderConfig(font_path=str(bogus)))
    assert excinfo.value.field == "font_path"
