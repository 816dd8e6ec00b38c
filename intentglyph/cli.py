import argparse
import logging
import sys
from typing import List, Optional

from intentglyph.config import (
    DEFAULT_CLEAR_COLOR,
    DEFAULT_FILL,
    DEFAULT_FONT_SIZE,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TEXT_INSET,
    DEFAULT_TITLE,
    RenderConfig,
    parse_color,
)
from intentglyph.errors import ConfigurationError, IntentGlyphError
from intentglyph.loader import DEFAULT_SCENE_PATH, load_scene
from intentglyph.renderer.scene import SceneRenderer
from intentglyph.types import RGB
from intentglyph.window import Display, PresentationLoop, PygameDisplay

logger = logging.getLogger(__name__)


def _color(value: str) -> RGB:
    try:
        return parse_color(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _fmt(color: RGB) -> str:
    return ",".join(str(c) for c in color)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a layered grid scene and show it in a window"
    )
    parser.add_argument(
        "scene",
        nargs="?",
        default=DEFAULT_SCENE_PATH,
        help=f"Path to the JSON scene document (default: {DEFAULT_SCENE_PATH})",
    )
    parser.add_argument(
        "-f", "--font", default=None, help="Font file for text overlays (default: built-in font)"
    )
    parser.add_argument(
        "-s", "--font-size", type=int, default=DEFAULT_FONT_SIZE, help=f"Font size (default: {DEFAULT_FONT_SIZE})"
    )
    parser.add_argument(
        "--fill", type=_color, default=DEFAULT_FILL, help=f"Cell background R,G,B (default: {_fmt(DEFAULT_FILL)})"
    )
    parser.add_argument(
        "--clear",
        type=_color,
        default=DEFAULT_CLEAR_COLOR,
        help=f"Canvas clear colour R,G,B (default: {_fmt(DEFAULT_CLEAR_COLOR)})",
    )
    parser.add_argument(
        "--text-color",
        type=_color,
        default=DEFAULT_TEXT_COLOR,
        help=f"Text colour R,G,B (default: {_fmt(DEFAULT_TEXT_COLOR)})",
    )
    parser.add_argument(
        "--text-inset",
        type=int,
        default=DEFAULT_TEXT_INSET,
        help=f"Text offset from the cell corner in pixels (default: {DEFAULT_TEXT_INSET})",
    )
    parser.add_argument("-t", "--title", default=DEFAULT_TITLE, help=f"Window title (default: {DEFAULT_TITLE})")
    parser.add_argument(
        "--poll-ms",
        type=int,
        default=DEFAULT_POLL_INTERVAL_MS,
        help=f"Delay between quit polls in ms (default: {DEFAULT_POLL_INTERVAL_MS})",
    )
    parser.add_argument(
        "--strict-text", action="store_true", default=False, help="Abort when a text overlay fails to render"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        font_path=args.font,
        font_size=args.font_size,
        default_fill=args.fill,
        clear_color=args.clear,
        text_color=args.text_color,
        text_inset=args.text_inset,
        title=args.title,
        poll_interval_ms=args.poll_ms,
        strict_text=args.strict_text,
    )


def run(args: argparse.Namespace, display: Optional[Display] = None) -> int:
    """Load, render once, then present until quit.

    The scene and font are loaded and the frame rendered before the window opens.
    """
    config = config_from_args(args)
    scene = load_scene(args.scene)
    renderer = SceneRenderer(config)
    frame = renderer.render(scene)
    loop = PresentationLoop(
        display or PygameDisplay(), title=config.title, poll_interval_ms=config.poll_interval_ms
    )
    loop.run(frame)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except IntentGlyphError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
