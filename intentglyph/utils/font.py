"""Font loading and text measurement.

The engine uses a single font for every text overlay, loaded once at startup.
"""

import logging
from typing import Tuple, Union

from PIL import ImageFont

from intentglyph.config import RenderConfig
from intentglyph.errors import ConfigurationError

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def load_font(config: RenderConfig) -> Font:
    """Load the configured font.

    Falls back to Pillow's built-in font when ``config.font_path`` is None.

    Raises:
        ConfigurationError: If the configured font file cannot be loaded.
    """
    if config.font_path is None:
        logger.info(f"Using built-in default font at size {config.font_size}")
        return ImageFont.load_default(size=config.font_size)
    try:
        font = ImageFont.truetype(config.font_path, config.font_size)
    except OSError as e:
        raise ConfigurationError(
            f"cannot load font '{config.font_path}': {e}", field="font_path"
        ) from e
    logger.info(f"Loaded font {config.font_path} at size {config.font_size}")
    return font


def text_size(font: Font, text: str) -> Tuple[int, int]:
    """Return the natural ``(width, height)`` of ``text`` rendered with ``font``."""
    left, top, right, bottom = font.getbbox(text)
    return right - left, bottom - top
