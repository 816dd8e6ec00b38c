import logging
from typing import Optional

import numpy as np
from PIL import Image

from intentglyph.config import RenderConfig
from intentglyph.errors import CanvasWriteError
from intentglyph.renderer.cell import render_cell
from intentglyph.scene import Scene
from intentglyph.types import to_rgba
from intentglyph.utils.font import Font, load_font

logger = logging.getLogger(__name__)


def new_canvas(scene: Scene, config: RenderConfig) -> Image.Image:
    return Image.new("RGBA", scene.size, to_rgba(config.clear_color))


def render_scene(
    scene: Scene,
    font: Font,
    config: RenderConfig,
    canvas: Optional[Image.Image] = None,
) -> Image.Image:
    """
    Paint every cell of ``scene`` in paint order and return the finished frame.

    When ``canvas`` is given it must match the scene size; it is cleared and
    painted in place. Calling this again with the same inputs yields the same
    pixels.
    """
    if canvas is None:
        canvas = new_canvas(scene, config)
    else:
        if canvas.size != scene.size or canvas.mode != "RGBA":
            raise CanvasWriteError(
                f"Canvas {canvas.mode} {canvas.size} does not match scene "
                f"RGBA {scene.size}"
            )
        canvas.paste(to_rgba(config.clear_color), (0, 0, scene.width, scene.height))

    for layer_idx, layer in enumerate(scene.layers):
        for cell in layer.cells:
            rect = render_cell(
                canvas, font, cell, layer, scene.width, scene.height, config
            )
            logger.debug(f"Layer {layer_idx}: painted cell at {tuple(rect)}")

    logger.info(f"Frame complete: {scene.cell_count} cells painted")
    return canvas


class SceneRenderer:
    config: RenderConfig
    font: Font

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        font: Optional[Font] = None,
    ):
        self.config = config or RenderConfig()
        self.font = font if font is not None else load_font(self.config)

    def render(self, scene: Scene) -> Image.Image:
        return render_scene(scene, self.font, self.config)

    def render_array(self, scene: Scene) -> np.ndarray:
        """Render ``scene`` as an ``(height, width, 4)`` uint8 array."""
        return np.array(self.render(scene), dtype=np.uint8)
