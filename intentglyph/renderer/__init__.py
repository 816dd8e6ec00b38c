"""Rendering subpackage.

Turns an immutable :class:`~intentglyph.scene.Scene` into a Pillow image.
The renderer focuses on:

* Strict paint order: layers in sequence, then cells in sequence.
* A fixed per-cell pipeline: background fill, stretched image, text overlay.
* Containing asset failures to the cell they occur in.

See :mod:`intentglyph.renderer.cell` for the per-cell pipeline and
:mod:`intentglyph.renderer.scene` for frame composition.
"""

from .cell import render_cell
from .scene import SceneRenderer, render_scene

__all__ = ["render_cell", "render_scene", "SceneRenderer"]
