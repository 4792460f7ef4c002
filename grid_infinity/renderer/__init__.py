"""Rendering subpackage.

Turns immutable ``State`` snapshots into images of the visible window. The
renderer only reads the board through its renderer-facing surface
(dimensions, pixel sizing and :func:`grid_infinity.utils.grid.visible_tiles`)
and never triggers generation.

See :mod:`grid_infinity.renderer.image` for the Pillow implementation.
"""

from .image import ImageRenderer, render

__all__ = ["ImageRenderer", "render"]
