from typing import Optional

import numpy as np

from mandelgrid.iterators import pick_iterator
from mandelgrid.viewport import Viewport


def plane_axes(viewport: Viewport):
    """
    Plane coordinates sampled by each column (xs) and each row (ys).

    One pixel covers ratio/width along x and ratio/height along y, and the
    grid is anchored so that (center_x, center_y) sits at pixel
    (width/2, height/2).
    """
    dx = viewport.ratio / viewport.width
    dy = viewport.ratio / viewport.height
    base_x = viewport.center_x - dx * (viewport.width / 2)
    base_y = viewport.center_y - dy * (viewport.height / 2)

    xs = np.array([base_x + i * dx for i in range(viewport.width)], dtype=np.float64)
    ys = np.array([base_y + j * dy for j in range(viewport.height)], dtype=np.float64)
    return xs, ys


def generate(viewport: Optional[Viewport] = None) -> np.ndarray:
    """
    Compute the escape grid for a viewport.

    Returns an int32 array of shape (height, width); cell [j, i] holds the
    escape count of the point at (xs[i], ys[j]), in [0, iter_limit].
    """
    if viewport is None:
        viewport = Viewport()
    viewport.validate()

    iterator = pick_iterator(viewport.mode)
    xs, ys = plane_axes(viewport)

    iters = np.zeros((viewport.height, viewport.width), dtype=np.int32)

    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            iters[j, i] = iterator(
                float(x), float(y), viewport.iter_limit, viewport.threshold, viewport.julia_c
            )

    return iters
