from mandelgrid.errors import (
    ConfigError,
    InvalidCoordinate,
    InvalidDimension,
    InvalidIterLimit,
    InvalidRatio,
    InvalidThreshold,
    ViewportError,
)
from mandelgrid.generate import generate, plane_axes
from mandelgrid.iterators import (
    DIVERGENCE_THRESHOLD,
    REFERENCE_THRESHOLD,
    STANDARD_THRESHOLD,
    escape_iteration,
    pick_iterator,
)
from mandelgrid.render import parse_text, print_grid, render_text
from mandelgrid.viewport import Viewport, load_viewport, viewport_from_dict
