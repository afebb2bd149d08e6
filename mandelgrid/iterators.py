"""
Escape-time iteration for the complex quadratic map z_{n+1} = z_n^2 + c.

Divergence is tested on the squared modulus x^2 + y^2 of each new iterate.
Two thresholds are provided:

    REFERENCE_THRESHOLD = 2.0   reproduces the reference grids exactly
    STANDARD_THRESHOLD  = 4.0   the usual |z| >= 2 escape radius

The reference value is the default. It is not equivalent to the standard
test (it escapes at |z| >= sqrt(2)), so pick explicitly when visual
fidelity to the textbook set matters.
"""

REFERENCE_THRESHOLD = 2.0
STANDARD_THRESHOLD = 4.0
DIVERGENCE_THRESHOLD = REFERENCE_THRESHOLD


def escape_iteration(
    z0x: float,
    z0y: float,
    c_real: float,
    c_imag: float,
    iter_limit: int,
    threshold: float = DIVERGENCE_THRESHOLD,
) -> int:
    """
    Count iterations of n <- n^2 + c, starting from n = z0, until the squared
    modulus of n reaches `threshold`.

    Returns the 0-based index of the iteration that diverged, or `iter_limit`
    if the orbit stayed bounded for all `iter_limit` steps.
    """
    nx = z0x
    ny = z0y
    for it in range(iter_limit):
        x = nx * nx - ny * ny + c_real
        y = 2.0 * nx * ny + c_imag
        if x * x + y * y >= threshold:
            return it
        nx = x
        ny = y
    return iter_limit


def pick_iterator(mode: str):
    """Return a per-pixel function matching the generator's expected signature:
    iterator(px, py, iter_limit, threshold, c) -> escape count

    mode:
        "mandelbrot" -> z0 = 0, c = pixel
        "julia"      -> z0 = pixel, c fixed
    """
    name = mode.lower()

    if name == "mandelbrot":
        def iterator(px, py, iter_limit, threshold, c=None):
            return escape_iteration(0.0, 0.0, px, py, iter_limit, threshold)
        return iterator

    if name == "julia":
        def iterator(px, py, iter_limit, threshold, c=0j):
            return escape_iteration(px, py, c.real, c.imag, iter_limit, threshold)
        return iterator

    raise ValueError(f"Unknown iteration mode: {mode}")
