import sys

import numpy as np

HEX_DIGITS = "0123456789abcdef"


def render_text(grid) -> str:
    """
    Render an escape grid as text: one line per row, one lowercase hex digit
    (count mod 16) per cell, every row newline-terminated.
    """
    lines = []
    for row in np.asarray(grid, dtype=np.int64):
        lines.append("".join(HEX_DIGITS[v % 16] for v in row))
    return "".join(line + "\n" for line in lines)


def print_grid(grid, file=None):
    """Write the rendered grid to `file` (stdout by default)."""
    if file is None:
        file = sys.stdout
    file.write(render_text(grid))


def parse_text(text: str) -> np.ndarray:
    """
    Decode rendered text back into a grid.

    Lossy: each cell comes back as the original count mod 16.
    """
    rows = [[int(ch, 16) for ch in line] for line in text.splitlines()]
    if not rows:
        return np.zeros((0, 0), dtype=np.int32)
    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise ValueError(f"Ragged grid text: row widths {sorted(widths)}")
    return np.array(rows, dtype=np.int32)
