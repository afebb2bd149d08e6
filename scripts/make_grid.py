"""
Print a Mandelbrot (or Julia) escape grid as hex text.

Run:
    python scripts/make_grid.py
    python scripts/make_grid.py --width 80 --height 40 --standard
    python scripts/make_grid.py --config configs/default.yaml --julia=-0.4+0.6j

Flags given on the command line override values from --config.
"""

import argparse
import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path so `from mandelgrid...` works when
# running this script directly (e.g. `python scripts/make_grid.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelgrid.errors import ViewportError
from mandelgrid.generate import generate
from mandelgrid.iterators import STANDARD_THRESHOLD
from mandelgrid.render import print_grid
from mandelgrid.viewport import load_viewport, viewport_from_dict


def build_parser():
    parser = argparse.ArgumentParser(
        description="Render a Mandelbrot escape-time grid as hexadecimal text"
    )
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file with viewport fields")
    parser.add_argument("--width", type=int, default=None, help="pixels per row (default 180)")
    parser.add_argument("--height", type=int, default=None, help="number of rows (default 100)")
    parser.add_argument("--center-x", type=float, default=None, help="default 0.0")
    parser.add_argument("--center-y", type=float, default=None, help="default 0.0")
    parser.add_argument("--ratio", type=float, default=None,
                        help="plane units spanned by the viewport (default 2.5)")
    parser.add_argument("--iter-limit", type=int, default=None, help="default 100")

    threshold = parser.add_mutually_exclusive_group()
    threshold.add_argument("--threshold", type=float, default=None,
                           help="divergence threshold on |z|^2 (default 2.0)")
    threshold.add_argument("--standard", action="store_true",
                           help=f"use the standard threshold |z|^2 >= {STANDARD_THRESHOLD}")

    parser.add_argument("--julia", type=str, default=None,
                        help="fixed parameter c, e.g. -0.4+0.6j (switches to Julia mode)")
    parser.add_argument("--outfile", type=str, default=None,
                        help="write the grid here instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="status lines on stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    overrides = dict(
        width=args.width,
        height=args.height,
        center_x=args.center_x,
        center_y=args.center_y,
        ratio=args.ratio,
        iter_limit=args.iter_limit,
        threshold=STANDARD_THRESHOLD if args.standard else args.threshold,
        julia_c=args.julia,
    )

    try:
        if args.config:
            viewport = load_viewport(args.config, **overrides)
        else:
            viewport = viewport_from_dict({}, **overrides)
    except ViewportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"[run] mode={viewport.mode}, {viewport.width}x{viewport.height}, "
              f"center=({viewport.center_x}, {viewport.center_y}), ratio={viewport.ratio}, "
              f"iter_limit={viewport.iter_limit}, threshold={viewport.threshold}",
              file=sys.stderr)

    grid = generate(viewport)

    if args.outfile:
        out_path = Path(args.outfile)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            print_grid(grid, file=f)
        if args.verbose:
            print(f"[run] saved to {out_path}", file=sys.stderr)
    else:
        print_grid(grid)

    if args.verbose:
        print("[run] done.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
