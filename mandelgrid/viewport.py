"""
Viewport configuration: the pixel grid to sample and its mapping onto the
complex plane.

A viewport is built from literals, CLI flags or a YAML file, validated once,
then handed read-only to `mandelgrid.generate.generate`.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from mandelgrid.errors import (
    ConfigError,
    InvalidCoordinate,
    InvalidDimension,
    InvalidIterLimit,
    InvalidRatio,
    InvalidThreshold,
)
from mandelgrid.iterators import DIVERGENCE_THRESHOLD
from mandelgrid.utils import parse_complex


@dataclass(frozen=True)
class Viewport:
    width: int = 180
    height: int = 100
    center_x: float = 0.0
    center_y: float = 0.0
    ratio: float = 2.5  # plane units spanned by the whole viewport, per axis
    iter_limit: int = 100
    threshold: float = DIVERGENCE_THRESHOLD
    julia_c: Optional[complex] = None  # None => Mandelbrot mode

    @property
    def mode(self) -> str:
        return "mandelbrot" if self.julia_c is None else "julia"

    def validate(self) -> "Viewport":
        """Raise a ViewportError subclass if any invariant is broken; return self."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")
        if not (math.isfinite(self.ratio) and self.ratio > 0):
            raise InvalidRatio(f"ratio must be finite and > 0, got {self.ratio!r}")
        if not _is_int(self.iter_limit) or self.iter_limit < 0:
            raise InvalidIterLimit(f"iter_limit must be a non-negative integer, got {self.iter_limit!r}")
        if not (math.isfinite(self.threshold) and self.threshold > 0):
            raise InvalidThreshold(f"threshold must be finite and > 0, got {self.threshold!r}")
        for name in ("center_x", "center_y"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidCoordinate(f"{name} must be finite, got {value!r}")
        if self.julia_c is not None and not (
            math.isfinite(self.julia_c.real) and math.isfinite(self.julia_c.imag)
        ):
            raise InvalidCoordinate(f"julia_c must be finite, got {self.julia_c!r}")
        return self


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


FIELD_NAMES = tuple(f.name for f in fields(Viewport))


def viewport_from_dict(cfg: dict, **overrides) -> Viewport:
    """
    Build a validated Viewport from a config mapping.

    Keyword overrides whose value is None are ignored, so argparse namespaces
    can be passed through directly.
    """
    if not isinstance(cfg, dict):
        raise ConfigError(f"Viewport config must be a mapping, got {type(cfg).__name__}")

    merged = dict(cfg)
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(FIELD_NAMES))
    if unknown:
        raise ConfigError(f"Unknown viewport keys: {', '.join(unknown)}")

    # PyYAML reads exponent literals like 1e-3 as strings
    for name in ("center_x", "center_y", "ratio", "threshold"):
        if name in merged:
            try:
                merged[name] = float(merged[name])
            except (TypeError, ValueError):
                raise ConfigError(f"{name} must be a number, got {merged[name]!r}")

    julia_c = merged.get("julia_c")
    try:
        if isinstance(julia_c, str):
            merged["julia_c"] = parse_complex(julia_c)
        elif isinstance(julia_c, numbers.Number):
            merged["julia_c"] = complex(julia_c)
    except ValueError:
        raise ConfigError(f"julia_c must be a complex literal, got {julia_c!r}")

    return replace(Viewport(), **merged).validate()


def load_viewport(path: str | Path, **overrides) -> Viewport:
    """Load a viewport from a YAML file (an empty file means all defaults)."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        cfg = {}
    return viewport_from_dict(cfg, **overrides)
