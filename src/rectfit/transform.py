"""
transform.py

Derivation of axis-aligned affine transforms between rectangles.

A transform maps `output = offset + scale * input`, independently per axis.
Two ways of deriving one from an (inner, outer) rect pair are provided:

- `scale_stretch(inner, outer, options)` -> exact per-axis fit (aspect ratio
  not preserved)
- `scale_fit(inner, outer, options)` -> uniform scale that keeps `inner`
  inside `outer`, centered (letterboxing), optionally flipping the y axis

Both center `inner` on `outer`, and `zoom` scales about that center.
An inner rect with zero width or height is handled by the degenerate policy
in `rectfit.config` (see `rectfit.numeric.divide`).
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

import numpy as np
from affine import Affine

from rectfit.numeric import divide
from rectfit.primitives import Rect, Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AffineTransform:
    """Axis-aligned affine transform parameters (independent scaling).

    To be applied as `output = offset + scale * input`.
    """
    offset: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))

    @classmethod
    def identity(cls) -> 'AffineTransform':
        return cls(Vec2(0.0, 0.0), Vec2(1.0, 1.0))

    def inverse(self) -> 'AffineTransform':
        """Transform undoing this one. Zero scale follows the degenerate policy."""
        sx = divide(1.0, self.scale.x, 'AffineTransform.inverse (x)')
        sy = divide(1.0, self.scale.y, 'AffineTransform.inverse (y)')
        return AffineTransform(Vec2(-self.offset.x * sx, -self.offset.y * sy), Vec2(sx, sy))

    def then(self, other: 'AffineTransform') -> 'AffineTransform':
        """Composition that applies `self` first and `other` second."""
        return AffineTransform(other.offset + other.scale * self.offset,
                               other.scale * self.scale)

    def is_finite(self) -> bool:
        return self.offset.is_finite() and self.scale.is_finite()

    def isclose(self, other: 'AffineTransform', rel_tol: Optional[float] = None,
                abs_tol: Optional[float] = None) -> bool:
        return (self.offset.isclose(other.offset, rel_tol, abs_tol)
                and self.scale.isclose(other.scale, rel_tol, abs_tol))

    def to_affine(self) -> Affine:
        """Equivalent `affine.Affine` (no shear or rotation terms)."""
        return Affine(self.scale.x, 0.0, self.offset.x,
                      0.0, self.scale.y, self.offset.y)

    @classmethod
    def from_affine(cls, transform: Affine) -> 'AffineTransform':
        """Build from an `affine.Affine`; rotation and shear are rejected."""
        if transform.b != 0.0 or transform.d != 0.0:
            raise ValueError(
                f'only axis-aligned transforms are supported (b={transform.b}, d={transform.d})'
            )
        return cls(Vec2(transform.c, transform.f), Vec2(transform.a, transform.e))


@dataclass(frozen=True)
class StretchOptions:
    """Additional options for `scale_stretch`.

    zoom: modifier applied to scale after exact fit calculation
    (2.0 twice as big, 0.5 twice as small).
    """
    zoom: float = 1.0


@dataclass(frozen=True)
class FitOptions:
    """Additional options for `scale_fit`.

    invert_y: if True, flips the direction of growth of the y axis
    (e.g. y-up logical space onto a y-down screen).
    zoom: modifier applied to scale after fit calculation.
    """
    invert_y: bool = False
    zoom: float = 1.0


def scale_stretch(inner: Rect, outer: Rect,
                  options: Optional[StretchOptions] = None) -> AffineTransform:
    """Transform mapping points in `inner` to points in `outer`, per axis.

    Parameters:
    - inner: source rect; must have non-zero width and height.
    - outer: destination rect.
    - options: `StretchOptions`; `None` means defaults.

    Returns: `AffineTransform` with `transform_rect(inner, t) == outer`
    when zoom is 1.
    """
    if options is None:
        options = StretchOptions()
    zoom = options.zoom

    diag_in = inner.diagonal()
    diag_out = outer.diagonal()
    ci = inner.center()
    co = outer.center()

    sx = divide(zoom * diag_out.x, diag_in.x, 'scale_stretch: inner width')
    sy = divide(zoom * diag_out.y, diag_in.y, 'scale_stretch: inner height')

    ox = co.x - sx * ci.x
    oy = co.y - sy * ci.y

    result = AffineTransform(Vec2(ox, oy), Vec2(sx, sy))
    logger.debug('scale_stretch: inner=%s outer=%s zoom=%s -> %s', inner, outer, zoom, result)
    return result


def scale_fit(inner: Rect, outer: Rect,
              options: Optional[FitOptions] = None) -> AffineTransform:
    """Uniform transform fitting `inner` inside `outer`, centered.

    The smaller of the two per-axis scales is used so the scaled inner rect
    never exceeds `outer` on either axis. With `invert_y` the y scale is
    negated and the y offset compensates so centers still coincide.
    """
    if options is None:
        options = FitOptions()
    invert_y = options.invert_y
    zoom = options.zoom
    flip_y = -1.0 if invert_y else 1.0

    diag_in = inner.diagonal()
    diag_out = outer.diagonal()
    ci = inner.center()
    co = outer.center()

    sx = divide(diag_out.x, diag_in.x, 'scale_fit: inner width')
    sy = divide(diag_out.y, diag_in.y, 'scale_fit: inner height')
    # np.minimum keeps NaN from a degenerate axis instead of picking the other
    s = float(np.minimum(sx, sy)) * zoom

    ox = co.x - s * ci.x
    oy = co.y - flip_y * s * ci.y

    result = AffineTransform(Vec2(ox, oy), Vec2(s, -s if invert_y else s))
    logger.debug('scale_fit: inner=%s outer=%s invert_y=%s zoom=%s -> %s',
                 inner, outer, invert_y, zoom, result)
    return result
