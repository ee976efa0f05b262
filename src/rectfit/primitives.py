"""
primitives.py

Small immutable value types used by the transform functions.

- `Vec2`: a 2D point or vector with component-wise arithmetic.
- `Rect`: an axis-aligned rectangle stored as `min`/`max` corners, with
  `center()`, `diagonal()`, `bounding_box(a, b)`, `from_coords(...)`,
  `contains_rect(other)` and `isclose(other)`.

Both are frozen dataclasses so they can be shared freely and used as dict
keys. Arithmetic on `Vec2` is plain float arithmetic; division by zero
raises `ZeroDivisionError` like any Python float. The transform modules use
`rectfit.numeric.divide` when they need the configurable policy instead.
"""
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union
import math

import numpy as np

from rectfit.numeric import isclose

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """2D vector. Multiplication and division by another `Vec2` are component-wise."""
    x: float
    y: float

    def __add__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union['Vec2', Number]) -> 'Vec2':
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union['Vec2', Number]) -> 'Vec2':
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self) -> 'Vec2':
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        # lets a Vec2 be unpacked (x, y = v) or passed where (x, y) is expected
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def isclose(self, other: 'Vec2', rel_tol: Optional[float] = None,
                abs_tol: Optional[float] = None) -> bool:
        return (isclose(self.x, other.x, rel_tol, abs_tol)
                and isclose(self.y, other.y, rel_tol, abs_tol))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with `min <= max` on both axes.

    The plain constructor requires already-ordered corners and raises
    `ValueError` otherwise. Use `Rect.bounding_box` or `Rect.from_coords`
    to build a rect from corners in arbitrary order.
    """
    min: Vec2
    max: Vec2

    def __post_init__(self):
        # NaN corners compare False and are let through
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise ValueError(
                f'Rect corners are inverted: min={self.min!r} max={self.max!r}'
            )

    @classmethod
    def bounding_box(cls, a: Vec2, b: Vec2) -> 'Rect':
        """Smallest rect containing both points, whatever their order.

        Uses `np.minimum`/`np.maximum` so a NaN coordinate stays NaN instead
        of being silently dropped by the comparison.
        """
        lo_x, hi_x = float(np.minimum(a.x, b.x)), float(np.maximum(a.x, b.x))
        lo_y, hi_y = float(np.minimum(a.y, b.y)), float(np.maximum(a.y, b.y))
        return cls(Vec2(lo_x, lo_y), Vec2(hi_x, hi_y))

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> 'Rect':
        """Build from two corner coordinates, normalizing their order."""
        return cls.bounding_box(Vec2(x0, y0), Vec2(x1, y1))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Vec2:
        return (self.min + self.max) / 2

    def diagonal(self) -> Vec2:
        return self.max - self.min

    def contains_rect(self, other: 'Rect', abs_tol: Optional[float] = None) -> bool:
        """True if `other` lies inside this rect (edges may touch)."""
        tol = 0.0 if abs_tol is None else abs_tol
        return (other.min.x >= self.min.x - tol and other.min.y >= self.min.y - tol
                and other.max.x <= self.max.x + tol and other.max.y <= self.max.y + tol)

    def isclose(self, other: 'Rect', rel_tol: Optional[float] = None,
                abs_tol: Optional[float] = None) -> bool:
        return (self.min.isclose(other.min, rel_tol, abs_tol)
                and self.max.isclose(other.max, rel_tol, abs_tol))
