"""
apply.py

Application of an `AffineTransform` to points, vectors and rects.

Points are positions and get `offset + scale * p`. Vectors are differences
(directions, extents) and only get the linear part `scale * v`. Rects are
rebuilt with `Rect.bounding_box` from their transformed corners, so a
negative scale (e.g. from `FitOptions(invert_y=True)`) still yields a valid
rect. "Area" functions treat both corners of a rect as vectors.

Public functions:
- `transform_point(p, t)` / `inverse_transform_point(p, t)`
- `transform_vec(v, t)` / `inverse_transform_vec(v, t)`
- `transform_rect(r, t)` / `inverse_transform_rect(r, t)`
- `transform_area(r, t)` / `inverse_transform_area(r, t)`
- `transform_points(points, t)` / `inverse_transform_points(points, t)`
  for NumPy arrays of shape (..., 2)

Inverse functions divide by the scale; a zero scale component follows the
degenerate policy in `rectfit.config`.
"""
import numpy as np

from rectfit.numeric import divide, divide_array
from rectfit.primitives import Rect, Vec2
from rectfit.transform import AffineTransform


def transform_point(p: Vec2, transform: AffineTransform) -> Vec2:
    """Apply affine transform to a point (output = offset + scale * p)."""
    return Vec2(
        transform.offset.x + transform.scale.x * p.x,
        transform.offset.y + transform.scale.y * p.y,
    )


def transform_vec(v: Vec2, transform: AffineTransform) -> Vec2:
    """Apply only the linear part (scale) to a free vector."""
    return Vec2(transform.scale.x * v.x, transform.scale.y * v.y)


def inverse_transform_point(p: Vec2, transform: AffineTransform) -> Vec2:
    """Apply the inverse transform to a point."""
    return Vec2(
        divide(p.x - transform.offset.x, transform.scale.x, 'inverse_transform_point (x)'),
        divide(p.y - transform.offset.y, transform.scale.y, 'inverse_transform_point (y)'),
    )


def inverse_transform_vec(v: Vec2, transform: AffineTransform) -> Vec2:
    """Apply the inverse of the linear part to a free vector."""
    return Vec2(
        divide(v.x, transform.scale.x, 'inverse_transform_vec (x)'),
        divide(v.y, transform.scale.y, 'inverse_transform_vec (y)'),
    )


def transform_rect(r: Rect, transform: AffineTransform) -> Rect:
    """Apply the forward transform to a whole rect, respecting min and max."""
    return Rect.bounding_box(transform_point(r.min, transform),
                             transform_point(r.max, transform))


def inverse_transform_rect(r: Rect, transform: AffineTransform) -> Rect:
    """Apply the inverse transform to a whole rect, respecting min and max."""
    return Rect.bounding_box(inverse_transform_point(r.min, transform),
                             inverse_transform_point(r.max, transform))


def transform_area(r: Rect, transform: AffineTransform) -> Rect:
    """Apply the linear part to both corners of a rect (no translation)."""
    return Rect.bounding_box(transform_vec(r.min, transform),
                             transform_vec(r.max, transform))


def inverse_transform_area(r: Rect, transform: AffineTransform) -> Rect:
    """Apply the inverse of the linear part to both corners of a rect."""
    return Rect.bounding_box(inverse_transform_vec(r.min, transform),
                             inverse_transform_vec(r.max, transform))


# Names the functions were first published under.
apply_transform = transform_point
inverse_transform = inverse_transform_point


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 0 or pts.shape[-1] != 2:
        raise ValueError(f'points must have a last axis of length 2, got shape {pts.shape}')
    return pts


def transform_points(points, transform: AffineTransform) -> np.ndarray:
    """Vectorized `transform_point` over an array-like of shape (..., 2).

    Returns a new float array of the same shape.
    """
    pts = _as_points(points)
    offset = np.array(transform.offset.as_tuple(), dtype=float)
    scale = np.array(transform.scale.as_tuple(), dtype=float)
    # inf/nan parameters under the propagate policy stay silent, as in transform_point
    with np.errstate(invalid='ignore', over='ignore'):
        return offset + scale * pts


def inverse_transform_points(points, transform: AffineTransform) -> np.ndarray:
    """Vectorized `inverse_transform_point` over an array-like of shape (..., 2)."""
    pts = _as_points(points)
    offset = np.array(transform.offset.as_tuple(), dtype=float)
    scale = np.array(transform.scale.as_tuple(), dtype=float)
    with np.errstate(invalid='ignore', over='ignore'):
        shifted = pts - offset
    return divide_array(shifted, scale, 'inverse_transform_points')
