"""
rectfit: axis-aligned affine transforms between rectangles.

Derive a transform that stretches or fits one rect onto another, then apply
it (or its inverse) to points, vectors and rects:

    from rectfit import Rect, Vec2, FitOptions, scale_fit, transform_point

    t = scale_fit(Rect.from_coords(0, 0, 1, 1), Rect.from_coords(0, 0, 800, 600),
                  FitOptions(invert_y=True))
    transform_point(Vec2(0.5, 0.5), t)  # Vec2(x=400.0, y=300.0)
"""
from rectfit.apply import (
    apply_transform,
    inverse_transform,
    inverse_transform_area,
    inverse_transform_point,
    inverse_transform_points,
    inverse_transform_rect,
    inverse_transform_vec,
    transform_area,
    transform_point,
    transform_points,
    transform_rect,
    transform_vec,
)
from rectfit.numeric import DegenerateTransformError
from rectfit.primitives import Rect, Vec2
from rectfit.transform import (
    AffineTransform,
    FitOptions,
    StretchOptions,
    scale_fit,
    scale_stretch,
)

__version__ = '0.1.0'

__all__ = [
    'AffineTransform',
    'DegenerateTransformError',
    'FitOptions',
    'Rect',
    'StretchOptions',
    'Vec2',
    'apply_transform',
    'inverse_transform',
    'inverse_transform_area',
    'inverse_transform_point',
    'inverse_transform_points',
    'inverse_transform_rect',
    'inverse_transform_vec',
    'scale_fit',
    'scale_stretch',
    'transform_area',
    'transform_point',
    'transform_points',
    'transform_rect',
    'transform_vec',
]
