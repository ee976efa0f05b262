"""Algebraic properties shared by stretch and fit transforms."""
import pytest

from rectfit.apply import (
    inverse_transform_area,
    inverse_transform_point,
    inverse_transform_rect,
    inverse_transform_vec,
    transform_area,
    transform_point,
    transform_rect,
    transform_vec,
)
from rectfit.primitives import Rect, Vec2
from rectfit.transform import FitOptions, StretchOptions, scale_fit, scale_stretch

RECT_PAIRS = [
    (Rect.from_coords(0, 0, 1, 1), Rect.from_coords(1, 2, 3, 5)),
    (Rect.from_coords(-10, -5, 10, 5), Rect.from_coords(0, 0, 1920, 1080)),
    (Rect.from_coords(0.1, 0.2, 0.3, 0.9), Rect.from_coords(-3, -3, -1, 7)),
]

DERIVATIONS = [
    lambda i, o: scale_stretch(i, o),
    lambda i, o: scale_stretch(i, o, StretchOptions(zoom=0.5)),
    lambda i, o: scale_fit(i, o),
    lambda i, o: scale_fit(i, o, FitOptions(invert_y=True)),
    lambda i, o: scale_fit(i, o, FitOptions(invert_y=True, zoom=3.0)),
]

SAMPLES = [Vec2(0.0, 0.0), Vec2(1.5, -2.25), Vec2(-7.0, 13.0)]


@pytest.mark.parametrize('inner, outer', RECT_PAIRS)
@pytest.mark.parametrize('derive', DERIVATIONS)
def test_round_trip(inner, outer, derive):
    t = derive(inner, outer)
    for p in SAMPLES:
        assert inverse_transform_point(transform_point(p, t), t).isclose(p, abs_tol=1e-9)
        assert inverse_transform_vec(transform_vec(p, t), t).isclose(p, abs_tol=1e-9)
    assert inverse_transform_rect(transform_rect(inner, t), t).isclose(inner, abs_tol=1e-9)
    assert inverse_transform_area(transform_area(outer, t), t).isclose(outer, abs_tol=1e-9)


@pytest.mark.parametrize('inner, outer', RECT_PAIRS)
@pytest.mark.parametrize('derive', DERIVATIONS)
def test_center_preserved(inner, outer, derive):
    t = derive(inner, outer)
    assert transform_point(inner.center(), t).isclose(outer.center(), abs_tol=1e-9)


@pytest.mark.parametrize('inner, outer', RECT_PAIRS)
def test_stretch_fits_exactly(inner, outer):
    t = scale_stretch(inner, outer)
    assert transform_rect(inner, t).isclose(outer, abs_tol=1e-9)


@pytest.mark.parametrize('inner, outer', RECT_PAIRS)
@pytest.mark.parametrize('invert_y', [False, True])
def test_fit_is_contained_and_touches_one_axis(inner, outer, invert_y):
    t = scale_fit(inner, outer, FitOptions(invert_y=invert_y))
    fitted = transform_rect(inner, t)
    assert outer.contains_rect(fitted, abs_tol=1e-9)
    touches_x = abs(fitted.width - outer.width) < 1e-9
    touches_y = abs(fitted.height - outer.height) < 1e-9
    assert touches_x or touches_y
    assert abs(abs(t.scale.x) - abs(t.scale.y)) < 1e-12


@pytest.mark.parametrize('derive', DERIVATIONS)
def test_vectors_ignore_translation_points_do_not(derive):
    inner = Rect.from_coords(0, 0, 2, 1)
    outer = Rect.from_coords(0, 0, 8, 6)
    shift = Vec2(5.0, -3.0)
    moved_inner = Rect(inner.min + shift, inner.max + shift)
    moved_outer = Rect(outer.min + shift, outer.max + shift)

    t = derive(inner, outer)
    t_moved = derive(moved_inner, moved_outer)
    t_outer_moved = derive(inner, moved_outer)

    v = Vec2(1.0, 1.0)
    area = Rect.from_coords(0, 0, 1, 1)
    for other in (t_moved, t_outer_moved):
        assert transform_vec(v, other).isclose(transform_vec(v, t))
        assert transform_area(area, other).isclose(transform_area(area, t))
    assert not transform_point(v, t_outer_moved).isclose(transform_point(v, t))
    assert not transform_rect(area, t_outer_moved).isclose(transform_rect(area, t))


@pytest.mark.parametrize('inner, outer', RECT_PAIRS)
def test_negative_scale_never_inverts_rects(inner, outer):
    t = scale_fit(inner, outer, FitOptions(invert_y=True))
    assert t.scale.y < 0
    for r in (transform_rect(inner, t), transform_area(inner, t),
              inverse_transform_rect(outer, t), inverse_transform_area(outer, t)):
        assert r.min.x <= r.max.x
        assert r.min.y <= r.max.y
