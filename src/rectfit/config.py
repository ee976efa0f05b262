# -*- coding: utf-8 -*-

"""
rectfit/config.py

Central configuration for the rectfit package. Everything tunable lives here
so derivation, application and tests agree on the same numeric behavior.

Contents:
---------
1. NUMERIC:
   - `on_degenerate`: what happens when a transform needs to divide by zero
     (an inner rect with zero width or height, or inverting a transform with
     a zero scale component).
       • 'raise'     -> `rectfit.numeric.DegenerateTransformError`
       • 'propagate' -> IEEE-754 result (inf / nan) via NumPy float64
   - `rel_tol`, `abs_tol`: default tolerances used by `isclose` helpers.

Usage:
------
    from rectfit import config

    config.NUMERIC['on_degenerate'] = 'propagate'

Values are read at call time, so changing them takes effect immediately.
Set them once at startup rather than toggling them between threads.

"""

DEGENERATE_POLICIES = ('raise', 'propagate')

NUMERIC = {
    'on_degenerate': 'raise',   # one of DEGENERATE_POLICIES
    'rel_tol': 1e-9,            # relative tolerance for isclose()
    'abs_tol': 1e-12,           # absolute tolerance for isclose()
}
