"""
numeric.py

Division and comparison helpers shared by the transform modules.

Python floats raise `ZeroDivisionError` where IEEE-754 would return an
infinity, so every division in rectfit goes through `divide`, which applies
the policy configured in `rectfit.config.NUMERIC['on_degenerate']`.

Public helpers:
- `divide(num, den, what)` -> float
- `divide_array(num, den, what)` -> np.ndarray
- `isclose(a, b, rel_tol=None, abs_tol=None)` -> bool
- `degenerate_policy()` -> str
"""
from typing import Optional
import logging
import math

import numpy as np

from rectfit import config

logger = logging.getLogger(__name__)


class DegenerateTransformError(ZeroDivisionError, ValueError):
    """Raised when a transform would divide by zero under the 'raise' policy."""


def degenerate_policy() -> str:
    """Return the configured degenerate policy, validating it."""
    policy = config.NUMERIC.get('on_degenerate', 'raise')
    if policy not in config.DEGENERATE_POLICIES:
        raise ValueError(
            f"unknown on_degenerate policy {policy!r}; "
            f"expected one of {config.DEGENERATE_POLICIES}"
        )
    return policy


def divide(num: float, den: float, what: str = 'division') -> float:
    """Divide `num` by `den` honoring the degenerate policy.

    `what` names the operation and axis for error messages and logs.
    """
    if den != 0.0:
        return num / den
    policy = degenerate_policy()
    logger.debug('%s: zero denominator (num=%r), policy=%s', what, num, policy)
    if policy == 'raise':
        raise DegenerateTransformError(f'{what}: division by zero')
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(num) / np.float64(den))


def divide_array(num, den, what: str = 'division') -> np.ndarray:
    """Element-wise `divide` for NumPy operands (broadcasting allowed)."""
    num_a = np.asarray(num, dtype=float)
    den_a = np.asarray(den, dtype=float)
    if np.any(den_a == 0.0):
        policy = degenerate_policy()
        logger.debug('%s: zero denominator in array operand, policy=%s', what, policy)
        if policy == 'raise':
            raise DegenerateTransformError(f'{what}: division by zero')
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return num_a / den_a


def isclose(a: float, b: float, rel_tol: Optional[float] = None,
            abs_tol: Optional[float] = None) -> bool:
    """`math.isclose` with defaults taken from `config.NUMERIC`."""
    if rel_tol is None:
        rel_tol = config.NUMERIC['rel_tol']
    if abs_tol is None:
        abs_tol = config.NUMERIC['abs_tol']
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
