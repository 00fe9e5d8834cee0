# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Approximate Equality
====================
Tolerant comparisons for ``Luv`` and ``LCh`` in three strengths:

    - ``abs_diff_eq``: |a - b| <= epsilon
    - ``relative_eq``: absolute test first, then |a - b| <= max(|a|, |b|) * max_relative
    - ``ulps_eq``:     absolute test first, then a distance of at most
                       ``max_ulps`` representable float32 values

Each strength walks the same decision table as ``==``: once the lightness
matches, a zero lightness short-circuits to equal, then (for LCh) a zero
chroma short-circuits to equal, and hues are compared modulo τ.  "Zero" is
itself judged with the active tolerance.

All three accept two ``Luv``, two ``LCh`` or two equal-length sequences of
them.  This module is optional: the core modules never import it.
"""

from __future__ import annotations

import math
from typing import Callable, Final, Sequence, Union

import numpy as np

from luv_types import LCh, Luv, _wrap_hue

__all__ = [
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_RELATIVE",
    "DEFAULT_MAX_ULPS",
    "abs_diff_eq",
    "relative_eq",
    "ulps_eq",
]

DEFAULT_EPSILON: Final[float] = 1e-4
DEFAULT_MAX_RELATIVE: Final[float] = 1e-4
DEFAULT_MAX_ULPS: Final[int] = 4

Colour = Union[Luv, LCh]
Operand = Union[Colour, Sequence[Colour]]
FloatEq = Callable[[float, float], bool]


# =============================================================================
# 1. SCALAR LEAF TESTS
# =============================================================================

def _abs_diff_eq(a: float, b: float, epsilon: float) -> bool:
    return a == b or abs(a - b) <= epsilon

def _relative_eq(a: float, b: float, epsilon: float, max_relative: float) -> bool:
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(a - b)
    if diff <= epsilon:
        return True
    return diff <= max(abs(a), abs(b)) * max_relative

def _ulps_eq(a: float, b: float, epsilon: float, max_ulps: int) -> bool:
    if _abs_diff_eq(a, b, epsilon):
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    ia = int(np.array(a, dtype=np.float32).view(np.int32))
    ib = int(np.array(b, dtype=np.float32).view(np.int32))
    return abs(ia - ib) <= max_ulps


# =============================================================================
# 2. DECISION TABLES
# =============================================================================

def _luv_eq(lhs: Luv, rhs: Luv, eq: FloatEq) -> bool:
    if not eq(lhs.l, rhs.l):
        return False
    if eq(lhs.l, 0.0) or eq(rhs.l, 0.0):
        return True
    return eq(lhs.u, rhs.u) and eq(lhs.v, rhs.v)

def _lch_eq(lhs: LCh, rhs: LCh, eq: FloatEq) -> bool:
    if not eq(lhs.l, rhs.l):
        return False
    if eq(lhs.l, 0.0) or eq(rhs.l, 0.0):
        return True
    if not eq(lhs.c, rhs.c):
        return False
    if eq(lhs.c, 0.0) or eq(rhs.c, 0.0):
        return True
    return eq(_wrap_hue(lhs.h), _wrap_hue(rhs.h))

def _compare(lhs: Operand, rhs: Operand, eq: FloatEq) -> bool:
    if isinstance(lhs, Luv) and isinstance(rhs, Luv):
        return _luv_eq(lhs, rhs, eq)
    if isinstance(lhs, LCh) and isinstance(rhs, LCh):
        return _lch_eq(lhs, rhs, eq)
    if isinstance(lhs, (list, tuple)) and isinstance(rhs, (list, tuple)):
        return (len(lhs) == len(rhs)
                and all(_compare(a, b, eq) for a, b in zip(lhs, rhs)))
    raise TypeError(
        f"Cannot compare {type(lhs).__name__} with {type(rhs).__name__}"
    )


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def abs_diff_eq(lhs: Operand, rhs: Operand,
                epsilon: float = DEFAULT_EPSILON) -> bool:
    """
    Absolute-difference equality.

    Args:
        lhs, rhs: Two ``Luv``, two ``LCh`` or two sequences of them.
        epsilon: Largest accepted absolute difference per component.

    Raises:
        TypeError: For mismatched or unsupported operand types.
    """
    return _compare(lhs, rhs, lambda a, b: _abs_diff_eq(a, b, epsilon))

def relative_eq(lhs: Operand, rhs: Operand,
                epsilon: float = DEFAULT_EPSILON,
                max_relative: float = DEFAULT_MAX_RELATIVE) -> bool:
    """
    Relative equality; *epsilon* still decides near zero.

    Infinities are only equal to themselves.
    """
    return _compare(lhs, rhs,
                    lambda a, b: _relative_eq(a, b, epsilon, max_relative))

def ulps_eq(lhs: Operand, rhs: Operand,
            epsilon: float = DEFAULT_EPSILON,
            max_ulps: int = DEFAULT_MAX_ULPS) -> bool:
    """
    Units-in-the-last-place equality on the float32 representation.

    Values of opposite sign are never equal unless the absolute test with
    *epsilon* already accepts them.
    """
    return _compare(lhs, rhs, lambda a, b: _ulps_eq(a, b, epsilon, max_ulps))
