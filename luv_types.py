# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour value types: ``Luv`` and its cylindrical form ``LCh``.

Both are small immutable value objects.  Components are stored at single
precision: every constructor rounds its arguments to the nearest float32,
so values built by hand compare equal to values produced by a conversion.

Equality is perceptual rather than structural:
    - chromaticity is ignored when L* is zero (every such colour is black),
    - hue is ignored when C* is zero (a grey has no hue),
    - hues are compared modulo τ.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence, Tuple, TypeAlias

import numpy as np

from luv_colorengine import LUV_DTYPE, TAU, LuvEngine
from luv_srgb import ArrayFloat, as_u8

__all__ = [
    "Luv",
    "LCh",
    "luv_from_xyz",
    "xyz_from_luv",
]

RGB: TypeAlias = Tuple[int, int, int]
RGBA: TypeAlias = Tuple[int, int, int, int]

# τ at the precision of the stored hue.
_TAU32: Final[float] = float(np.float32(TAU))


def _f32(value: float) -> float:
    return float(LUV_DTYPE(value))


def _wrap_hue(h: float) -> float:
    """Euclidean remainder of *h* by τ, always in [0, τ)."""
    return _f32(h % _TAU32)


def _rgb_triple(rgba: Sequence[int], label: str) -> np.ndarray:
    arr = np.asarray(rgba)
    if arr.shape != (4,):
        raise ValueError(f"{label}: expected 4 components, got shape {arr.shape}")
    return arr[:3]


def _to_tuple(arr: np.ndarray) -> tuple:
    return tuple(arr.tolist())


# =============================================================================
# 1. CIELUV
# =============================================================================

@dataclass(slots=True, frozen=True, eq=False)
class Luv:
    """A colour in the CIE L*u*v* colour space (D65 white).

    Attributes:
        l: Lightness L*, 0..100 for displayable colours.
        u: u* chromaticity; negative is greener, positive redder.  Typical
            values are in -100..100 but the valid range depends on L* and v*.
        v: v* chromaticity; negative is bluer, positive yellower.

    The default value is black.
    """
    l: float = 0.0
    u: float = 0.0
    v: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", _f32(self.l))
        object.__setattr__(self, "u", _f32(self.u))
        object.__setattr__(self, "v", _f32(self.v))

    # --- Array bridge ---

    @classmethod
    def from_array(cls, arr: ArrayFloat) -> Luv:
        """Builds a ``Luv`` from a (3,) array of L*, u*, v*."""
        l, u, v = arr
        return cls(float(l), float(u), float(v))

    def to_array(self) -> ArrayFloat:
        """Returns ``[l, u, v]`` as a float32 array."""
        return np.array([self.l, self.u, self.v], dtype=LUV_DTYPE)

    # --- sRGB adapters ---

    @classmethod
    def from_rgb(cls, rgb: Sequence[int]) -> Luv:
        """
        Converts an 8-bit sRGB triple.

        Examples:
            >>> Luv.from_rgb((240, 33, 95))     # doctest: +SKIP
            Luv(l=52.33468..., u=138.98636..., v=7.84768...)
        """
        return cls.from_array(LuvEngine.srgb_to_luv(rgb))

    @classmethod
    def from_rgba(cls, rgba: Sequence[int]) -> Luv:
        """Converts an 8-bit sRGBA quadruple; alpha is discarded."""
        return cls.from_rgb(_rgb_triple(rgba, "Luv.from_rgba"))

    @classmethod
    def from_rgb_normalized(cls, rgb: Sequence[float]) -> Luv:
        """Converts a normalised sRGB triple with components in [0, 1]."""
        return cls.from_array(LuvEngine.srgb_normalized_to_luv(rgb))

    @classmethod
    def from_rgba_normalized(cls, rgba: Sequence[float]) -> Luv:
        """Converts a normalised sRGBA quadruple; alpha is discarded."""
        return cls.from_rgb_normalized(_rgb_triple(rgba, "Luv.from_rgba_normalized"))

    def to_rgb(self) -> RGB:
        """
        Returns the colour as an 8-bit sRGB triple.

        Colours outside the sRGB gamut are clamped.
        """
        return _to_tuple(LuvEngine.luv_to_srgb(self.to_array()))

    def to_rgba(self, alpha: int = 255) -> RGBA:
        """
        Returns the colour as an 8-bit sRGBA quadruple with *alpha* appended.

        Raises:
            ValueError: If *alpha* is not an integer in 0..255.
        """
        return self.to_rgb() + (int(as_u8(alpha)),)

    def to_rgb_normalized(self) -> Tuple[float, float, float]:
        """Returns the colour as normalised sRGB floats in [0, 1]."""
        return _to_tuple(LuvEngine.luv_to_srgb_normalized(self.to_array()))

    # --- Colour difference ---

    def squared_distance(self, other: Luv) -> float:
        """
        Squared Euclidean distance to *other* in L*u*v* space.

        Examples:
            >>> pink = Luv(52.334686, 138.98636, 7.8476787)
            >>> websafe_pink = Luv(56.675262, 142.3089, 10.548637)
            >>> round(pink.squared_distance(websafe_pink), 3)
            37.175
        """
        return ((self.l - other.l) ** 2
                + (self.u - other.u) ** 2
                + (self.v - other.v) ** 2)

    # --- Equality ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Luv):
            return NotImplemented
        if self.l != other.l:
            return False
        if self.l == 0.0:
            return True
        return self.u == other.u and self.v == other.v

    def __hash__(self) -> int:
        if self.l == 0.0:
            return hash((Luv, 0.0))
        return hash((Luv, self.l, self.u, self.v))


# =============================================================================
# 2. CIELCh(uv)
# =============================================================================

@dataclass(slots=True, frozen=True, eq=False)
class LCh:
    """A colour in the cylindrical CIE LCh(uv) colour space.

    Attributes:
        l: Lightness L*, identical to ``Luv.l``.
        c: Chroma C*uv, zero for greys and typically below ~180.
        h: Hue h_uv in radians.  Any real value is accepted and treated
            modulo τ; conversions from ``Luv`` produce values in -π..π.
            Meaningless when ``c`` is zero.
    """
    l: float = 0.0
    c: float = 0.0
    h: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", _f32(self.l))
        object.__setattr__(self, "c", _f32(self.c))
        object.__setattr__(self, "h", _f32(self.h))

    # --- Array bridge ---

    @classmethod
    def from_array(cls, arr: ArrayFloat) -> LCh:
        """Builds an ``LCh`` from a (3,) array of L*, C*, h."""
        l, c, h = arr
        return cls(float(l), float(c), float(h))

    def to_array(self) -> ArrayFloat:
        """Returns ``[l, c, h]`` as a float32 array."""
        return np.array([self.l, self.c, self.h], dtype=LUV_DTYPE)

    # --- Luv bridge ---

    @classmethod
    def from_luv(cls, luv: Luv) -> LCh:
        """
        Converts from ``Luv``: C* = hypot(u*, v*), h = atan2(v*, u*).

        A colour with u* = v* = 0 gets C* = 0 and h = 0.
        """
        return cls.from_array(LuvEngine.luv_to_lch(luv.to_array()))

    def to_luv(self) -> Luv:
        """
        Converts to ``Luv``.

        Luv -> LCh -> Luv (and the reverse) is not guaranteed to reproduce
        the source colour exactly at float precision.
        """
        return Luv.from_array(LuvEngine.lch_to_luv(self.to_array()))

    # --- sRGB adapters ---

    @classmethod
    def from_rgb(cls, rgb: Sequence[int]) -> LCh:
        """Converts an 8-bit sRGB triple."""
        return cls.from_luv(Luv.from_rgb(rgb))

    @classmethod
    def from_rgba(cls, rgba: Sequence[int]) -> LCh:
        """Converts an 8-bit sRGBA quadruple; alpha is discarded."""
        return cls.from_luv(Luv.from_rgba(rgba))

    @classmethod
    def from_rgb_normalized(cls, rgb: Sequence[float]) -> LCh:
        return cls.from_luv(Luv.from_rgb_normalized(rgb))

    @classmethod
    def from_rgba_normalized(cls, rgba: Sequence[float]) -> LCh:
        return cls.from_luv(Luv.from_rgba_normalized(rgba))

    def to_rgb(self) -> RGB:
        """Returns the colour as an 8-bit sRGB triple (out-of-gamut clamps)."""
        return self.to_luv().to_rgb()

    def to_rgba(self, alpha: int = 255) -> RGBA:
        return self.to_luv().to_rgba(alpha)

    def to_rgb_normalized(self) -> Tuple[float, float, float]:
        return self.to_luv().to_rgb_normalized()

    # --- Equality ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LCh):
            return NotImplemented
        if self.l != other.l:
            return False
        if self.l == 0.0:
            return True
        if self.c != other.c:
            return False
        if self.c == 0.0:
            return True
        return _wrap_hue(self.h) == _wrap_hue(other.h)

    def __hash__(self) -> int:
        if self.l == 0.0:
            return hash((LCh, 0.0))
        if self.c == 0.0:
            return hash((LCh, self.l, 0.0))
        return hash((LCh, self.l, self.c, _wrap_hue(self.h)))


# =============================================================================
# 3. XYZ ENTRY POINTS
# =============================================================================

def luv_from_xyz(xyz: Sequence[float]) -> Luv:
    """
    Converts one XYZ triple (D65, Y of white = 1) to ``Luv``.

    Y <= 0 yields black.
    """
    return Luv.from_array(LuvEngine.xyz_to_luv(np.asarray(xyz, dtype=np.float64)))

def xyz_from_luv(luv: Luv) -> ArrayFloat:
    """Converts a ``Luv`` to an XYZ triple, float64 array of shape (3,)."""
    return LuvEngine.luv_to_xyz(luv.to_array())
