# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

L*u*v* Colour Engine
====================
Numba kernels and the array-level API for the XYZ <-> L*u*v* <-> LCh(uv)
chain.  The engine is fixed to the D65 reference white.

Numeric conventions:
    - XYZ arrays are float64 and transient.
    - L*u*v* and LCh(uv) arrays are single precision (``LUV_DTYPE``).  Every
      stage casts to ``LUV_DTYPE`` before handing over to the next one so that
      the array pipeline and the per-colour path in ``luv_types`` produce
      identical values.
    - Hue is in radians, as returned by ``atan2`` (so typically in -π..π),
      and is never wrapped.

The κ/ε pair follows Bruce Lindbloom's exact rational form instead of the
rounded CIE constants, which removes the discontinuity of L* at the junction
of the linear and cube-root segments.

References:
    - CIE 15:2004 "Colorimetry"
    - http://www.brucelindbloom.com/LContinuity.html
"""

import math
import numpy as np
from numba import njit
from typing import Final

import luv_srgb
from luv_srgb import ArrayFloat, ArrayU8, D65_XYZ, handle_shapes

__all__ = [
    # --- Constants ---
    "KAPPA",
    "EPSILON",
    "KAPPA_EPSILON",
    "WHITE_U_PRIME",
    "WHITE_V_PRIME",
    "TAU",
    "LUV_DTYPE",

    # --- Classes ---
    "LuvEngine",
]

# --- Exact Rational Math Constants ---
KAPPA: Final[float] = 24389.0 / 27.0            # ~903.296
ONE_OVER_KAPPA: Final[float] = 27.0 / 24389.0
EPSILON: Final[float] = 216.0 / 24389.0         # ~0.008856
KAPPA_EPSILON: Final[float] = 8.0               # κ·ε = 216 / 27

# D65 reference-white chromaticity (CIE 1976 UCS)
_WHITE_DENOM: Final[float] = float(D65_XYZ[0] + 15.0 * D65_XYZ[1] + 3.0 * D65_XYZ[2])
WHITE_U_PRIME: Final[float] = float(4.0 * D65_XYZ[0]) / _WHITE_DENOM
WHITE_V_PRIME: Final[float] = float(9.0 * D65_XYZ[1]) / _WHITE_DENOM

TAU: Final[float] = math.tau

LUV_DTYPE: Final[type] = np.float32


# =============================================================================
# 1. LOW-LEVEL MATH KERNELS (Numba Optimized)
# =============================================================================
# NOTE: No fastmath here.  A colour converted alone and the same colour
# converted inside a batch must come out bit-identical.  error_model="numpy"
# gives IEEE inf/NaN on a zero denominator instead of raising.

@njit(cache=True, error_model="numpy")
def _xyz_to_luv_kernel(xyz: ArrayFloat) -> ArrayFloat:
    """
    XYZ -> L*u*v*.  Input shape (N, 3), Output shape (N, 3).

    Non-positive Y maps to black (0, 0, 0).
    """
    n = xyz.shape[0]
    out = np.zeros((n, 3), dtype=np.float64)

    for i in range(n):
        x, y, z = xyz[i, 0], xyz[i, 1], xyz[i, 2]
        if y <= 0.0:
            continue

        if y <= EPSILON:
            L = KAPPA * y
        else:
            L = 116.0 * y ** (1.0 / 3.0) - 16.0

        d = x + 15.0 * y + 3.0 * z
        ll = 13.0 * L
        out[i, 0] = L
        out[i, 1] = ll * (4.0 * x / d - WHITE_U_PRIME)
        out[i, 2] = ll * (9.0 * y / d - WHITE_V_PRIME)
    return out

@njit(cache=True, error_model="numpy")
def _luv_to_xyz_kernel(luv: ArrayFloat) -> ArrayFloat:
    """
    L*u*v* -> XYZ.  Input shape (N, 3), Output shape (N, 3).

    Non-positive L* maps to (0, 0, 0).
    """
    n = luv.shape[0]
    out = np.zeros((n, 3), dtype=np.float64)

    for i in range(n):
        L, u, v = luv[i, 0], luv[i, 1], luv[i, 2]
        if L <= 0.0:
            continue

        ll = 13.0 * L
        u_prime = u / ll + WHITE_U_PRIME
        v_prime = v / ll + WHITE_V_PRIME

        if L > KAPPA_EPSILON:
            y = ((L + 16.0) / 116.0) ** 3
        else:
            y = L * ONE_OVER_KAPPA

        a = 0.75 * y * u_prime / v_prime
        out[i, 0] = 3.0 * a
        out[i, 1] = y
        out[i, 2] = y * (3.0 - 5.0 * v_prime) / v_prime - a
    return out

@njit(cache=True)
def _luv_to_lch_kernel(luv: ArrayFloat) -> ArrayFloat:
    """
    L*u*v* -> LCh(uv), hue in radians.  Input shape (N, 3), Output shape (N, 3).
    """
    n = luv.shape[0]
    lch = np.empty_like(luv)

    for i in range(n):
        L, u, v = luv[i, 0], luv[i, 1], luv[i, 2]
        lch[i, 0] = L
        lch[i, 1] = np.hypot(u, v)
        lch[i, 2] = np.arctan2(v, u)
    return lch

@njit(cache=True)
def _lch_to_luv_kernel(lch: ArrayFloat) -> ArrayFloat:
    """
    LCh(uv) -> L*u*v*.  Input shape (N, 3), Output shape (N, 3).

    Any real hue is accepted; cos/sin take care of the periodicity.
    """
    n = lch.shape[0]
    luv = np.empty_like(lch)

    for i in range(n):
        L, C, h = lch[i, 0], lch[i, 1], lch[i, 2]
        luv[i, 0] = L
        luv[i, 1] = C * np.cos(h)
        luv[i, 2] = C * np.sin(h)
    return luv


def _as_float64(arr: np.ndarray) -> ArrayFloat:
    return np.ascontiguousarray(arr, dtype=np.float64)


# =============================================================================
# 2. COLOR SPACE ENGINE
# =============================================================================

class LuvEngine:
    """Static utility class for the sRGB / XYZ / L*u*v* / LCh(uv) chain.

    Architecture Note:
        Core transforms provide both a public ``@handle_shapes`` decorated API
        and an internal ``_raw`` fast-path that assumes pre-validated (N, 3)
        input.  Convenience pipelines call the ``_raw`` variants to avoid
        redundant shape checks at each stage.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated (N, 3))
    # =====================================================================

    @staticmethod
    def _xyz_to_luv_raw(xyz_array: ArrayFloat) -> ArrayFloat:
        """Raw XYZ → Luv (float32)."""
        return _xyz_to_luv_kernel(_as_float64(xyz_array)).astype(LUV_DTYPE)

    @staticmethod
    def _luv_to_xyz_raw(luv_array: ArrayFloat) -> ArrayFloat:
        """Raw Luv → XYZ (float64)."""
        return _luv_to_xyz_kernel(_as_float64(luv_array))

    @staticmethod
    def _luv_to_lch_raw(luv_array: ArrayFloat) -> ArrayFloat:
        """Raw Luv → LCh (float32)."""
        return _luv_to_lch_kernel(_as_float64(luv_array)).astype(LUV_DTYPE)

    @staticmethod
    def _lch_to_luv_raw(lch_array: ArrayFloat) -> ArrayFloat:
        """Raw LCh → Luv (float32)."""
        return _lch_to_luv_kernel(_as_float64(lch_array)).astype(LUV_DTYPE)

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    @handle_shapes
    def xyz_to_luv(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ (D65, Y of white = 1) to CIELUV.

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).

        Returns:
            Luv coordinates, float32.  Pixels with Y <= 0 are black.
        """
        return LuvEngine._xyz_to_luv_raw(xyz_array)

    @staticmethod
    @handle_shapes
    def luv_to_xyz(luv_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELUV to XYZ (D65).

        Round trips through XYZ are only accurate to floating point
        precision.

        Args:
            luv_array: Input Luv data, shape (N, 3) or (3,).

        Returns:
            XYZ coordinates, float64.  Pixels with L* <= 0 map to (0, 0, 0).
        """
        return LuvEngine._luv_to_xyz_raw(luv_array)

    @staticmethod
    @handle_shapes
    def luv_to_lch(luv_array: ArrayFloat) -> ArrayFloat:
        """
        Converts CIELUV to LCh(uv).

        Args:
            luv_array: Input Luv data, shape (N, 3) or (3,).

        Returns:
            LCh coordinates (L*, C*, h) with h in radians, float32.
        """
        return LuvEngine._luv_to_lch_raw(luv_array)

    @staticmethod
    @handle_shapes
    def lch_to_luv(lch_array: ArrayFloat) -> ArrayFloat:
        """
        Converts LCh(uv) to CIELUV.

        Args:
            lch_array: Input LCh data (h in radians, any real value),
                shape (N, 3) or (3,).

        Returns:
            Luv coordinates, float32.
        """
        return LuvEngine._lch_to_luv_raw(lch_array)

    # --- Convenience: sRGB <-> Luv/LCh ---

    @staticmethod
    @handle_shapes
    def srgb_to_luv(rgb_array: ArrayU8) -> ArrayFloat:
        """Direct conversion 8-bit sRGB -> CIELUV."""
        xyz = luv_srgb._xyz_from_u8_raw(luv_srgb.as_u8(rgb_array))
        return LuvEngine._xyz_to_luv_raw(xyz)

    @staticmethod
    @handle_shapes
    def luv_to_srgb(luv_array: ArrayFloat) -> ArrayU8:
        """Direct conversion CIELUV -> 8-bit sRGB (out-of-gamut clamps)."""
        xyz = LuvEngine._luv_to_xyz_raw(luv_array)
        return luv_srgb._u8_from_xyz_raw(xyz)

    @staticmethod
    @handle_shapes
    def srgb_to_lch(rgb_array: ArrayU8) -> ArrayFloat:
        """Direct conversion 8-bit sRGB -> LCh(uv)."""
        xyz = luv_srgb._xyz_from_u8_raw(luv_srgb.as_u8(rgb_array))
        return LuvEngine._luv_to_lch_raw(LuvEngine._xyz_to_luv_raw(xyz))

    @staticmethod
    @handle_shapes
    def lch_to_srgb(lch_array: ArrayFloat) -> ArrayU8:
        """Direct conversion LCh(uv) -> 8-bit sRGB (out-of-gamut clamps)."""
        luv = LuvEngine._lch_to_luv_raw(lch_array)
        return luv_srgb._u8_from_xyz_raw(LuvEngine._luv_to_xyz_raw(luv))

    @staticmethod
    @handle_shapes
    def srgb_normalized_to_luv(rgb_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion normalised sRGB [0..1] -> CIELUV."""
        xyz = luv_srgb._xyz_from_normalised_raw(rgb_array)
        return LuvEngine._xyz_to_luv_raw(xyz)

    @staticmethod
    @handle_shapes
    def luv_to_srgb_normalized(luv_array: ArrayFloat) -> ArrayFloat:
        """Direct conversion CIELUV -> normalised sRGB [0..1]."""
        xyz = LuvEngine._luv_to_xyz_raw(luv_array)
        return luv_srgb._normalised_from_xyz_raw(xyz)


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Luv Colour Engine Validation ---")

    # 1. Round-trip XYZ -> Luv -> XYZ
    print("1. Testing Round-Trip Stability (XYZ->Luv)...")
    xyz_in = np.random.rand(1000, 3)
    luv = LuvEngine.xyz_to_luv(xyz_in)
    xyz_out = LuvEngine.luv_to_xyz(luv)
    max_err = np.max(np.abs(xyz_in - xyz_out))
    # float32 storage of Luv bounds the achievable precision.
    print(f"   Max Error (XYZ->Luv->XYZ): {max_err:.2e} "
          f"{'[PASS]' if max_err < 1e-5 else '[FAIL]'}")

    # 2. 8-bit round trip
    print("2. Testing 8-bit Round-Trip...")
    rgb = np.random.randint(0, 256, size=(4096, 3), dtype=np.uint8)
    rgb_back = LuvEngine.luv_to_srgb(LuvEngine.srgb_to_luv(rgb))
    print(f"   Mismatched pixels: {np.count_nonzero(np.any(rgb != rgb_back, axis=1))} "
          f"{'[PASS]' if np.array_equal(rgb, rgb_back) else '[FAIL]'}")

    # 3. Shape Safety
    print("3. Testing Shape Safety...")
    try:
        LuvEngine.xyz_to_luv(np.zeros((10, 5)))
    except ValueError as e:
        print(f"   Caught expected error: {e}")
