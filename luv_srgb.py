# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

sRGB <-> XYZ Primitives
=======================
The gamma and matrix layer underneath the L*u*v* engine.  Everything here
exchanges XYZ tristimulus values normalised so that the D65 white has Y = 1.

Two input flavours are supported:
    - 8-bit sRGB (``uint8`` in 0..255), expanded through a lookup table.
    - Normalised sRGB floats in [0, 1], expanded through the EOTF kernel.

The sRGB -> XYZ matrix is derived from the Rec. 709 primaries and the D65
chromaticity rather than copied from a rounded table.  Its row sums therefore
equal ``D65_XYZ`` to machine precision, which keeps greys on the achromatic
axis after the L*u*v* transform.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - ITU-R BT.709-6 (primaries)
"""

import functools
import numpy as np
import numpy.typing
from numba import njit
from typing import Final, TypeAlias, Callable, Any

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "ArrayU8",

    # --- Constants ---
    "SRGB_PRIMARIES_XY",
    "D65_XY",
    "D65_XYZ",
    "M_SRGB_TO_XYZ_T",
    "M_XYZ_TO_SRGB_T",

    # --- Decorators ---
    "handle_shapes",

    # --- Functions ---
    "as_u8",
    "xyz_from_u8",
    "u8_from_xyz",
    "xyz_from_normalised",
    "normalised_from_xyz",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]
ArrayU8: TypeAlias = np.typing.NDArray[np.uint8]

# --- Constants ---

# CIE 1931 xy chromaticities of the sRGB (Rec. 709) primaries R, G, B.
SRGB_PRIMARIES_XY: Final[ArrayFloat] = np.array([
    [0.64, 0.33],
    [0.30, 0.60],
    [0.15, 0.06],
], dtype=np.float64)

# D65 chromaticity to six digits (CIE 15:2004, Table T.3).
D65_XY: Final[ArrayFloat] = np.array([0.312713, 0.329016], dtype=np.float64)

def _xy_to_xyz(xy: ArrayFloat) -> ArrayFloat:
    """Lifts xy chromaticities to XYZ with Y = 1."""
    x, y = xy[..., 0], xy[..., 1]
    return np.stack([x / y, np.ones_like(x), (1.0 - x - y) / y], axis=-1)

D65_XYZ: Final[ArrayFloat] = _xy_to_xyz(D65_XY)

# Columns are the XYZ of each primary, scaled so that R = G = B = 1 hits white.
_PRIMARIES_XYZ = _xy_to_xyz(SRGB_PRIMARIES_XY).T
_PRIMARY_SCALE = np.linalg.solve(_PRIMARIES_XYZ, D65_XYZ)
_M_SRGB_TO_XYZ_BASE = _PRIMARIES_XYZ * _PRIMARY_SCALE

# Pre-transposed for row-vector pixels: xyz = rgb @ M_T
M_SRGB_TO_XYZ_T: Final[ArrayFloat] = _M_SRGB_TO_XYZ_BASE.T.copy()
M_XYZ_TO_SRGB_T: Final[ArrayFloat] = np.linalg.inv(_M_SRGB_TO_XYZ_BASE).T.copy()


# =============================================================================
# 1. SHAPE HANDLING
# =============================================================================

def handle_shapes(func: Callable[..., np.ndarray]) -> Callable[..., np.ndarray]:
    """
    Decorator to normalize inputs to (N, 3) and safeguard shape.

    Lists and tuples are accepted and converted with ``np.asarray``; the
    dtype of array input is preserved so that ``uint8`` pixels stay bytes.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns (3,)
        - If input is (N, 3), returns (N, 3)
    """
    @functools.wraps(func)
    def wrapper(arr: Any, *args: Any, **kwargs: Any) -> np.ndarray:
        arr = np.asarray(arr)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ValueError(
                f"{func.__name__}: expected shape (3,) or (N, 3), got {arr.shape}"
            )

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper

def as_u8(rgb: np.ndarray) -> ArrayU8:
    """
    Validates 8-bit sRGB components and returns them as ``uint8``.

    Raises:
        ValueError: If the dtype is not integral or a component lies outside
            0..255.
    """
    rgb = np.asarray(rgb)
    if rgb.dtype == np.uint8:
        return rgb
    if rgb.size == 0:
        return rgb.astype(np.uint8)
    if rgb.dtype.kind not in "iu":
        raise ValueError(f"Expected integer sRGB components, got dtype {rgb.dtype}")
    if rgb.min() < 0 or rgb.max() > 255:
        raise ValueError(
            f"sRGB components must lie in 0..255, got range "
            f"[{rgb.min()}, {rgb.max()}]"
        )
    return rgb.astype(np.uint8)


# =============================================================================
# 2. TRANSFER FUNCTION KERNELS (Numba Optimized)
# =============================================================================

# NOTE: No fastmath in the transfer functions.  Every caller gets the same
# bits for the same input, whichever path (bytes, floats, batch) it takes.

@njit(cache=True)
def _gamma_srgb(linear: ArrayFloat) -> ArrayFloat:
    """
    Applies the sRGB OETF (linear light -> gamma encoded).

    Standard: IEC 61966-2-1
    """
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()

    for i in range(linear.size):
        v = linear_flat[i]
        if v <= 0.0031308:
            out_flat[i] = 12.92 * v
        else:
            out_flat[i] = 1.055 * v ** (1.0 / 2.4) - 0.055
    return out

@njit(cache=True)
def _inverse_gamma_srgb(srgb: ArrayFloat) -> ArrayFloat:
    """Applies the sRGB EOTF (gamma encoded -> linear light)."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()

    for i in range(srgb.size):
        v = srgb_flat[i]
        out_flat[i] = v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4
    return out

# Linear-light value of every 8-bit code.
_U8_TO_LINEAR: Final[ArrayFloat] = _inverse_gamma_srgb(
    np.arange(256, dtype=np.float64) / 255.0
)


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def _xyz_from_u8_raw(rgb_array: ArrayU8) -> ArrayFloat:
    """Raw u8 sRGB → XYZ.  *rgb_array* must be validated (N, 3) uint8."""
    return np.dot(_U8_TO_LINEAR[rgb_array], M_SRGB_TO_XYZ_T)

def _u8_from_xyz_raw(xyz_array: ArrayFloat) -> ArrayU8:
    """Raw XYZ → u8 sRGB.  *xyz_array* must be (N, 3) float64."""
    srgb = _normalised_from_xyz_raw(xyz_array)
    return np.floor(srgb * 255.0 + 0.5).astype(np.uint8)

def _xyz_from_normalised_raw(rgb_array: ArrayFloat) -> ArrayFloat:
    """Raw normalised sRGB → XYZ.  *rgb_array* must be (N, 3)."""
    rgb = np.clip(rgb_array.astype(np.float64), 0.0, 1.0)
    return np.dot(_inverse_gamma_srgb(rgb), M_SRGB_TO_XYZ_T)

def _normalised_from_xyz_raw(xyz_array: ArrayFloat) -> ArrayFloat:
    """Raw XYZ → normalised sRGB.  Out-of-gamut values are clipped."""
    linear = np.dot(xyz_array, M_XYZ_TO_SRGB_T)
    # NaN (degenerate chromaticity) collapses to black, inf saturates.
    linear = np.clip(np.nan_to_num(linear, nan=0.0), 0.0, 1.0)
    return _gamma_srgb(linear)

@handle_shapes
def xyz_from_u8(rgb_array: np.ndarray) -> ArrayFloat:
    """
    Converts 8-bit sRGB to XYZ (D65, Y of white = 1).

    Args:
        rgb_array: Integer sRGB data in 0..255, shape (N, 3) or (3,).

    Returns:
        XYZ coordinates, float64.
    """
    return _xyz_from_u8_raw(as_u8(rgb_array))

@handle_shapes
def u8_from_xyz(xyz_array: ArrayFloat) -> ArrayU8:
    """
    Converts XYZ (D65) to 8-bit sRGB.

    Linear RGB is clipped to [0, 1] before gamma encoding and the result is
    rounded half-up, so out-of-gamut colours clamp silently.

    Args:
        xyz_array: Input XYZ data, shape (N, 3) or (3,).

    Returns:
        sRGB bytes, uint8.
    """
    return _u8_from_xyz_raw(xyz_array.astype(np.float64))

@handle_shapes
def xyz_from_normalised(rgb_array: ArrayFloat) -> ArrayFloat:
    """
    Converts normalised sRGB [0..1] to XYZ (D65).

    Args:
        rgb_array: Input sRGB data, shape (N, 3) or (3,).  Values are clamped
            to [0, 1].

    Returns:
        XYZ coordinates, float64.
    """
    return _xyz_from_normalised_raw(rgb_array)

@handle_shapes
def normalised_from_xyz(xyz_array: ArrayFloat) -> ArrayFloat:
    """
    Converts XYZ (D65) to normalised sRGB [0..1].

    Args:
        xyz_array: Input XYZ data, shape (N, 3) or (3,).

    Returns:
        Gamma-encoded sRGB in [0, 1], float64.
    """
    return _normalised_from_xyz_raw(xyz_array.astype(np.float64))
