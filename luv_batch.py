# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Serial batch conversions between sequences of sRGB pixels and colour values.

Each helper packs its input into one (N, 3) array, runs the ``LuvEngine``
pipeline once and unpacks the rows.  Output order and length always match
the input.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Union

import numpy as np

from luv_colorengine import LUV_DTYPE, LuvEngine
from luv_types import RGB, LCh, Luv

__all__ = [
    "rgbs_to_luvs",
    "luvs_to_rgbs",
    "rgb_bytes_to_luvs",
    "luvs_to_rgb_bytes",
    "rgbs_to_lchs",
    "lchs_to_rgbs",
]

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray]


def _pack_rgbs(rgbs: Sequence[Sequence[int]]) -> np.ndarray:
    arr = np.asarray(rgbs)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected a sequence of RGB triples, got shape {arr.shape}")
    return arr

def _pack_values(values: Iterable[Union[Luv, LCh]], kind: type) -> np.ndarray:
    rows = []
    for value in values:
        if not isinstance(value, kind):
            raise TypeError(
                f"Expected {kind.__name__} values, got {type(value).__name__}"
            )
        rows.append(value.to_array())
    return np.array(rows, dtype=LUV_DTYPE).reshape(-1, 3)

def _unpack_rgbs(arr: np.ndarray) -> List[RGB]:
    return [tuple(row) for row in arr.tolist()]


def rgbs_to_luvs(rgbs: Sequence[Sequence[int]]) -> List[Luv]:
    """
    Converts a sequence of 8-bit sRGB triples to ``Luv`` values.

    Examples:
        >>> rgbs_to_luvs([(255, 0, 0), (255, 0, 255), (0, 255, 255)])  # doctest: +SKIP
        [Luv(l=53.238..., u=175.011..., v=37.758...),
         Luv(l=60.322..., u=84.063..., v=-108.690...),
         Luv(l=91.114..., u=-70.469..., v=-15.203...)]
    """
    if len(rgbs) == 0:
        return []
    logger.debug("Converting %d sRGB triples to Luv", len(rgbs))
    luvs = LuvEngine.srgb_to_luv(_pack_rgbs(rgbs))
    return [Luv.from_array(row) for row in luvs]


def rgb_bytes_to_luvs(data: BytesLike) -> List[Luv]:
    """
    Converts a flat buffer of consecutive R, G, B bytes to ``Luv`` values.

    Args:
        data: bytes-like object, sequence of ints in 0..255 or 1-D array.
            Its length must be a multiple of 3.

    Raises:
        ValueError: If the length is not a multiple of 3.  Trailing bytes are
            never dropped silently.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(data, dtype=np.uint8)
    else:
        flat = np.asarray(data).ravel()

    if flat.size % 3 != 0:
        raise ValueError(
            f"rgb_bytes_to_luvs: byte length must be a multiple of 3, got {flat.size}"
        )
    if flat.size == 0:
        return []
    return rgbs_to_luvs(flat.reshape(-1, 3))


def luvs_to_rgbs(luvs: Sequence[Luv]) -> List[RGB]:
    """
    Converts a sequence of ``Luv`` values to 8-bit sRGB triples.

    Out-of-gamut colours are clamped.

    Raises:
        TypeError: If an element is not a ``Luv``.
    """
    if len(luvs) == 0:
        return []
    logger.debug("Converting %d Luv values to sRGB", len(luvs))
    return _unpack_rgbs(LuvEngine.luv_to_srgb(_pack_values(luvs, Luv)))


def luvs_to_rgb_bytes(luvs: Sequence[Luv]) -> bytes:
    """Converts ``Luv`` values to a flat buffer of consecutive R, G, B bytes."""
    if len(luvs) == 0:
        return b""
    return LuvEngine.luv_to_srgb(_pack_values(luvs, Luv)).tobytes()


def rgbs_to_lchs(rgbs: Sequence[Sequence[int]]) -> List[LCh]:
    """Converts a sequence of 8-bit sRGB triples to ``LCh`` values."""
    if len(rgbs) == 0:
        return []
    logger.debug("Converting %d sRGB triples to LCh", len(rgbs))
    lchs = LuvEngine.srgb_to_lch(_pack_rgbs(rgbs))
    return [LCh.from_array(row) for row in lchs]


def lchs_to_rgbs(lchs: Sequence[LCh]) -> List[RGB]:
    """Converts a sequence of ``LCh`` values to 8-bit sRGB triples."""
    if len(lchs) == 0:
        return []
    logger.debug("Converting %d LCh values to sRGB", len(lchs))
    return _unpack_rgbs(LuvEngine.lch_to_srgb(_pack_values(lchs, LCh)))
