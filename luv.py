# -*- coding: utf-8 -*-
"""
Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Public entry point.

sRGB colours are 8-bit triples (0..255), while L*u*v* and LCh(uv) colours
are the ``Luv`` and ``LCh`` value types with single precision components.
The D65 reference white is assumed throughout.

Converting single values::

    >>> import luv
    >>> pink = luv.Luv.from_rgb((253, 120, 138))
    >>> pink.to_rgb()
    (253, 120, 138)

Converting many values::

    >>> luvs = luv.rgbs_to_luvs([(0xFF, 0x69, 0xB6), (0xE7, 0x00, 0x00)])
    >>> luvs = luv.rgb_bytes_to_luvs(bytes([0xFF, 0x69, 0xB6, 0xE7, 0x00, 0x00]))

Image buffers can go straight through ``LuvEngine`` as (N, 3) arrays.
Approximate comparisons live in the optional ``luv_approx`` module.
"""

from luv_about import __version__
from luv_batch import (
    lchs_to_rgbs,
    luvs_to_rgb_bytes,
    luvs_to_rgbs,
    rgb_bytes_to_luvs,
    rgbs_to_lchs,
    rgbs_to_luvs,
)
from luv_colorengine import LuvEngine
from luv_types import LCh, Luv, luv_from_xyz, xyz_from_luv

__all__ = [
    "__version__",
    "Luv",
    "LCh",
    "LuvEngine",
    "luv_from_xyz",
    "xyz_from_luv",
    "rgbs_to_luvs",
    "luvs_to_rgbs",
    "rgb_bytes_to_luvs",
    "luvs_to_rgb_bytes",
    "rgbs_to_lchs",
    "lchs_to_rgbs",
]
