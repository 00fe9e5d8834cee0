"""Shared reference colours for the test suite.

Each row lists the same colour as 8-bit sRGB, XYZ (D65, Y of white = 1),
L*u*v* and LCh(uv).  The XYZ, L*u*v* and LCh values were produced by a
single-precision implementation, so comparisons against them use a
tolerance; the sRGB column round-trips exactly.
"""

from dataclasses import dataclass
from typing import List, Tuple

import pytest

from luv_types import LCh, Luv


@dataclass(frozen=True)
class ReferenceCases:
    rgb: List[Tuple[int, int, int]]
    xyz: List[Tuple[float, float, float]]
    luv: List[Luv]
    lch: List[LCh]

    def rgb_bytes(self) -> bytes:
        return bytes(c for rgb in self.rgb for c in rgb)


CASES = ReferenceCases(
    rgb=[
        (253, 120, 138),
        (127, 0, 0),
        (0, 127, 0),
        (0, 0, 127),
        (0, 127, 127),
        (127, 0, 127),
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (0, 255, 255),
        (255, 0, 255),
        (255, 255, 0),
        (0, 0, 0),
        (64, 64, 64),
        (127, 127, 127),
        (196, 196, 196),
        (255, 255, 255),
    ],
    xyz=[
        (0.5181153, 0.36154357, 0.2829196),
        (0.08752622, 0.045130707, 0.004102787),
        (0.07589042, 0.15178084, 0.025296807),
        (0.038297836, 0.015319134, 0.20170195),
        (0.11418824, 0.16709997, 0.22699866),
        (0.1258241, 0.060449857, 0.20580474),
        (0.4124108, 0.21264932, 0.019331753),
        (0.35758454, 0.71516913, 0.11919485),
        (0.18045378, 0.072181515, 0.9503897),
        (0.5380384, 0.7873506, 1.0695845),
        (0.59286475, 0.28483093, 0.9697217),
        (0.76999545, 0.92781854, 0.13852677),
        (0.0, 0.0, 0.0),
        (0.04872901, 0.051269446, 0.055828184),
        (0.20171452, 0.21223073, 0.23110169),
        (0.52465874, 0.5520114, 0.6010947),
        (0.95044917, 1.0, 1.0889173),
    ],
    luv=[
        Luv(66.637695, 93.02938, 9.430316),
        Luv(25.299875, 83.16892, 17.94366),
        Luv(45.87715, -43.437836, 56.162983),
        Luv(12.809523, -3.7292058, -51.694935),
        Luv(47.892532, -37.04091, -7.9915605),
        Luv(29.525677, 41.14607, -53.19983),
        Luv(53.238235, 175.01141, 37.758636),
        Luv(87.73554, -83.07059, 107.40619),
        Luv(32.298466, -9.40297, -130.34576),
        Luv(91.11428, -70.46933, -15.2037325),
        Luv(60.32269, 84.06383, -108.690346),
        Luv(97.139, 7.7040625, 106.79492),
        Luv(0.0, 0.0, 0.0),
        Luv(27.09341, 0.0, -0.0000052484024),
        Luv(53.192772, 0.0, -0.000010304243),
        Luv(79.15698, -0.000015333902, -0.000015333902),
        Luv(100.0, 0.0, -0.00001937151),
    ],
    lch=[
        LCh(66.637695, 93.506134, 0.101024136),
        LCh(25.299875, 85.08257, 0.21249253),
        LCh(45.87715, 71.00089, 2.2291214),
        LCh(12.809523, 51.82927, -1.6428102),
        LCh(47.892532, 37.893192, -2.9291),
        LCh(29.525677, 67.25489, -0.9124711),
        LCh(53.238235, 179.03828, 0.2124925),
        LCh(87.73554, 135.78223, 2.2291214),
        LCh(32.298466, 130.68448, -1.6428102),
        LCh(91.11428, 72.090775, -2.9291),
        LCh(60.32269, 137.40567, -0.91247106),
        LCh(97.139, 107.07244, 1.4987823),
        LCh(0.0, 0.0, 0.0),
        LCh(27.09341, 0.0000052484024, -1.5707964),
        LCh(53.192772, 0.000010304243, -1.5707964),
        LCh(79.15698, 0.000021685413, -2.3561945),
        LCh(100.0, 0.00001937151, -1.5707964),
    ],
)


@pytest.fixture
def cases() -> ReferenceCases:
    return CASES

