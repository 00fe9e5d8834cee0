# -*- coding: utf-8 -*-
# Luv: Perceptual colour conversions between sRGB, CIE L*u*v* and LCh(uv).
#
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Project metadata for the opticsWolf Luv colour engine.
"""

from typing import Final

# Metadata Definitions
__title__: Final[str] = "Luv"
__description__: Final[str] = (
    "Conversions between sRGB, CIE L*u*v* and LCh(uv) colour spaces "
    "with perceptual equality and colour-difference helpers."
)
__version__: Final[str] = "0.9.2"
__author__: Final[str] = "opticsWolf"
__license__: Final[str] = "LGPL-3.0-or-later"
__copyright__: Final[str] = "Copyright (c) 2026 opticsWolf"

def metadata_summary() -> dict[str, str]:
    """Returns a dictionary of project metadata for introspection."""
    return {
        "title": __title__,
        "version": __version__,
        "license": __license__,
        "description": __description__,
        "copyright": __copyright__,
    }
