# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Literal

from .base import Spec, SpecData

ColorFormat = Literal["hex", "hexa", "hsl", "hsla", "rgb", "rgba"]

COLOR_FORMATS: tuple[str, ...] = ("hex", "hexa", "hsl", "hsla", "rgb", "rgba")


class ColorSpec(Spec, tag="Color"):
    # None falls back to the configured default format
    format: ColorFormat | None = None


class ColorData(SpecData):
    """
    A colour value together with its channels.

    ``h`` is in degrees, ``s`` and ``l`` in percent, ``r``, ``g`` and ``b``
    in 0-255 and ``a`` in 0-1.
    """

    h: float | None = None
    s: float | None = None
    l: float | None = None
    a: float | None = None
    r: float | None = None
    g: float | None = None
    b: float | None = None
    hex: str | None = None
    hexa: str | None = None
    format: ColorFormat | None = None
    value: str | None = None


# EOF
