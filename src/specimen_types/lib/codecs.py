# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

import math
from datetime import datetime
from typing import Any

import arrow
from coloraide import Color


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if math.isnan(value):
        return low
    return min(max(value, low), high)


def _number(value: float) -> str:
    """format 1.0 as "1" and 0.5 as "0.5" """
    return f"{round(value, 3):g}"


class ColoraideCodec:
    """
    Colour codec backed by coloraide.

    Any CSS colour string is accepted as input (hex, rgb(), hsl(), named
    colours); channels are taken in the sRGB space.
    """

    def normalize(self, value: str, format: str) -> dict[str, Any]:
        # coloraide raises ValueError on unparseable input
        color = Color(value).convert("srgb").fit()
        hsl = color.convert("hsl")

        r, g, b = (round(_clamp(color[i]) * 255) for i in range(3))
        a = _clamp(color[-1])
        # hue is undefined (NaN) for greys
        hue = 0.0 if math.isnan(hsl[0]) else hsl[0]

        channels: dict[str, Any] = {
            "h": round(hue) % 360,
            "s": round(_clamp(hsl[1]) * 100),
            "l": round(_clamp(hsl[2]) * 100),
            "a": round(a, 3),
            "r": r,
            "g": g,
            "b": b,
            "hex": color.to_string(hex=True, alpha=False),
            "hexa": color.to_string(hex=True, alpha=True),
            "format": format,
        }
        channels["value"] = self.format(channels, format)
        return channels

    def format(self, channels: dict[str, Any], format: str) -> str:
        r, g, b, a = channels["r"], channels["g"], channels["b"], channels["a"]
        h, s, l = channels["h"], channels["s"], channels["l"]

        if format == "hex":
            return channels["hex"]
        if format == "hexa":
            return channels["hexa"]
        if format == "rgb":
            return f"rgb({r},{g},{b})"
        if format == "rgba":
            return f"rgba({r},{g},{b},{_number(a)})"
        if format == "hsl":
            return f"hsl({h},{s}%,{l}%)"
        if format == "hsla":
            return f"hsla({h},{s}%,{l}%,{_number(a)})"
        raise ValueError(f"Unknown colour format: {format!r}")


class ArrowDateFormatter:
    """Date parsing and formatting with arrow's moment-style tokens."""

    ISO_FORMAT = "YYYY-MM-DD[T]HH:mm:ss.SSS[Z]"

    def parse(self, value: str, format: str) -> datetime:
        # arrow.parser.ParserError is a ValueError
        return arrow.get(value, format).datetime

    def format(self, date: datetime, format: str) -> str:
        return arrow.get(date).format(format)

    def from_iso(self, iso: str) -> datetime:
        return arrow.get(iso).datetime

    def to_iso(self, date: datetime) -> str:
        return arrow.get(date).to("UTC").format(self.ISO_FORMAT)

    def now(self) -> datetime:
        return arrow.utcnow().datetime


# EOF
