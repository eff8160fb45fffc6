# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from collections.abc import MutableMapping
from typing import Any

from ..config.app import settings
from ..types import ColorSpec, as_spec
from .codecs import ColoraideCodec
from .protocols import ColorCodecP


class SColor:
    """
    Accessor over a colour spec and its data.

    The constructor fills missing ``value``/``format`` from the spec, then
    merges the parsed channels (h, s, l, a, r, g, b, hex, hexa) into the data
    without overwriting keys the caller already set.
    """

    codec: ColorCodecP = ColoraideCodec()

    def __init__(
        self,
        spec: ColorSpec | dict[str, Any],
        data: MutableMapping[str, Any],
        codec: ColorCodecP | None = None,
    ):
        self._spec = as_spec(spec, ColorSpec)
        self._data = data
        if codec is not None:
            self.codec = codec

        # default value
        if not data.get("value") and self._spec.default:
            data["value"] = self._spec.default
        if not data.get("format"):
            data["format"] = self.spec_format

        if not data.get("value"):
            raise ValueError("Colour data has no value and the spec no default")

        self._channels = self.codec.normalize(data["value"], self.spec_format)

        # set the values
        for key, val in self._channels.items():
            data.setdefault(key, val)

    @property
    def spec_format(self) -> str:
        return self._spec.format or settings.COLOR_FORMAT

    @property
    def channels(self) -> dict[str, Any]:
        return dict(self._channels)

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    def to_string(self, format: str | None = None) -> str:
        return self.codec.format(self._channels, format or self.spec_format)

    def __str__(self) -> str:
        return self.to_string()


# EOF
