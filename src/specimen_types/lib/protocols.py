# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


# this module defines the capabilities the wrappers delegate colour and date
# handling to, so that the parsing libraries can be swapped per wrapper

from datetime import datetime
from typing import Any, Protocol


class ColorCodecP(Protocol):
    """
    This class parses a colour string into channels and encodes channels back
    """

    def normalize(self, value: str, format: str) -> dict[str, Any]:
        """
        Return the channels of value (h, s, l, a, r, g, b, hex, hexa) together
        with the given format and value re-encoded in it
        """

    def format(self, channels: dict[str, Any], format: str) -> str: ...


class DateFormatterP(Protocol):
    """
    This class parses and formats dates with token formats such as YYYY-MM-DD
    """

    def parse(self, value: str, format: str) -> datetime: ...

    def format(self, date: datetime, format: str) -> str: ...

    def from_iso(self, iso: str) -> datetime: ...

    def to_iso(self, date: datetime) -> str:
        """
        Return the UTC instant of date as 2011-10-05T14:48:00.000Z
        """

    def now(self) -> datetime: ...


# EOF
