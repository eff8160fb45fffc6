# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any

import msgspec

from .base import Spec, SpecData


class DatetimeSpec(Spec, tag="Datetime"):
    """
    Datetime field configuration.

    ``format`` uses moment-style tokens (``YYYY-MM-DD``, ``HH:mm:ss``).
    ``disabled`` mixes ISO instants, ``date``/``datetime`` objects, years,
    lowercase month and weekday names, and the literals ``"week"`` and
    ``"weekend"``.
    """

    format: str | None = None
    calendar: bool = False
    min: str | None = None
    max: str | None = None
    disabled: list[Any] = msgspec.field(default_factory=list)
    placeholder: str | None = None


class DatetimeData(SpecData):
    iso: str | None = None  # 2011-10-05T14:48:00.000Z
    value: str | None = None  # 2023-10-23
    format: str | None = None  # YYYY-MM-DD


# EOF
