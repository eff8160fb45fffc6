# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from .base import Spec, SpecData


class BooleanSpec(Spec, tag="Boolean"):
    pass


class BooleanData(SpecData):
    value: bool = False


class SwitchSpec(Spec, tag="Switch"):
    pass


class SwitchData(SpecData):
    value: bool = False


class IntegerSpec(Spec, tag="Integer"):
    min: int | None = None
    max: int | None = None
    placeholder: str | None = None


class IntegerData(SpecData):
    # form inputs deliver integers as text as well
    value: int | str | None = None


class NumberSpec(Spec, tag="Number"):
    min: float | None = None
    max: float | None = None


class NumberData(SpecData):
    value: float | None = None


class StringSpec(Spec, tag="String"):
    min: int | None = None
    max: int | None = None


class StringData(SpecData):
    value: str = ""


class LinkSpec(Spec, tag="Link"):
    pass


class LinkData(SpecData):
    text: str = ""
    url: str = ""
    title: str | None = None
    new_window: bool = False


# EOF
