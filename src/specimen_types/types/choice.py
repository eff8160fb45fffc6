# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any

import msgspec

from .base import Spec, SpecData


class OptionSpec(msgspec.Struct, kw_only=True, omit_defaults=True):
    """One selectable entry of a select or checkbox spec."""

    id: str | None = None
    name: str = ""
    value: Any = None


class ValueEntry(msgspec.Struct, kw_only=True, omit_defaults=True):
    """One selected or checked option as stored in the data."""

    id: str
    value: Any = None


class SelectSpec(Spec, tag="Select"):
    # plain strings are accepted for legacy option lists, the string is the id
    options: list[OptionSpec | str] = msgspec.field(default_factory=list)
    min: int | None = None
    max: int | None = None
    multiple: bool = False


class SelectData(SpecData):
    value: list[ValueEntry | str] = msgspec.field(default_factory=list)


class CheckboxSpec(Spec, tag="Checkbox"):
    options: list[OptionSpec | str] = msgspec.field(default_factory=list)
    min: int | None = None
    max: int | None = None


class CheckboxData(SpecData):
    value: list[ValueEntry | str] = msgspec.field(default_factory=list)


class SpacesOptionSpec(msgspec.Struct, kw_only=True, omit_defaults=True):
    id: str
    name: str = ""
    value: str = ""


class SpacesSpec(Spec, tag="Spaces"):
    options: list[SpacesOptionSpec] = msgspec.field(default_factory=list)


class SpacesMediaData(SpecData):
    """Spacing of one media, eg. ``{"paddingTop": "20px"}`` or ``{"paddingRight": 20}``."""

    padding_top: str | float | None = None
    padding_right: str | float | None = None
    padding_bottom: str | float | None = None
    padding_left: str | float | None = None
    margin_top: str | float | None = None
    margin_right: str | float | None = None
    margin_bottom: str | float | None = None
    margin_left: str | float | None = None


class SpacesData(SpecData):
    # keyed by media name or media query, eg. "mobile" or "(max-width: 799px)"
    media: dict[str, SpacesMediaData] = msgspec.field(default_factory=dict)


# EOF
