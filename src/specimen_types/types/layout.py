# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any, Literal

import msgspec

from .base import Spec, SpecData


class LayoutEntry(msgspec.Struct, kw_only=True, omit_defaults=True):
    """A named grid layout, eg. ``{"id": "1-2", "layout": "1 2"}``."""

    id: str
    layout: str


class LayoutSpec(Spec, tag="Layout"):
    layouts: list[LayoutEntry] = msgspec.field(default_factory=list)
    custom: bool = False


class LayoutData(SpecData):
    layout: LayoutEntry | None = None
    media: dict[str, LayoutEntry] = msgspec.field(default_factory=dict)
    cells: list[str] = msgspec.field(default_factory=list)
    id: str | None = None
    frontspec: Any = None
    gap: str | None = None


class PageNode(SpecData):
    uid: str | None = None
    type: Literal["root", "container", "component"] = "container"
    nodes: dict[str, PageNode] | list[PageNode] = msgspec.field(default_factory=list)


class Page(PageNode):
    uid: str
    type: Literal["root", "container", "component"] = "root"
    scope: str | None = None  # "user", "repo" or a custom scope
    name: str | None = None
    slug: str | list[str] | None = None
    layout: str = ""


# EOF
