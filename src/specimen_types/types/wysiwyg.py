# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any

import msgspec

from .base import Spec, SpecData


class WysiwygNode(SpecData):
    """One node of a rich-text tree; children live under ``nodes``."""

    type: str
    text: str | None = None
    is_block: bool = False
    data: Any = None
    nodes: list[WysiwygNode] = msgspec.field(default_factory=list)


class WysiwygData(SpecData):
    value: WysiwygNode


class TypoEditorSpec(msgspec.Struct, kw_only=True, omit_defaults=True):
    style: Any = None


class TypoButtonSpec(msgspec.Struct, kw_only=True, omit_defaults=True):
    label: str | None = None
    style: Any = None


class TypoSpec(msgspec.Struct, kw_only=True, omit_defaults=True):
    label: str | None = None
    style: Any = None
    group: str | None = None
    button: TypoButtonSpec | None = None
    editor: TypoEditorSpec | None = None


class WysiwygSpec(Spec, tag="Wysiwyg"):
    min: int | None = None
    max: int | None = None
    frontspec: bool = False
    typo: dict[str, TypoSpec] = msgspec.field(default_factory=dict)


# EOF
