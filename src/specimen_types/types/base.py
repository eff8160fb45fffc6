# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


# base structures for field specs and their data; specs are tagged on the
# "type" field so that a plain mapping can be decoded into the right class

from typing import Any

import msgspec


class Spec(msgspec.Struct, kw_only=True, omit_defaults=True, tag_field="type"):
    """
    Common configuration shared by every field kind.

    Concrete specs subclass this with their own tag, eg. ``SelectSpec`` is
    tagged ``"Select"`` and decodes from ``{"type": "Select", ...}``.
    """

    title: str = ""
    description: str = ""
    default: Any = None
    required: bool = False
    responsive: bool = False

    @classmethod
    def type_tag(cls) -> str:
        return cls.__struct_config__.tag


class SpecData(msgspec.Struct, kw_only=True, omit_defaults=True, rename="camel"):
    """Base of the data shapes; wire names are camelCase (isBlock, newWindow)."""


def spec_tag(spec: Spec) -> str:
    return type(spec).type_tag()


# EOF
