# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


# option and value entries come either as structures carrying an "id" or,
# for legacy plain-string lists, as the bare id itself

from collections.abc import Mapping
from typing import Any


def resolve_id(id_or_ref: Any) -> Any:
    """
    Return the id carried by id_or_ref.

    :param id_or_ref: a bare id, a mapping with an "id" key, or an object
        with a non-None ``id`` attribute (eg. OptionSpec, ValueEntry)
    :return: the id, or id_or_ref itself when it carries none
    """
    if isinstance(id_or_ref, Mapping):
        if "id" in id_or_ref:
            return id_or_ref["id"]
        return id_or_ref
    ident = getattr(id_or_ref, "id", None)
    if ident is not None:
        return ident
    return id_or_ref


# stored entries and spec options follow the same rule
entry_id = resolve_id
option_key = resolve_id


def entry_value(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        return entry.get("value")
    if isinstance(entry, str):
        return entry
    return getattr(entry, "value", None)


option_value = entry_value


# EOF
