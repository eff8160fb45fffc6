# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any

from ..types import OptionSpec, SelectSpec
from .options import OptionsAccessor


class SSelect(OptionsAccessor):
    """
    Accessor over a select spec and its data.

    Example:
        select = SSelect(spec, data)
        select.select("option-2")
        select.is_selected("option-2")
        select.get_selected_ids()

    A single select (``multiple`` false) keeps at most one entry: each
    select replaces the whole value list.
    """

    spec_class = SelectSpec

    def is_multiple(self) -> bool:
        return bool(self._spec.multiple)

    def is_selected(self, id_or_ref: Any) -> bool:
        return self._has(id_or_ref)

    def select(self, id_or_ref: Any) -> OptionSpec | str | None:
        """
        Select the option with the given id.

        :param id_or_ref: an option id or anything carrying one
        :return: the matched option, None if the spec has no such option
        """
        return self._add(id_or_ref)

    def unselect(self, id_or_ref: Any) -> OptionSpec | str | None:
        """
        Remove the option from the selection.

        :return: the option, None if it was not selected
        """
        return self._remove(id_or_ref)

    def toggle(self, id_or_ref: Any) -> bool:
        if self.is_selected(id_or_ref):
            self.unselect(id_or_ref)
        else:
            self.select(id_or_ref)
        return self.is_selected(id_or_ref)

    def get_selected(self) -> list[dict[str, Any]]:
        return self._entries()

    def get_selected_ids(self) -> list[Any]:
        return self._ids()


# EOF
