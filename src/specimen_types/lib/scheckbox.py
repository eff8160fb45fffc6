# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Any

from ..types import CheckboxSpec, OptionSpec
from .options import OptionsAccessor


class SCheckbox(OptionsAccessor):
    """
    Accessor over a checkbox spec and its data; any number of options can be
    checked at once.
    """

    spec_class = CheckboxSpec

    def is_checked(self, id_or_ref: Any) -> bool:
        return self._has(id_or_ref)

    def check(self, id_or_ref: Any) -> OptionSpec | str | None:
        return self._add(id_or_ref)

    def uncheck(self, id_or_ref: Any) -> OptionSpec | str | None:
        return self._remove(id_or_ref)

    def toggle(self, id_or_ref: Any) -> bool:
        if self.is_checked(id_or_ref):
            self.uncheck(id_or_ref)
        else:
            self.check(id_or_ref)
        return self.is_checked(id_or_ref)

    def get_checked(self) -> list[dict[str, Any]]:
        return self._entries()

    def get_checked_ids(self) -> list[Any]:
        return self._ids()


# EOF
