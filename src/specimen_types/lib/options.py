# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from collections.abc import MutableMapping
from typing import Any, ClassVar

from ..config.app import logger
from ..types import OptionSpec, Spec, as_spec
from .ids import entry_id, entry_value, option_key, option_value, resolve_id


class OptionsAccessor:
    """
    Base of the wrappers over a spec with ``options`` and a data mapping whose
    ``value`` lists the chosen options as ``{"id": ..., "value": ...}``.

    The data mapping is owned by the caller and mutated in place.
    """

    spec_class: ClassVar[type[Spec]]

    def __init__(self, spec: Spec | dict[str, Any], data: MutableMapping[str, Any]):
        self._spec = as_spec(spec, self.spec_class)
        self._data = data

        # data structure
        if not isinstance(data.get("value"), list):
            data["value"] = []

        # default value, a list of ids is accepted for multiple choices
        default = self._spec.default
        if not data["value"] and default:
            for item in default if isinstance(default, list) else [default]:
                self._add(item)

    @property
    def spec(self) -> Spec:
        return self._spec

    @property
    def data(self) -> MutableMapping[str, Any]:
        return self._data

    def is_multiple(self) -> bool:
        return True

    # internal mutations shared by select/check and unselect/uncheck

    def _has(self, id_or_ref: Any) -> bool:
        return resolve_id(id_or_ref) in self._ids()

    def _add(self, id_or_ref: Any) -> OptionSpec | str | None:
        ident = resolve_id(id_or_ref)
        option = self.get_option(ident)
        if option is None:
            logger.debug("%s: no option with id %r", self.__class__.__name__, ident)
            return None
        if self._has(ident):
            logger.debug("%s: id %r is already in value", self.__class__.__name__, ident)
            return option

        entry = {"id": ident, "value": option_value(option)}
        if self.is_multiple():
            self._data["value"].append(entry)
        else:
            self._data["value"] = [entry]
        return option

    def _remove(self, id_or_ref: Any) -> OptionSpec | str | None:
        ident = resolve_id(id_or_ref)
        idx = self.get_value_idx(ident)
        if idx == -1:
            logger.debug("%s: id %r is not in value", self.__class__.__name__, ident)
            return None
        del self._data["value"][idx]
        return self.get_option(ident)

    def _entries(self) -> list[dict[str, Any]]:
        return [
            {"id": entry_id(item), "value": entry_value(item)}
            for item in self._data["value"]
        ]

    def _ids(self) -> list[Any]:
        return [entry_id(item) for item in self._data["value"]]

    # public accessors

    def is_empty(self) -> bool:
        return len(self._ids()) == 0

    def get_option(self, id_or_ref: Any) -> OptionSpec | str | None:
        idx = self.get_option_idx(id_or_ref)
        if idx == -1:
            return None
        return self._spec.options[idx]

    def get_option_idx(self, id_or_ref: Any) -> int:
        ident = resolve_id(id_or_ref)
        for i, option in enumerate(self._spec.options):
            if ident == option_key(option):
                return i
        return -1

    def get_value(self, id_or_ref: Any) -> dict[str, Any] | str | None:
        idx = self.get_value_idx(id_or_ref)
        if idx == -1:
            return None
        return self._data["value"][idx]

    def get_value_idx(self, id_or_ref: Any) -> int:
        ident = resolve_id(id_or_ref)
        for i, item in enumerate(self._data["value"]):
            if ident == entry_id(item):
                return i
        return -1


# EOF
