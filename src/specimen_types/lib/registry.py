# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from collections.abc import Mapping, MutableMapping
from typing import Any

from ..types import Spec, load_spec, spec_tag
from .exceptions import SpecError
from .scheckbox import SCheckbox
from .scolor import SColor
from .sdatetime import SDatetime
from .sselect import SSelect
from .swysiwyg import SWysiwyg

Wrapper = SCheckbox | SColor | SDatetime | SSelect | SWysiwyg

__wrapper_classes__: dict[str, type[Wrapper]] = {
    "Checkbox": SCheckbox,
    "Color": SColor,
    "Datetime": SDatetime,
    "Select": SSelect,
    "Wysiwyg": SWysiwyg,
}


def register_wrapper(type_tag: str, wrapper_class: type[Any]) -> None:
    """Set the wrapper class used by wrap() for a spec type.

    Args:
        type_tag: the spec type, eg. "Select".
        wrapper_class: a class taking (spec, data).
    """
    __wrapper_classes__[type_tag] = wrapper_class


def wrap(spec: Spec | Mapping[str, Any], data: MutableMapping[str, Any]) -> Wrapper:
    """Create the wrapper matching the type of spec.

    Args:
        spec: a Spec or a spec mapping with a "type".
        data: the data mapping to wrap, mutated in place by the wrapper.

    Returns:
        An instance of the wrapper class registered for the spec type.
    """
    spec = load_spec(spec)
    tag = spec_tag(spec)
    wrapper_class = __wrapper_classes__.get(tag)
    if wrapper_class is None:
        raise SpecError(f"No wrapper for {tag} specs", spec_type=tag)
    return wrapper_class(spec, data)


# EOF
