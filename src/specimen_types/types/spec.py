# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

import msgspec
import yaml

from ..lib.exceptions import DataError, SpecError
from .base import Spec, spec_tag
from .choice import (
    CheckboxData,
    CheckboxSpec,
    SelectData,
    SelectSpec,
    SpacesData,
    SpacesSpec,
)
from .color import ColorData, ColorSpec
from .dates import DatetimeData, DatetimeSpec
from .layout import LayoutData, LayoutSpec
from .media import ImageData, ImageSpec, VideoData, VideoSpec
from .scalar import (
    BooleanData,
    BooleanSpec,
    IntegerData,
    IntegerSpec,
    LinkData,
    LinkSpec,
    NumberData,
    NumberSpec,
    StringData,
    StringSpec,
    SwitchData,
    SwitchSpec,
)
from .wysiwyg import WysiwygData, WysiwygSpec

SpecT = TypeVar("SpecT", bound=Spec)

FieldSpec = (
    BooleanSpec
    | CheckboxSpec
    | ColorSpec
    | DatetimeSpec
    | ImageSpec
    | IntegerSpec
    | LayoutSpec
    | LinkSpec
    | NumberSpec
    | SelectSpec
    | SpacesSpec
    | StringSpec
    | SwitchSpec
    | VideoSpec
    | WysiwygSpec
)

# spec type tag -> (spec class, data class)
SPEC_TYPES: dict[str, tuple[type[Spec], type[msgspec.Struct]]] = {
    "Boolean": (BooleanSpec, BooleanData),
    "Checkbox": (CheckboxSpec, CheckboxData),
    "Color": (ColorSpec, ColorData),
    "Datetime": (DatetimeSpec, DatetimeData),
    "Image": (ImageSpec, ImageData),
    "Integer": (IntegerSpec, IntegerData),
    "Layout": (LayoutSpec, LayoutData),
    "Link": (LinkSpec, LinkData),
    "Number": (NumberSpec, NumberData),
    "Select": (SelectSpec, SelectData),
    "Spaces": (SpacesSpec, SpacesData),
    "String": (StringSpec, StringData),
    "Switch": (SwitchSpec, SwitchData),
    "Video": (VideoSpec, VideoData),
    "Wysiwyg": (WysiwygSpec, WysiwygData),
}


def load_spec(spec: Spec | Mapping[str, Any]) -> Spec:
    """
    Decode a spec mapping into its Spec class, dispatching on "type".

    :param spec: a mapping such as ``{"type": "Select", "options": [...]}``,
        or an already decoded Spec which is returned as is
    :raises SpecError: if the type is unknown or a field has the wrong shape
    """
    if isinstance(spec, Spec):
        return spec
    if not isinstance(spec, Mapping):
        raise SpecError(f"Spec must be a mapping, not {type(spec).__name__}")
    try:
        return msgspec.convert(dict(spec), FieldSpec)
    except msgspec.ValidationError as exc:
        raise SpecError(str(exc), spec_type=spec.get("type")) from exc


def as_spec(spec: SpecT | Mapping[str, Any], spec_class: type[SpecT]) -> SpecT:
    """
    Return spec as an instance of spec_class.

    A mapping without "type" is decoded as spec_class; a mapping or Spec of
    another type raises SpecError.
    """
    if isinstance(spec, spec_class):
        return spec
    tag = spec_class.type_tag()
    if isinstance(spec, Spec):
        raise SpecError(
            f"Expected a {tag} spec, got {spec_tag(spec)}", spec_type=spec_tag(spec)
        )
    if not isinstance(spec, Mapping):
        raise SpecError(f"Spec must be a mapping, not {type(spec).__name__}")

    mapping = dict(spec)
    mapping.setdefault("type", tag)
    try:
        return msgspec.convert(mapping, spec_class)
    except msgspec.ValidationError as exc:
        raise SpecError(str(exc), spec_type=mapping["type"]) from exc


def load_specs(path: str | Path) -> dict[str, Spec]:
    """Load a YAML file mapping field names to spec mappings.

    Args:
        path: the YAML file to read.

    Returns:
        A dictionary of field name to decoded Spec, in file order.
    """
    with open(path, encoding="utf-8") as stream:
        document = yaml.safe_load(stream)

    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise SpecError(f"{path}: top level must map field names to specs")

    specs: dict[str, Spec] = {}
    for name, spec in document.items():
        try:
            specs[str(name)] = load_spec(spec)
        except SpecError as exc:
            raise SpecError(f"{path}: field '{name}': {exc}", exc.spec_type) from exc
    return specs


def validate_data(spec: Spec | Mapping[str, Any], data: Mapping[str, Any]) -> Any:
    """
    Check that data has the shape registered for the spec type.

    The mapping itself is left untouched; the decoded Struct is returned.

    :raises DataError: if data does not match
    """
    spec = load_spec(spec)
    tag = spec_tag(spec)
    _, data_class = SPEC_TYPES[tag]
    try:
        return msgspec.convert(data, data_class)
    except msgspec.ValidationError as exc:
        raise DataError(f"Invalid {tag} data: {exc}", spec_type=tag) from exc


# EOF
