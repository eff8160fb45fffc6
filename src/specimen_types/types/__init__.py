# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


from .base import Spec, SpecData, spec_tag
from .choice import (
    CheckboxData,
    CheckboxSpec,
    OptionSpec,
    SelectData,
    SelectSpec,
    SpacesData,
    SpacesMediaData,
    SpacesOptionSpec,
    SpacesSpec,
    ValueEntry,
)
from .color import COLOR_FORMATS, ColorData, ColorFormat, ColorSpec
from .dates import DatetimeData, DatetimeSpec
from .layout import LayoutData, LayoutEntry, LayoutSpec, Page, PageNode
from .media import ImageData, ImageSpec, Media, MediaQuery, VideoData, VideoSpec
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
from .spec import FieldSpec, SPEC_TYPES, as_spec, load_spec, load_specs, validate_data
from .wysiwyg import (
    TypoButtonSpec,
    TypoEditorSpec,
    TypoSpec,
    WysiwygData,
    WysiwygNode,
    WysiwygSpec,
)

# EOF
