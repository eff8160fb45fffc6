# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

"""
Typed form-field specs and accessors over their data.

- types: msgspec structures for every field kind, plus load_spec()/load_specs()
- SSelect, SCheckbox, SColor, SDatetime, SWysiwyg: wrappers over (spec, data)
"""

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"
__version__ = "2.0.0"

from .lib.exceptions import DataError, SpecError
from .lib.registry import register_wrapper, wrap
from .lib.scheckbox import SCheckbox
from .lib.scolor import SColor
from .lib.sdatetime import SDatetime
from .lib.sselect import SSelect
from .lib.swysiwyg import GeneratorNode, HTMLGenerator, SWysiwyg
from .types import load_spec, load_specs, validate_data

__all__ = [
    "DataError",
    "GeneratorNode",
    "HTMLGenerator",
    "SCheckbox",
    "SColor",
    "SDatetime",
    "SSelect",
    "SWysiwyg",
    "SpecError",
    "load_spec",
    "load_specs",
    "register_wrapper",
    "validate_data",
    "wrap",
]

# EOF
