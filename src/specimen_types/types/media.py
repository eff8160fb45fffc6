# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from typing import Literal

import msgspec

from .base import Spec, SpecData


class ImageSpec(Spec, tag="Image"):
    pass


class ImageData(SpecData):
    url: str = ""
    alt: str | None = None
    title: str | None = None
    # media query -> url, eg. '(max-width: 799px)': '/my/cool/image.jpg'
    media: dict[str, str] = msgspec.field(default_factory=dict)


class VideoSpec(Spec, tag="Video"):
    controls: bool = False
    autoplay: bool = False
    muted: bool = False


class VideoData(SpecData):
    url: str = ""
    # mime type -> source, eg. 'video/mp4': 'movie.mp4'
    source: dict[str, str] = msgspec.field(default_factory=dict)
    controls: bool = False
    autoplay: bool = False
    muted: bool = False


class MediaQuery(SpecData):
    min_width: int | None = None
    max_width: int | None = None


class Media(SpecData):
    """Named media queries used by responsive specs."""

    default_action: Literal["<", "<=", ">", ">=", "="] = ">="
    default_media: str = "desktop"
    queries: dict[str, MediaQuery] = msgspec.field(default_factory=dict)


# EOF
