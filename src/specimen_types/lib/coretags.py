# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


# minimal tag builder used to serialize rich-text trees into HTML:
#   p[Markup("<em>a</em>"), "b & c"].r() -> <p><em>a</em>b &amp; c</p>

from typing import Any, Self

from markupsafe import Markup, escape


class _SelfInstantiating(type):
    def __str__(cls):
        return str(cls())

    def __getitem__(cls, key):
        return cls()[key]


class htmltag(metaclass=_SelfInstantiating):
    """
    Base HTML element representation.

    Keyword arguments become attributes of the tag; a trailing underscore is
    dropped so that reserved words can be used, eg. ``class_`` or ``for_``.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.contents: list[Any] = []
        self.attrs: dict[str, Any] = {}
        self.opts(**kwargs)

    def __repr__(self) -> str:
        return f"{self._tag}({self.attributes()!r})"

    def __str__(self) -> str:
        return str(self.__html__())

    def add(self, *elements: Any) -> Self:
        self.contents.extend(elements)
        return self

    def __iadd__(self, element: Any) -> Self:
        self.add(element)
        return self

    def __getitem__(self, arg: Any) -> Self:
        if isinstance(arg, (tuple, list)):
            self.add(*arg)
        else:
            self.add(arg)
        return self

    def attributes(self) -> str:
        """Return serialized attribute string."""
        attrs: list[str] = []
        for key, val in self.attrs.items():
            safe_key = str(escape(key))
            if val is True:
                attrs.append(safe_key)
            elif val not in (None, False):
                attrs.append(f'{safe_key}="{escape(val)}"')
        return " ".join(attrs)

    def opts(self, **kwargs: Any) -> Self:
        """Set additional attributes for this tag."""
        for key, val in kwargs.items():
            if key.startswith("_"):
                raise ValueError(f"Argument '{key}' is not a valid attribute name")
            self.attrs[key.lower().removesuffix("_")] = val
        return self

    @property
    def _tag(self) -> str:
        return self.__class__.__name__.lower()

    def __html__(self) -> Markup:
        return self.r()

    def render_contents(self) -> str:
        return "".join(
            content.__html__() if hasattr(content, "__html__") else escape(content)
            for content in self.contents
        )

    def r(self) -> Markup:
        raise NotImplementedError


class singletag(htmltag):
    """Minimal HTML single element representation."""

    def r(self) -> Markup:
        attrs = self.attributes()
        attrs_part = f" {attrs}" if attrs else ""
        return Markup(f"<{self._tag}{attrs_part} />")


class pairedtag(htmltag):
    """Minimal HTML paired element representation."""

    def r(self) -> Markup:
        attrs = self.attributes()
        attrs_part = f" {attrs}" if attrs else ""
        return Markup(
            f"<{self._tag}{attrs_part}>{self.render_contents()}</{self._tag}>"
        )


_tag_classes: dict[str, type[htmltag]] = {}

# generate a list of singletag and pairedtag classes for the tags of rich text
_single_tags = [
    "br",
    "hr",
    "img",
]
for tag in _single_tags:
    _tag_classes[tag] = globals()[tag] = type(tag, (singletag,), {})

_paired_tags = [
    "div",
    "span",
    "p",
    "a",
    "b",
    "i",
    "u",
    "s",
    "em",
    "strong",
    "sub",
    "sup",
    "mark",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "pre",
    "code",
    "blockquote",
    "figure",
    "figcaption",
]
for tag in _paired_tags:
    _tag_classes[tag] = globals()[tag] = type(tag, (pairedtag,), {})


def get_tag(name: str) -> type[htmltag]:
    """Return the tag class for name, eg. get_tag("p") is p."""
    try:
        return _tag_classes[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown tag: {name!r}") from None


# EOF
