# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"

from collections.abc import Callable, Mapping
from typing import Any

import msgspec
from markupsafe import Markup, escape

from ..types import WysiwygNode, WysiwygSpec, as_spec
from . import coretags as t


class GeneratorNode(msgspec.Struct, frozen=True):
    """What a generator receives for each node of the tree."""

    type: str
    is_block: bool
    content: str


Generator = Callable[[GeneratorNode], str]


class SWysiwyg:
    """
    Serializer of a rich-text tree held in ``data["value"]``.

    Example:
        def generator(node):
            if node.type == "text":
                return node.content
            return f"<p>{node.content}</p>"

        SWysiwyg(spec, data).to_string(generator)
    """

    def __init__(self, spec: WysiwygSpec | dict[str, Any], data: Mapping[str, Any]):
        self._spec = as_spec(spec, WysiwygSpec)
        self._data = data

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def to_string(self, generator: Generator) -> str:
        """
        Walk the tree depth-first and return the generator output for the root.

        A text node with a non-empty ``text`` has that text as content, any
        other node the concatenation of what the generator returned for its
        children. The walk itself does no escaping.

        :param generator: called once per node, children before parents
        """

        def recursive_nodes(node: Mapping[str, Any]) -> str:
            contents: list[str] = []

            if node.get("type") == "text" and node.get("text"):
                contents.append(node["text"])
            else:
                for child in node.get("nodes") or []:
                    contents.append(recursive_nodes(child))

            return generator(
                GeneratorNode(
                    type=node.get("type", ""),
                    is_block=bool(node.get("isBlock", False)),
                    content="".join(contents),
                )
            )

        root = self._data["value"]
        if isinstance(root, WysiwygNode):
            root = msgspec.to_builtins(root)
        return recursive_nodes(root)

    def __str__(self) -> str:
        return self.to_string(HTMLGenerator())


class HTMLGenerator:
    """
    Generator producing HTML.

    Text is escaped, other node types are wrapped in the tag found in
    ``tags``; a type mapped to None is emitted without a tag, an unknown type
    is wrapped in a div when it is a block and in a span otherwise.
    """

    TAGS: dict[str, str | None] = {
        "root": None,
        "paragraph": "p",
        "heading1": "h1",
        "heading2": "h2",
        "heading3": "h3",
        "heading4": "h4",
        "heading5": "h5",
        "heading6": "h6",
        "bold": "strong",
        "italic": "em",
        "underline": "u",
        "strike": "s",
        "code": "code",
        "quote": "blockquote",
        "list": "ul",
        "ordered-list": "ol",
        "list-item": "li",
        "break": "br",
    }

    def __init__(self, tags: dict[str, str | None] | None = None):
        self.tags = dict(self.TAGS)
        if tags:
            self.tags.update(tags)

    def __call__(self, node: GeneratorNode) -> str:
        if node.type == "text":
            return str(escape(node.content))

        if node.type in self.tags:
            tag = self.tags[node.type]
        else:
            tag = self._fallback(node)
        if tag is None:
            return node.content

        return str(t.get_tag(tag)[Markup(node.content)].r())

    def _fallback(self, node: GeneratorNode) -> str:
        # html tag names may be used directly as node types
        try:
            t.get_tag(node.type)
            return node.type
        except ValueError:
            return "div" if node.is_block else "span"


# EOF
