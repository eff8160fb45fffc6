"""Tests for SWysiwyg and HTMLGenerator."""

from specimen_types import GeneratorNode, HTMLGenerator, SWysiwyg
from specimen_types.types import WysiwygNode


def simple_generator(node):
    if node.type == "text":
        return node.content
    if node.type == "root":
        return node.content
    return f"<p>{node.content}</p>"


def test_custom_generator():
    data = {
        "value": {
            "type": "root",
            "nodes": [
                {
                    "type": "paragraph",
                    "isBlock": True,
                    "nodes": [
                        {"type": "text", "text": "a"},
                        {"type": "text", "text": "b"},
                    ],
                }
            ],
        }
    }
    assert SWysiwyg({}, data).to_string(simple_generator) == "<p>ab</p>"


def test_children_visited_before_parents(wysiwyg_tree):
    seen = []

    def recorder(node):
        seen.append((node.type, node.is_block, node.content))
        return node.type[0]

    result = SWysiwyg({}, wysiwyg_tree).to_string(recorder)

    assert result == "r"
    assert [item[0] for item in seen] == [
        "text",
        "text",
        "bold",
        "paragraph",
        "text",
        "list-item",
        "list",
        "root",
    ]
    assert seen[2] == ("bold", False, "t")
    assert seen[3] == ("paragraph", True, "tb")


def test_walk_does_not_escape(wysiwyg_tree):
    texts = []

    def recorder(node):
        if node.type == "text":
            texts.append(node.content)
        return node.content

    SWysiwyg({}, wysiwyg_tree).to_string(recorder)
    assert texts == ["Fish & ", "chips", "<salt>"]


def test_html_generator(wysiwyg_tree):
    assert str(SWysiwyg({}, wysiwyg_tree)) == (
        "<p>Fish &amp; <strong>chips</strong></p><ul><li>&lt;salt&gt;</li></ul>"
    )


def test_html_generator_fallbacks():
    generator = HTMLGenerator()

    assert generator(GeneratorNode(type="callout", is_block=True, content="x")) == (
        "<div>x</div>"
    )
    assert generator(GeneratorNode(type="link", is_block=False, content="x")) == (
        "<span>x</span>"
    )
    assert generator(GeneratorNode(type="mark", is_block=False, content="x")) == (
        "<mark>x</mark>"
    )
    assert generator(GeneratorNode(type="break", is_block=False, content="")) == "<br />"


def test_html_generator_custom_tags():
    generator = HTMLGenerator(tags={"paragraph": "div", "bold": "b"})

    assert generator(GeneratorNode(type="paragraph", is_block=True, content="x")) == (
        "<div>x</div>"
    )
    assert generator(GeneratorNode(type="bold", is_block=False, content="x")) == (
        "<b>x</b>"
    )


def test_empty_text_node():
    data = {"value": {"type": "paragraph", "nodes": [{"type": "text", "text": ""}]}}
    assert SWysiwyg({}, data).to_string(HTMLGenerator()) == "<p></p>"


def test_struct_root():
    root = WysiwygNode(
        type="root",
        is_block=True,
        nodes=[
            WysiwygNode(
                type="heading1",
                is_block=True,
                nodes=[WysiwygNode(type="text", text="Title")],
            )
        ],
    )
    assert str(SWysiwyg({}, {"value": root})) == "<h1>Title</h1>"


def test_root_wrapped_around_text_leaves():
    data = {
        "value": {
            "type": "root",
            "isBlock": True,
            "nodes": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}],
        }
    }

    def generator(node):
        if node.type == "text":
            return node.content
        return f"<p>{node.content}</p>"

    assert SWysiwyg({}, data).to_string(generator) == "<p>ab</p>"
