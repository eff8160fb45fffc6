"""Shared pytest fixtures for specimen_types tests."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def options() -> list[dict]:
    return [
        {"id": "small", "name": "Small", "value": "s"},
        {"id": "medium", "name": "Medium", "value": "m"},
        {"id": "large", "name": "Large", "value": "l"},
    ]


@pytest.fixture
def select_spec(options) -> dict:
    """Return a single select spec mapping."""
    return {
        "type": "Select",
        "title": "Size",
        "description": "T-shirt size",
        "options": options,
    }


@pytest.fixture
def multi_select_spec(select_spec) -> dict:
    return {**select_spec, "multiple": True}


@pytest.fixture
def checkbox_spec(options) -> dict:
    return {"type": "Checkbox", "title": "Sizes", "options": options}


@pytest.fixture
def datetime_spec() -> dict:
    return {"type": "Datetime", "title": "Delivery", "format": "YYYY-MM-DD"}


@pytest.fixture
def wysiwyg_tree() -> dict:
    """Return wysiwyg data: a root holding a paragraph and a list."""
    return {
        "value": {
            "type": "root",
            "isBlock": True,
            "nodes": [
                {
                    "type": "paragraph",
                    "isBlock": True,
                    "nodes": [
                        {"type": "text", "text": "Fish & "},
                        {
                            "type": "bold",
                            "nodes": [{"type": "text", "text": "chips"}],
                        },
                    ],
                },
                {
                    "type": "list",
                    "isBlock": True,
                    "nodes": [
                        {
                            "type": "list-item",
                            "isBlock": True,
                            "nodes": [{"type": "text", "text": "<salt>"}],
                        },
                    ],
                },
            ],
        }
    }
