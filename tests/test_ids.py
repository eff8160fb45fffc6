"""Tests for id and value resolution of options and entries."""

from specimen_types.lib.ids import entry_value, resolve_id
from specimen_types.types import OptionSpec, ValueEntry


def test_resolve_id():
    assert resolve_id("small") == "small"
    assert resolve_id({"id": "small", "name": "Small"}) == "small"
    assert resolve_id(OptionSpec(id="large")) == "large"
    assert resolve_id(ValueEntry(id="medium", value="m")) == "medium"


def test_resolve_id_without_id():
    mapping = {"name": "no id"}
    option = OptionSpec(name="no id")

    assert resolve_id(mapping) is mapping
    assert resolve_id(option) is option
    assert resolve_id(None) is None


def test_entry_value():
    assert entry_value({"id": "small", "value": "s"}) == "s"
    assert entry_value({"id": "small"}) is None
    assert entry_value("legacy") == "legacy"
    assert entry_value(OptionSpec(id="a", value=3)) == 3
    assert entry_value(42) is None
