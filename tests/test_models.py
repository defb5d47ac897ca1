"""
Tests for domain models — defaults, serialization, derived values.
"""

import json

from railshadow.core.models import (
    Association,
    ComponentDescription,
    GeneratedFile,
    ModelDescription,
    PropField,
    StateVar,
    Validation,
)


class TestComponentDescription:
    def test_defaults(self):
        d = ComponentDescription()
        assert d.name == ""
        assert d.props == []
        assert d.exports.type == "default"

    def test_lists_not_shared(self):
        a = ComponentDescription()
        b = ComponentDescription()
        a.hooks.append("useTheme")
        assert b.hooks == []

    def test_json_roundtrip(self):
        d = ComponentDescription(
            name="Card",
            props=[PropField(name="title", type="string")],
            state=[StateVar(name="open")],
        )
        data = json.loads(d.model_dump_json())
        assert data["props"][0]["name"] == "title"
        assert data["state"][0]["type"] == "unknown"
        assert ComponentDescription.model_validate(data) == d


class TestAssociation:
    def test_class_name(self):
        assert Association(kind="has_many", name="tags", target="tag").class_name == "Tag"

    def test_class_name_empty_target(self):
        assert Association(kind="has_many", name="s").class_name == ""


class TestModelDescription:
    def test_minimal(self):
        m = ModelDescription(name="User")
        assert m.fields == []
        assert m.associations == []
        assert m.validations == []

    def test_validation(self):
        v = Validation(kind="presence", field="email")
        assert v.model_dump() == {"kind": "presence", "field": "email"}


class TestGeneratedFile:
    def test_defaults(self):
        f = GeneratedFile(path="a.rb", content="x")
        assert f.overwrite is True
        assert f.reason == ""
        assert f.label == ""
