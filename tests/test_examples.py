"""Tests for wizard.examples -- example catalog and prefill."""

import pytest

from wizard.base import UnknownFieldError
from wizard.examples import EXAMPLE_CATALOG, Example, ExampleApplier, StaticExampleProvider
from wizard.state import MODE_EXAMPLES, MODE_FORM


class TestExampleApplier:
    def test_streetlight_prefill(self, state):
        applier = ExampleApplier(state)
        applier.apply(Example(id="x", label="x", values={"title": "智慧路灯系统", "budget": "5-20万"}))
        values = state.field_values
        assert values["title"] == "智慧路灯系统"
        assert values["budget"] == "5-20万"
        assert values["description"] == ""
        assert state.active_mode == MODE_FORM

    def test_absent_fields_are_not_cleared(self, state):
        state.fields.update({
            "description": "existing description text here",
            "category": "无人机",
            "timeline": "3-6个月",
            "cooperationType": "技术合作",
        })
        before = state.field_values
        written = ExampleApplier(state).apply(
            Example(id="x", label="x", values={"title": "New title", "budget": "低于5万"})
        )
        after = state.field_values
        assert written == {"title": "New title", "budget": "低于5万"}
        for name in ("description", "category", "timeline", "cooperationType"):
            assert after[name] == before[name]

    def test_empty_example_values_are_ignored(self, state):
        state.fields.set("category", "新能源")
        ExampleApplier(state).apply(Example(id="x", label="x", values={"category": ""}))
        assert state.fields.get("category") == "新能源"

    def test_apply_twice_is_stable(self, state):
        example = EXAMPLE_CATALOG[0]
        applier = ExampleApplier(state)
        applier.apply(example)
        first = state.field_values
        applier.apply(example)
        assert state.field_values == first

    def test_skip_only_switches_mode(self, state):
        state.fields.set("title", "keep me")
        assert state.active_mode == MODE_EXAMPLES
        ExampleApplier(state).skip()
        assert state.active_mode == MODE_FORM
        assert state.fields.get("title") == "keep me"


class TestExampleCatalog:
    def test_ids_unique(self):
        ids = [e.id for e in EXAMPLE_CATALOG]
        assert len(ids) == len(set(ids))

    def test_provider_lookup(self):
        provider = StaticExampleProvider()
        assert provider.get_example("smart-streetlight").label == "智慧路灯系统"
        assert provider.get_example("missing") is None

    def test_custom_provider_list(self):
        provider = StaticExampleProvider([Example(id="a", label="A")])
        assert [e.id for e in provider.list_examples()] == ["a"]

    def test_example_rejects_unknown_fields(self):
        with pytest.raises(UnknownFieldError):
            Example(id="bad", label="bad", values={"price": "1"})
