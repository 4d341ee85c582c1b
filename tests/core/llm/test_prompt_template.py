from __future__ import annotations

import pytest

from app.core.llm.prompt_template import PromptTemplate, PromptTemplateError


def test_render_substitutes_bound_and_passed_values() -> None:
    template = PromptTemplate("{greeting}, {name}!").add("greeting", "Hello")
    assert template.render({"name": "Prince"}) == "Hello, Prince!"


def test_render_params_override_bound_values() -> None:
    template = PromptTemplate("year={year}").add("year", 1984)
    assert template.render({"year": 2013}) == "year=2013"


def test_values_are_not_reinterpreted() -> None:
    template = PromptTemplate("{a} then {b}")
    assert template.render({"a": "{b}", "b": '{"x": 1}'}) == '{b} then {"x": 1}'


def test_non_placeholder_braces_are_left_alone() -> None:
    template = PromptTemplate('Return {"title": ...} for {year}. {} {1}')
    assert template.placeholders == ["year"]
    assert template.render({"year": 0}) == 'Return {"title": ...} for 0. {} {1}'


def test_missing_value_raises() -> None:
    template = PromptTemplate("{year} {format}").add("year", 1984)
    with pytest.raises(PromptTemplateError) as excinfo:
        template.render()
    assert "format" in str(excinfo.value)
    assert isinstance(excinfo.value, KeyError)
