"""Tests for the prompt format parser."""

from __future__ import annotations

import pytest

from promptline.domain.segment import Segment
from promptline.domain.template import PromptTemplate, TemplateError


class TestVariables:
    def test_plain_and_braced(self) -> None:
        template = PromptTemplate("$directory${git_branch}$character")
        assert template.variables == {"directory", "git_branch", "character"}

    def test_dotted_custom_name(self) -> None:
        template = PromptTemplate("$custom.docker $custom")
        assert template.variables == {"custom.docker", "custom"}

    def test_duplicates_collapse(self) -> None:
        assert PromptTemplate("$all $all").variables == {"all"}

    def test_trailing_dot_is_literal(self) -> None:
        template = PromptTemplate("$directory. ")
        assert template.variables == {"directory"}
        assert template.render({"directory": "src"}) == [Segment("src"), Segment(". ")]


class TestErrors:
    @pytest.mark.parametrize("source", ["$", "${unclosed", "cost: $5", "a $ b"])
    def test_stray_dollar_is_an_error(self, source: str) -> None:
        with pytest.raises(TemplateError):
            PromptTemplate(source)

    def test_escaped_dollar(self) -> None:
        template = PromptTemplate("$$ $user")
        assert template.variables == {"user"}
        assert template.render({"user": "me"}) == [Segment("$ "), Segment("me")]


class TestSubstitute:
    def test_literals_interleave_with_mapper_output(self) -> None:
        template = PromptTemplate("[$a|$b]")
        mapping = {"a": [Segment("x", "red"), Segment("y")], "b": [Segment("z")]}
        assert template.substitute(mapping.get) == [
            Segment("["),
            Segment("x", "red"),
            Segment("y"),
            Segment("|"),
            Segment("z"),
            Segment("]"),
        ]

    def test_none_from_mapper_is_empty(self) -> None:
        template = PromptTemplate("<$missing>")
        assert template.substitute(lambda _name: None) == [Segment("<"), Segment(">")]

    def test_render_applies_style_everywhere(self) -> None:
        template = PromptTemplate("on $branch ")
        assert template.render({"branch": "main"}, style="bold") == [
            Segment("on ", "bold"),
            Segment("main", "bold"),
            Segment(" ", "bold"),
        ]

    def test_render_skips_empty_values(self) -> None:
        assert PromptTemplate("$symbol$number").render({"symbol": "*", "number": ""}) == [
            Segment("*")
        ]
