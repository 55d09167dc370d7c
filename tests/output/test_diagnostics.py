"""Tests for the timings and explain renderers."""

from __future__ import annotations

from datetime import timedelta

from promptline.domain.module import Module
from promptline.domain.segment import Segment
from promptline.output.diagnostics import (
    EXPLAIN_HEADER,
    PADDING_WIDTH,
    TIMINGS_HEADER,
    description_width,
    render_explain,
    render_timings,
    wrap_description,
)

# ── Helpers ───────────────────────────────────────────────────────────


def _module(name: str, text: str = "", ms: float = 0, description: str = "") -> Module:
    return Module(
        name=name,
        description=description,
        segments=[Segment(text)] if text else [],
        duration=timedelta(milliseconds=ms),
    )


def _body(output: str, header: str) -> list[str]:
    assert output.startswith(header + "\n")
    return output[len(header) + 1 :].splitlines()


# ── Timings ───────────────────────────────────────────────────────────


class TestTimings:
    def test_sorted_slowest_first(self) -> None:
        modules = [_module("a", "x", 0), _module("b", "y", 5), _module("c", "z", 2)]
        lines = _body(render_timings(modules), TIMINGS_HEADER)
        assert [line.split()[0] for line in lines] == ["b", "c", "a"]

    def test_zero_duration_without_output_is_excluded(self) -> None:
        modules = [_module("a", "", 0), _module("b", "y", 5), _module("c", "z", 2)]
        lines = _body(render_timings(modules), TIMINGS_HEADER)
        assert [line.split()[0] for line in lines] == ["b", "c"]

    def test_slow_module_without_output_is_kept(self) -> None:
        lines = _body(render_timings([_module("quiet", "", 3)]), TIMINGS_HEADER)
        assert lines == [' quiet  -  3ms  -   ""']

    def test_sub_millisecond_empty_module_is_excluded(self) -> None:
        assert render_timings([_module("fast", "", 0.5)]) == TIMINGS_HEADER + "\n"

    def test_ties_keep_input_order(self) -> None:
        modules = [_module("first", "1", 4), _module("second", "2", 4)]
        lines = _body(render_timings(modules), TIMINGS_HEADER)
        assert [line.split()[0] for line in lines] == ["first", "second"]

    def test_columns_are_padded(self) -> None:
        modules = [_module("directory", "~/src", 12), _module("jobs", "2", 3)]
        lines = _body(render_timings(modules), TIMINGS_HEADER)
        assert lines == [
            ' directory  -  12ms  -   "~/src"',
            ' jobs       -   3ms  -   "2"',
        ]

    def test_newlines_are_flattened(self) -> None:
        lines = _body(render_timings([_module("line_break", "\n", 1)]), TIMINGS_HEADER)
        assert lines == [' line_break  -  1ms  -   "\\n"']

    def test_wide_names_are_padded_by_display_width(self) -> None:
        modules = [_module("日本", "x", 2), _module("abcd", "y", 1)]
        lines = _body(render_timings(modules), TIMINGS_HEADER)
        assert lines == [' 日本  -  2ms  -   "x"', ' abcd  -  1ms  -   "y"']


# ── Wrapping ──────────────────────────────────────────────────────────


class TestWrapDescription:
    def test_short_text_is_untouched(self) -> None:
        assert wrap_description("abc", 10, 4) == "abc"

    def test_space_at_boundary_is_dropped(self) -> None:
        assert wrap_description("abcde fgh", 5, 2) == "abcde\n  fgh"

    def test_break_before_word_without_trailing_space(self) -> None:
        assert wrap_description("abc def", 3, 1) == "abc\n def"

    def test_mid_word_wrap_carries_grapheme(self) -> None:
        assert wrap_description("abcdefg", 3, 0) == "abc\ndef\ng"

    def test_literal_newline_resets_column(self) -> None:
        assert wrap_description("ab\ncdef", 4, 2) == "ab\n  cdef"

    def test_escape_sequences_take_no_width(self) -> None:
        text = "\x1b[31mabc\x1b[0m"
        assert wrap_description(text, 3, 0) == text

    def test_escape_sequence_then_wrap(self) -> None:
        assert wrap_description("\x1b[1mabcd", 3, 0) == "\x1b[1mabc\nd"

    def test_width_one_keeps_spaces(self) -> None:
        assert wrap_description("a b", 1, 0) == "a\n \nb"


class TestDescriptionWidth:
    def test_unknown_terminal(self) -> None:
        assert description_width(None, 10) is None

    def test_remaining_columns(self) -> None:
        assert description_width(80, 10) == 80 - 10 - PADDING_WIDTH

    def test_too_narrow_terminal(self) -> None:
        assert description_width(15, 10) is None


# ── Explain ───────────────────────────────────────────────────────────


class TestExplain:
    def test_line_layout(self) -> None:
        modules = [_module("directory", "~/src", 3, "The current working directory")]
        lines = _body(render_explain(modules, 80), EXPLAIN_HEADER)
        assert lines == [' "~/src" (3ms)  -  The current working directory']

    def test_skips_line_break_and_empty_modules(self) -> None:
        modules = [
            _module("line_break", "\n", 1, "newline"),
            _module("git_branch", "", 9, "branch"),
            _module("character", ">", 0, "arrow"),
        ]
        lines = _body(render_explain(modules, 80), EXPLAIN_HEADER)
        assert lines == [' ">" (<1ms)  -  arrow']

    def test_values_are_aligned(self) -> None:
        modules = [_module("a", "long value", 1, "first"), _module("b", "v", 1, "second")]
        lines = _body(render_explain(modules, 80), EXPLAIN_HEADER)
        assert lines[0].index(" -  ") == lines[1].index(" -  ")

    def test_descriptions_wrap_with_indent(self) -> None:
        # value "ab" + "1ms" = 5 columns, so descriptions get 20 - 16 = 4.
        modules = [_module("m", "ab", 1, "wxyz abcd")]
        output = render_explain(modules, 20)
        indent = " " * (5 + PADDING_WIDTH)
        assert _body(output, EXPLAIN_HEADER) == [' "ab" (1ms)  -  wxyz', indent + "abcd"]

    def test_unknown_width_keeps_single_lines(self) -> None:
        description = "word " * 40
        modules = [_module("m", "ab", 1, description)]
        lines = _body(render_explain(modules, None), EXPLAIN_HEADER)
        assert lines == [' "ab" (1ms)  -  ' + description]

    def test_no_modules(self) -> None:
        assert render_explain([], None) == EXPLAIN_HEADER + "\n"
