"""Tests for the line classifier."""

import pytest

from source_metrics.scanning.classifier import (
    LineKind,
    StructuralTag,
    classify_line,
    classify_lines,
)


class TestLineKind:
    """Blank / comment / code classification."""

    @pytest.mark.parametrize("line", ["", "\n", "   \t  \n"])
    def test_blank(self, line):
        assert classify_line(line).kind is LineKind.BLANK

    @pytest.mark.parametrize("line", ["# note\n", "   # indented note", "#!/usr/bin/env ruby"])
    def test_comment(self, line):
        result = classify_line(line)
        assert result.kind is LineKind.COMMENT
        assert result.tag is StructuralTag.NONE

    def test_code_keeps_raw_and_trimmed(self):
        result = classify_line("    puts 'hi'  \n")
        assert result.kind is LineKind.CODE
        assert result.raw == "    puts 'hi'  "
        assert result.trimmed == "puts 'hi'"

    def test_comment_with_keyword_has_no_tag(self):
        assert classify_line("# class Foo").tag is StructuralTag.NONE


class TestStructuralTags:
    """Structural keyword detection on code lines."""

    def test_class_open(self):
        result = classify_line("  class Foo < Bar")
        assert result.tag is StructuralTag.CLASS_OPEN
        assert result.keyword == "class"

    def test_method_open(self):
        assert classify_line("def call(params)").tag is StructuralTag.METHOD_OPEN
        assert classify_line("def self.build").tag is StructuralTag.METHOD_OPEN

    @pytest.mark.parametrize(
        "line,keyword",
        [
            ("module Accounts", "module"),
            ("if ready?", "if"),
            ("unless done", "unless"),
            ("while running", "while"),
            ("until empty?", "until"),
            ("for x in items", "for"),
            ("case kind", "case"),
            ("begin", "begin"),
        ],
    )
    def test_generic_openers(self, line, keyword):
        result = classify_line(line)
        assert result.tag is StructuralTag.BLOCK_OPEN
        assert result.keyword == keyword

    def test_singleton_class_is_generic_opener(self):
        assert classify_line("class << self").tag is StructuralTag.BLOCK_OPEN

    def test_bare_end_closes(self):
        assert classify_line("    end\n").tag is StructuralTag.BLOCK_CLOSE

    @pytest.mark.parametrize("line", ["end.freeze", "end # of class", "ends_at = 3", "backend"])
    def test_end_must_stand_alone(self, line):
        assert classify_line(line).tag is not StructuralTag.BLOCK_CLOSE

    @pytest.mark.parametrize("line", ["return if done", "x = 1 unless y", "do_x while busy"])
    def test_modifier_forms_are_untagged(self, line):
        assert classify_line(line).tag is StructuralTag.NONE

    @pytest.mark.parametrize("line", ["if_enabled = true", "format(x)", "classify(y)", "define_method(:x)"])
    def test_whole_word_only(self, line):
        assert classify_line(line).tag is StructuralTag.NONE

    def test_case_sensitive(self):
        assert classify_line("If x").tag is StructuralTag.NONE
        assert classify_line("END").tag is StructuralTag.NONE

    def test_specific_tag_wins_over_generic(self):
        """A class/def line is both an opener and a declaration; it gets one tag."""
        assert classify_line("class Foo").tag is StructuralTag.CLASS_OPEN
        assert classify_line("def foo").tag is StructuralTag.METHOD_OPEN
        assert StructuralTag.CLASS_OPEN.opens_block
        assert StructuralTag.METHOD_OPEN.opens_block
        assert not StructuralTag.BLOCK_CLOSE.opens_block


def test_classify_lines_preserves_order():
    result = list(classify_lines(["class A\n", "\n", "end\n"]))
    assert [line.kind for line in result] == [LineKind.CODE, LineKind.BLANK, LineKind.CODE]
    assert [line.tag for line in result] == [
        StructuralTag.CLASS_OPEN,
        StructuralTag.NONE,
        StructuralTag.BLOCK_CLOSE,
    ]
