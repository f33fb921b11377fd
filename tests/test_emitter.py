"""Emitter tests: lazy indentation, checkpoints, scratch sinks."""

import pytest

from javaconv.backend.util import Emitter, EmitterError


def test_indent_written_on_first_print_after_newline():
    e = Emitter()
    e.indent()
    e.print("a")
    e.print("b")
    e.newline()
    e.print("c")
    assert e.output() == "    ab\n    c"


def test_blank_line_has_no_indentation():
    e = Emitter()
    e.indent()
    e.line()
    e.line("x")
    assert e.output() == "\n    x\n"


def test_custom_indent_unit():
    e = Emitter("\t")
    e.indent()
    e.indent()
    e.print("x")
    assert e.output() == "\t\tx"


def test_unindent_below_zero_is_fatal():
    e = Emitter()
    with pytest.raises(EmitterError):
        e.unindent()


def test_discard_keeps_speculative_text():
    e = Emitter()
    e.print("x")
    mark = e.checkpoint()
    e.print("yz")
    assert e.peek(mark) == "yz"
    e.discard(mark)
    assert e.output() == "xyz"
    assert e.open_marks == 0


def test_peek_does_not_resolve_the_mark():
    e = Emitter()
    mark = e.checkpoint()
    e.print("a")
    assert e.peek(mark) == "a"
    assert e.peek(mark) == "a"
    assert e.open_marks == 1
    e.discard(mark)


def test_rewind_drops_text_and_restores_line_state():
    e = Emitter()
    e.indent()
    e.line("a")
    mark = e.checkpoint()
    e.print("b")
    e.rewind(mark)
    e.print("c")
    assert e.output() == "    a\n    c"
    assert e.open_marks == 0


def test_nested_checkpoints_resolve_innermost_first():
    e = Emitter()
    outer = e.checkpoint()
    e.print("ab")
    inner = e.checkpoint()
    e.print("cd")
    assert e.peek(inner) == "cd"
    assert e.peek(outer) == "abcd"
    e.rewind(inner)
    assert e.peek(outer) == "ab"
    e.discard(outer)
    assert e.finish() == "ab"


def test_resolving_outer_mark_first_is_fatal():
    e = Emitter()
    outer = e.checkpoint()
    e.print("a")
    e.checkpoint()
    with pytest.raises(EmitterError):
        e.discard(outer)


def test_resolving_with_empty_stack_is_fatal():
    e = Emitter()
    with pytest.raises(EmitterError):
        e.rewind(0)
    with pytest.raises(EmitterError):
        e.discard(0)


def test_peek_unknown_mark_is_fatal():
    e = Emitter()
    e.print("abc")
    with pytest.raises(EmitterError):
        e.peek(1)


def test_finish_requires_resolved_marks():
    e = Emitter()
    e.checkpoint()
    with pytest.raises(EmitterError):
        e.finish()


def test_scratch_is_isolated_and_continues_mid_line():
    e = Emitter()
    e.indent()
    e.print("fn ")
    sink = e.scratch()
    sink.print("i32")
    sink.newline()
    sink.print("x")
    assert sink.output() == "i32\n    x"
    assert e.output() == "    fn "


def test_peek_and_rewind_touch_only_the_tail():
    e = Emitter()
    e.print("head")
    assert e.output() == "head"
    mark = e.checkpoint()
    e.print("a")
    e.print("b")
    assert e.output() == "headab"
    assert e.peek(mark) == "ab"
    e.rewind(mark)
    assert e.output() == "head"
    e.print("c")
    assert e.finish() == "headc"
