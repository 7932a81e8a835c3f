"""Unit tests for the value model.

WHY: Every converter decision starts with classify() and is_char_list().
A misclassified bool or tuple silently changes how a whole structure is
converted.

HOW: Direct checks of each predicate, including the edge cases the
converter depends on (bools, empty lists, out-of-range code points).
"""

from collections import OrderedDict

import pytest

from term_codec.core.terms import (
    MAX_CODE_POINT,
    Atom,
    TaggedPair,
    TermKind,
    classify,
    is_char_list,
    is_plain_int,
    is_tagged_pair,
)


class TestAtom:
    """Atoms compare and hash by name."""

    def test_equal_by_name(self):
        assert Atom("ok") == Atom("ok")
        assert Atom("ok") != Atom("error")

    def test_hashable(self):
        assert {Atom("ok"): 1}[Atom("ok")] == 1

    def test_repr(self):
        assert repr(Atom("null")) == ":null"

    def test_not_equal_to_string(self):
        assert Atom("ok") != "ok"


class TestClassify:
    """classify() maps every value onto exactly one TermKind."""

    @pytest.mark.parametrize("value", [None, True, False, 0, 42, -1, 2.5, Atom("ok"), b"\x00"])
    def test_scalars(self, value):
        assert classify(value) is TermKind.SCALAR

    def test_text(self):
        assert classify("nodes") is TermKind.TEXT
        assert classify("") is TermKind.TEXT

    def test_sequence(self):
        assert classify([]) is TermKind.SEQUENCE
        assert classify([1, "a"]) is TermKind.SEQUENCE

    def test_tuple(self):
        assert classify(()) is TermKind.TUPLE
        assert classify(TaggedPair(Atom("ok"), 1)) is TermKind.TUPLE

    @pytest.mark.parametrize("value", [{"a": 1}, OrderedDict(), {1, 2}, object()])
    def test_other(self, value):
        assert classify(value) is TermKind.OTHER


class TestPlainInt:
    """Booleans are never plain integers."""

    def test_int(self):
        assert is_plain_int(7)

    def test_bool(self):
        assert not is_plain_int(True)

    def test_float(self):
        assert not is_plain_int(7.0)


class TestCharList:
    """A list of in-range plain ints is character-code text."""

    def test_ascii_codes(self):
        assert is_char_list([110, 111, 100, 101, 115])

    def test_empty_list_is_text(self):
        assert is_char_list([])

    def test_mixed_list_is_not_text(self):
        assert not is_char_list([110, "o"])

    def test_bools_are_not_text(self):
        assert not is_char_list([True, False])

    def test_tuple_is_never_text(self):
        assert not is_char_list((110, 111))

    def test_code_point_bounds(self):
        assert is_char_list([0, MAX_CODE_POINT])
        assert not is_char_list([-1])
        assert not is_char_list([MAX_CODE_POINT + 1])


class TestTaggedPair:
    """A tagged pair is a 2-tuple with a scalar first element."""

    def test_atom_tag(self):
        assert is_tagged_pair((Atom("ok"), [1]))

    def test_named_tuple(self):
        pair = TaggedPair(Atom("ok"), "x")
        assert is_tagged_pair(pair)
        assert pair.tag == Atom("ok")
        assert pair.payload == "x"

    def test_none_and_number_tags(self):
        assert is_tagged_pair((None, 1))
        assert is_tagged_pair((3, 1))

    def test_list_tag_is_not_a_pair(self):
        assert not is_tagged_pair(([1], 2))

    def test_text_tag_is_not_a_pair(self):
        assert not is_tagged_pair(("ok", 2))

    def test_arity_must_be_two(self):
        assert not is_tagged_pair((Atom("ok"),))
        assert not is_tagged_pair((Atom("ok"), 1, 2))
