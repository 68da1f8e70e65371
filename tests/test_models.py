"""Tests for the collected inlines state."""

from inlinegen.models import CollectedInlines


class TestCollectedInlines:
    def test_add_once(self):
        """Test that every list keeps its first occurrence only."""
        collected = CollectedInlines()

        assert collected.add_symbol("_Z1bv")
        assert collected.add_symbol("_Z1av")
        assert not collected.add_symbol("_Z1bv")
        assert collected.add_header("b.h")
        assert not collected.add_header("b.h")
        assert collected.add_template("Box<int>")
        assert not collected.add_template("Box<int>")

        assert collected.mangled_inlines == ["_Z1bv", "_Z1av"]
        assert collected.headers == ["b.h"]
        assert collected.templates == ["Box<int>"]

    def test_lists_are_independent(self):
        """Test that the same string may appear in different lists."""
        collected = CollectedInlines()

        assert collected.add_header("x")
        assert collected.add_symbol("x")
        assert collected.add_template("x")

    def test_equality_ignores_bookkeeping(self):
        first = CollectedInlines()
        first.add_symbol("_Z1av")

        assert first == CollectedInlines(mangled_inlines=["_Z1av"])

    def test_prefilled_lists_deduplicate(self):
        collected = CollectedInlines(headers=["a.h"])

        assert not collected.add_header("a.h")
        assert collected.headers == ["a.h"]
