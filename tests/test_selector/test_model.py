"""Tests for the selector model."""

from __future__ import annotations

import pytest

from objtasks.selector import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    Fragment,
    FragmentKind,
)


class TestFragment:
    @pytest.mark.parametrize(
        "kind, rendered",
        [
            (FragmentKind.ELEMENT, "x"),
            (FragmentKind.ID, "#x"),
            (FragmentKind.CLASS, ".x"),
            (FragmentKind.ATTRIBUTE, "[x]"),
            (FragmentKind.PSEUDO_CLASS, ":x"),
            (FragmentKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_render(self, kind: FragmentKind, rendered: str) -> None:
        assert Fragment(kind, "x").render() == rendered

    def test_is_frozen(self) -> None:
        fragment = Fragment(FragmentKind.ID, "main")
        with pytest.raises(AttributeError):
            fragment.value = "other"  # type: ignore[misc]


class TestCombinator:
    def test_all_values(self) -> None:
        assert {c.value for c in Combinator} == {" ", ">", "+", "~"}

    def test_padded(self) -> None:
        assert Combinator.CHILD.padded == " > "
        assert Combinator.DESCENDANT.padded == "   "

    def test_parse(self) -> None:
        assert Combinator.parse("~") is Combinator.GENERAL_SIBLING

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid combinator"):
            Combinator.parse(">>")


class TestSelectors:
    def test_empty_compound(self) -> None:
        assert CompoundSelector().stringify() == ""

    def test_compound_joins_without_separator(self) -> None:
        compound = CompoundSelector(
            (Fragment(FragmentKind.ELEMENT, "a"), Fragment(FragmentKind.CLASS, "b"))
        )
        assert compound.stringify() == "a.b"

    def test_complex_recurses(self) -> None:
        a = CompoundSelector((Fragment(FragmentKind.ELEMENT, "a"),))
        b = CompoundSelector((Fragment(FragmentKind.ELEMENT, "b"),))
        c = CompoundSelector((Fragment(FragmentKind.ELEMENT, "c"),))
        tree = ComplexSelector(a, Combinator.CHILD, ComplexSelector(b, Combinator.ADJACENT_SIBLING, c))
        assert tree.stringify() == "a > b + c"

    def test_selectors_compare_by_value(self) -> None:
        assert CompoundSelector((Fragment(FragmentKind.ID, "x"),)) == CompoundSelector(
            (Fragment(FragmentKind.ID, "x"),)
        )
