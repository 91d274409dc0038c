"""Tests for objtasks.errors."""
from __future__ import annotations

from objtasks.errors import (
    CodecError,
    DuplicateFragment,
    ObjtasksError,
    OrderViolation,
    ParseError,
    SelectorError,
    SerializationError,
)


class TestHierarchy:
    def test_selector_errors(self) -> None:
        assert issubclass(DuplicateFragment, SelectorError)
        assert issubclass(OrderViolation, SelectorError)
        assert issubclass(SelectorError, ObjtasksError)

    def test_codec_errors(self) -> None:
        assert issubclass(SerializationError, CodecError)
        assert issubclass(ParseError, CodecError)
        assert issubclass(CodecError, ObjtasksError)


class TestMessages:
    def test_duplicate_fragment_message(self) -> None:
        assert str(DuplicateFragment()) == (
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )

    def test_order_violation_message(self) -> None:
        assert str(OrderViolation()) == (
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element"
        )


class TestParseError:
    def test_position_defaults(self) -> None:
        err = ParseError("bad")
        assert err.line is None
        assert err.column is None
        assert err.cause is None

    def test_position_and_cause(self) -> None:
        orig = ValueError("original")
        err = ParseError("bad", line=2, column=5, cause=orig)
        assert (err.line, err.column) == (2, 5)
        assert err.cause is orig
