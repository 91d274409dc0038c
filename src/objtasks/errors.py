"""Error hierarchy for objtasks."""
from __future__ import annotations


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(ObjtasksError):
    """A selector fragment was appended in an invalid position."""


class DuplicateFragment(SelectorError):
    """Element, id or pseudo-element appeared twice in one compound selector."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class OrderViolation(SelectorError):
    """A fragment kind was appended after a kind that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class CodecError(ObjtasksError):
    """Base error for value encoding and decoding."""


class SerializationError(CodecError):
    """A value could not be rendered as text."""


class ParseError(CodecError):
    """Raised when source text cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
