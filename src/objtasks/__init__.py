"""objtasks -- shape records, a value codec and a CSS selector builder."""

from objtasks.codec import decode, encode
from objtasks.config import SelectorConfig
from objtasks.errors import (
    CodecError,
    DuplicateFragment,
    ObjtasksError,
    OrderViolation,
    ParseError,
    SelectorError,
    SerializationError,
)
from objtasks.selector import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    CssSelectorBuilder,
    SelectorBuilder,
    create_builder,
    css_selector_builder,
    parse_selector,
)
from objtasks.shapes import Rectangle

__all__ = [
    # shapes
    "Rectangle",
    # codec
    "encode",
    "decode",
    # selector
    "SelectorConfig",
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    "create_builder",
    "parse_selector",
    "Combinator",
    "CompoundSelector",
    "ComplexSelector",
    # errors
    "ObjtasksError",
    "SelectorError",
    "DuplicateFragment",
    "OrderViolation",
    "CodecError",
    "SerializationError",
    "ParseError",
]
