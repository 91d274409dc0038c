"""Lark-based parser that reads selector text back into a selector tree."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from objtasks.config import SelectorConfig
from objtasks.errors import ParseError
from objtasks.selector.builder import SelectorBuilder
from objtasks.selector.model import Combinator, ComplexSelector, Fragment, FragmentKind, Selector

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Terminal name -> (fragment kind, prefix length, suffix length).
_TERMINALS: dict[str, tuple[FragmentKind, int, int]] = {
    "ELEMENT": (FragmentKind.ELEMENT, 0, 0),
    "ID": (FragmentKind.ID, 1, 0),
    "CLASS": (FragmentKind.CLASS, 1, 0),
    "ATTRIBUTE": (FragmentKind.ATTRIBUTE, 1, 1),
    "PSEUDO_CLASS": (FragmentKind.PSEUDO_CLASS, 1, 0),
    "PSEUDO_ELEMENT": (FragmentKind.PSEUDO_ELEMENT, 2, 0),
}

_APPENDERS = {
    FragmentKind.ELEMENT: SelectorBuilder.element,
    FragmentKind.ID: SelectorBuilder.id,
    FragmentKind.CLASS: SelectorBuilder.class_,
    FragmentKind.ATTRIBUTE: SelectorBuilder.attr,
    FragmentKind.PSEUDO_CLASS: SelectorBuilder.pseudo_class,
    FragmentKind.PSEUDO_ELEMENT: SelectorBuilder.pseudo_element,
}


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into fragment lists and combinators."""

    def compound(self, items: list[Token]) -> list[Fragment]:
        fragments: list[Fragment] = []
        for token in items:
            kind, prefix, suffix = _TERMINALS[token.type]
            raw = str(token)
            fragments.append(Fragment(kind, raw[prefix : len(raw) - suffix]))
        return fragments

    def complex(self, items: list[object]) -> list[object]:
        # Alternating compounds and COMBINATOR tokens.
        return items

    def start(self, items: list[object]) -> list[object]:
        return items[0]  # type: ignore[return-value]


def _build_compound(fragments: list[Fragment], config: SelectorConfig) -> Selector:
    """Replay *fragments* through a builder session so ordering rules apply."""
    builder = SelectorBuilder(config)
    for fragment in fragments:
        _APPENDERS[fragment.kind](builder, fragment.value)
    return builder.build()


def _assemble(items: list[object], config: SelectorConfig) -> Selector:
    selector = _build_compound(items[0], config)  # type: ignore[arg-type]
    for i in range(1, len(items), 2):
        combinator = Combinator.parse(str(items[i]).strip() or " ")
        right = _build_compound(items[i + 1], config)  # type: ignore[arg-type]
        selector = ComplexSelector(selector, combinator, right)
    return selector


def parse_selector(source: str, config: SelectorConfig | None = None) -> Selector:
    """Parse selector text such as ``ul.menu > li:hover`` into a Selector.

    Raises ParseError on malformed text, and DuplicateFragment or
    OrderViolation when a compound breaks the fragment ordering rules.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source.strip())
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column, cause=e) from e
    items = SelectorTransformer().transform(tree)
    return _assemble(items, config or SelectorConfig())
