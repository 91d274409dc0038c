"""Fluent builders for CSS-like selectors.

A compound selector is assembled from fragments that must appear in the
order::

    element#id.class[attr]:pseudoClass::pseudoElement

Classes, attributes and pseudo-classes may repeat; element, id and
pseudo-element may not. ``SelectorBuilder`` is a single build session: each
fragment method validates against the previously appended kind and returns
the builder. ``CssSelectorBuilder`` is a stateless facade that opens a fresh
session per selector and composes finished selectors with combinators:

    b = css_selector_builder
    b.combine(b.element("ul").class_("menu"), ">", b.element("li")).stringify()
    # 'ul.menu > li'
"""

from __future__ import annotations

import logging
from functools import reduce

from objtasks.config import SelectorConfig
from objtasks.errors import DuplicateFragment, OrderViolation
from objtasks.selector.model import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    Fragment,
    FragmentKind,
    Selector,
)

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder", "create_builder"]

log = logging.getLogger(__name__)

# Kinds that may not immediately precede each kind.
_FORBIDDEN_AFTER: dict[FragmentKind, frozenset[FragmentKind]] = {
    FragmentKind.ELEMENT: frozenset({FragmentKind.ID}),
    FragmentKind.ID: frozenset({FragmentKind.CLASS, FragmentKind.PSEUDO_ELEMENT}),
    FragmentKind.CLASS: frozenset({FragmentKind.ATTRIBUTE}),
    FragmentKind.ATTRIBUTE: frozenset({FragmentKind.PSEUDO_CLASS}),
    FragmentKind.PSEUDO_CLASS: frozenset({FragmentKind.PSEUDO_ELEMENT}),
    FragmentKind.PSEUDO_ELEMENT: frozenset(),
}

_UNIQUE = frozenset({FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT})


class SelectorBuilder:
    """Mutable accumulator for one selector build session."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()
        self._fragments: list[Fragment] = []
        self._completed: list[CompoundSelector] = []
        self._last_kind = FragmentKind.NONE

    @property
    def last_kind(self) -> FragmentKind:
        return self._last_kind

    # --- validation ---------------------------------------------------------

    def _check(self, kind: FragmentKind, value: str) -> None:
        if kind in _UNIQUE and self._last_kind is kind:
            log.debug("duplicate %s fragment %r", kind.value, value)
            raise DuplicateFragment()
        if self._last_kind in _FORBIDDEN_AFTER[kind]:
            if kind is FragmentKind.ELEMENT and value in self.config.lenient_tags:
                return
            log.debug(
                "%s fragment %r after %s", kind.value, value, self._last_kind.value
            )
            self._last_kind = FragmentKind.NONE
            raise OrderViolation()

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._check(kind, value)
        if kind is FragmentKind.ELEMENT and self._fragments:
            # An element after a non-empty compound starts the next compound
            # with the kind tracker cleared.
            self._completed.append(CompoundSelector(tuple(self._fragments)))
            self._fragments = [Fragment(kind, value)]
            self._last_kind = FragmentKind.NONE
            log.debug("compound closed, starting %r", value)
            return self
        self._fragments.append(Fragment(kind, value))
        self._last_kind = kind
        return self

    # --- fragments ----------------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``; *value* is inserted verbatim, e.g. ``href$=".png"``."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- output -------------------------------------------------------------

    def build(self) -> Selector:
        """Return the selector assembled so far without resetting the session."""
        current = CompoundSelector(tuple(self._fragments))
        if not self._completed:
            return current
        compounds = [*self._completed, current]
        return reduce(
            lambda left, right: ComplexSelector(left, Combinator.DESCENDANT, right),
            compounds,
        )

    def reset(self) -> None:
        self._fragments = []
        self._completed = []
        self._last_kind = FragmentKind.NONE

    def stringify(self) -> str:
        """Render the selector and return the builder to its initial state."""
        text = self.build().stringify()
        self.reset()
        return text

    def combine(
        self,
        left: Selector | SelectorBuilder,
        combinator: str | Combinator,
        right: Selector | SelectorBuilder,
    ) -> ComplexSelector:
        return CssSelectorBuilder(self.config).combine(left, combinator, right)


class CssSelectorBuilder:
    """Stateless facade: every fragment method opens a new build session."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()

    def session(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, name: str) -> SelectorBuilder:
        return self.session().element(name)

    def id(self, value: str) -> SelectorBuilder:
        return self.session().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.session().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.session().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.session().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.session().pseudo_element(value)

    def combine(
        self,
        left: Selector | SelectorBuilder,
        combinator: str | Combinator,
        right: Selector | SelectorBuilder,
    ) -> ComplexSelector:
        """Join two selectors (or unfinished sessions) with *combinator*."""
        if not isinstance(combinator, Combinator):
            combinator = Combinator.parse(combinator)
        return ComplexSelector(_as_selector(left), combinator, _as_selector(right))


def _as_selector(value: Selector | SelectorBuilder) -> Selector:
    if isinstance(value, SelectorBuilder):
        return value.build()
    return value


def create_builder(config: SelectorConfig | None = None) -> CssSelectorBuilder:
    return CssSelectorBuilder(config)


css_selector_builder = CssSelectorBuilder()
