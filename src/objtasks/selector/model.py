"""Selector model: fragments, compound selectors and combined selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Category of a selector fragment, in the order fragments must appear."""

    NONE = "none"
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"


_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


class Combinator(Enum):
    """Operators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @property
    def padded(self) -> str:
        return f" {self.value} "

    @classmethod
    def parse(cls, raw: str) -> Combinator:
        """Return the combinator for *raw* (``" "``, ``">"``, ``"+"``, ``"~"``)."""
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Invalid combinator: {raw!r}") from None


@dataclass(frozen=True)
class Fragment:
    """One token of a compound selector."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        return _TEMPLATES[self.kind].format(self.value)


@dataclass(frozen=True)
class CompoundSelector:
    """Fragments with no combinator between them, e.g. ``a#x.y[z]:hover``."""

    fragments: tuple[Fragment, ...] = ()

    def stringify(self) -> str:
        return "".join(f.render() for f in self.fragments)


@dataclass(frozen=True)
class ComplexSelector:
    """Two selectors joined by a combinator."""

    left: Selector
    combinator: Combinator
    right: Selector

    def stringify(self) -> str:
        return self.left.stringify() + self.combinator.padded + self.right.stringify()


Selector = CompoundSelector | ComplexSelector
