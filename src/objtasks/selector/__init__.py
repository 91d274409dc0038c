from objtasks.selector.builder import (
    CssSelectorBuilder,
    SelectorBuilder,
    create_builder,
    css_selector_builder,
)
from objtasks.selector.model import (
    Combinator,
    ComplexSelector,
    CompoundSelector,
    Fragment,
    FragmentKind,
    Selector,
)
from objtasks.selector.parser import parse_selector

__all__ = [
    "CssSelectorBuilder",
    "SelectorBuilder",
    "create_builder",
    "css_selector_builder",
    "Combinator",
    "ComplexSelector",
    "CompoundSelector",
    "Fragment",
    "FragmentKind",
    "Selector",
    "parse_selector",
]
