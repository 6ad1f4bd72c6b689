from cssbuilder.selector.builder import CssSelectorBuilder, css_selector_builder
from cssbuilder.selector.model import (
    COMBINATORS,
    Combination,
    Fragment,
    FragmentKind,
    Selector,
)

__all__ = [
    "COMBINATORS",
    "Combination",
    "CssSelectorBuilder",
    "Fragment",
    "FragmentKind",
    "Selector",
    "css_selector_builder",
]
