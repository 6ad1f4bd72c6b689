"""cssbuilder: CSS selector builder, shape records and JSON helpers."""

from cssbuilder.errors import (
    CssBuilderError,
    DuplicateFragment,
    OrderViolation,
    SchemaMismatch,
    SelectorError,
)
from cssbuilder.selector import (
    COMBINATORS,
    Combination,
    CssSelectorBuilder,
    Fragment,
    FragmentKind,
    Selector,
    css_selector_builder,
)
from cssbuilder.serialization import from_json, to_json
from cssbuilder.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    # errors
    "CssBuilderError",
    "SelectorError",
    "OrderViolation",
    "DuplicateFragment",
    "SchemaMismatch",
    # selector
    "COMBINATORS",
    "Combination",
    "CssSelectorBuilder",
    "Fragment",
    "FragmentKind",
    "Selector",
    "css_selector_builder",
    # serialization
    "from_json",
    "to_json",
    # shapes
    "Rectangle",
]
