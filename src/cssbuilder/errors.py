"""Error hierarchy for cssbuilder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import FragmentKind


class CssBuilderError(Exception):
    """Base error for all cssbuilder errors."""


# ---------------------------------------------------------------------------
# Selector construction errors
# ---------------------------------------------------------------------------


class SelectorError(CssBuilderError):
    """A fragment call was rejected by a selector."""

    def __init__(self, message: str, *, kind: FragmentKind) -> None:
        super().__init__(message)
        self.kind = kind


class OrderViolation(SelectorError):
    """A fragment was added after a fragment that must render after it."""

    def __init__(self, kind: FragmentKind, conflicting: FragmentKind) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )
        self.conflicting = conflicting


class DuplicateFragment(SelectorError):
    """A singleton fragment (element, id, attribute, pseudo-element) was set twice."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id, attribute and pseudo-element should not occur "
            "more than one time inside the selector",
            kind=kind,
        )


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class SchemaMismatch(CssBuilderError):
    """A JSON payload does not carry the fields the target record needs."""

    def __init__(self, message: str, *, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing
