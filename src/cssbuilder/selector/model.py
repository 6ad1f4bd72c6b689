"""Selector model: fragment kinds, simple selectors and combinations.

A compound CSS selector is made of fragments that must appear in a fixed
order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/      \\----------/
           may repeat      may repeat

``Selector`` enforces that order as fragments are added: once a fragment kind
is present, no earlier kind can be added afterwards. Every fluent call returns
a new ``Selector``, so a node that rejected a call is still usable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import IntEnum

from cssbuilder.errors import DuplicateFragment, OrderViolation

logger = logging.getLogger(__name__)

# Standard CSS combinators. Combination does not restrict itself to these.
COMBINATORS = (" ", "+", "~", ">")


class FragmentKind(IntEnum):
    """Kinds of selector fragments, valued by their position in a selector."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def is_singleton(self) -> bool:
        return self not in (FragmentKind.CLASS, FragmentKind.PSEUDO_CLASS)


_PREFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """One piece of a compound selector, e.g. ``.container`` or ``:focus``."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        prefix, suffix = _PREFIXES[self.kind]
        return f"{prefix}{self.value}{suffix}"


@dataclass(frozen=True)
class Selector:
    """A simple (compound) selector built from ordered fragments.

    Attributes:
        fragments: Fragments in the order they were added. Since additions
            are validated, this is also the order they render in.
    """

    fragments: tuple[Fragment, ...] = field(default_factory=tuple)

    # --- fluent construction ----------------------------------------------------

    def element(self, name: str) -> Selector:
        """Return a copy with the element (type) fragment set to *name*."""
        return self._extend(FragmentKind.ELEMENT, name)

    def id(self, value: str) -> Selector:
        """Return a copy with the ``#id`` fragment set."""
        return self._extend(FragmentKind.ID, value)

    def class_(self, value: str) -> Selector:
        """Return a copy with ``.value`` appended to the classes."""
        return self._extend(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Return a copy with the ``[value]`` attribute fragment set.

        *value* is the raw text between the brackets and is not validated.
        """
        return self._extend(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        """Return a copy with ``:value`` appended to the pseudo-classes."""
        return self._extend(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        """Return a copy with the ``::value`` pseudo-element set."""
        return self._extend(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(self, combinator: str, other: Selector | Combination) -> Combination:
        """Join this selector with *other* using *combinator*."""
        return Combination(self, combinator, other)

    def _extend(self, kind: FragmentKind, value: str) -> Selector:
        if not value:
            raise ValueError(f"{kind.name.lower()} value must not be empty")
        for fragment in self.fragments:
            if fragment.kind > kind:
                logger.debug(
                    "Rejected %s %r: %s already set", kind.name, value, fragment.kind.name
                )
                raise OrderViolation(kind, fragment.kind)
        if kind.is_singleton and kind in self.kinds:
            logger.debug("Rejected %s %r: already set", kind.name, value)
            raise DuplicateFragment(kind)
        return replace(self, fragments=self.fragments + (Fragment(kind, value),))

    # --- accessors --------------------------------------------------------------

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """Fragment kinds present, in order, without repeats."""
        return tuple(dict.fromkeys(f.kind for f in self.fragments))

    def get(self, kind: FragmentKind) -> str | None:
        """Return the first value of *kind*, or None if it is absent."""
        for fragment in self.fragments:
            if fragment.kind is kind:
                return fragment.value
        return None

    def values(self, kind: FragmentKind) -> tuple[str, ...]:
        return tuple(f.value for f in self.fragments if f.kind is kind)

    @property
    def classes(self) -> tuple[str, ...]:
        return self.values(FragmentKind.CLASS)

    @property
    def attribute(self) -> str | None:
        return self.get(FragmentKind.ATTRIBUTE)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return self.values(FragmentKind.PSEUDO_CLASS)

    # --- rendering --------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector, e.g. ``a#nav.link[href]:hover::after``."""
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class Combination:
    """Two selectors joined by a combinator (``' '``, ``+``, ``~``, ``>``).

    Either side may itself be a Combination; rendering flattens the tree
    left to right with a single space around the combinator. A descendant
    combinator (``' '``) therefore renders as three spaces.
    """

    left: Selector | Combination
    combinator: str
    right: Selector | Combination

    def combine(self, combinator: str, other: Selector | Combination) -> Combination:
        return Combination(self, combinator, other)

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
