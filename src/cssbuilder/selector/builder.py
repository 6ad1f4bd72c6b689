"""Facade for starting selectors: one entry point per fragment kind."""

from __future__ import annotations

from cssbuilder.selector.model import Combination, Selector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Creates fresh selector nodes.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # 'div#main + table#data'
    """

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self,
        left: Selector | Combination,
        combinator: str,
        right: Selector | Combination,
    ) -> Combination:
        return Combination(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
