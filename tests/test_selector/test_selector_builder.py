"""Tests for the css_selector_builder facade."""

import pytest

from cssbuilder import (
    Combination,
    CssSelectorBuilder,
    DuplicateFragment,
    OrderViolation,
    Selector,
    css_selector_builder,
)


@pytest.fixture
def builder():
    return css_selector_builder


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    def test_element(self, builder):
        assert builder.element("div").stringify() == "div"

    def test_id(self, builder):
        assert builder.id("main").stringify() == "#main"

    def test_class(self, builder):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self, builder):
        assert builder.attr("data-x").stringify() == "[data-x]"

    def test_pseudo_class(self, builder):
        assert builder.pseudo_class("focus").stringify() == ":focus"

    def test_pseudo_element(self, builder):
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_returns_selector(self, builder):
        assert isinstance(builder.element("a"), Selector)

    def test_calls_are_independent(self, builder):
        builder.element("a").id("one")
        assert builder.element("b").stringify() == "b"
        assert builder.id("two").stringify() == "#two"

    def test_fresh_instance(self):
        assert CssSelectorBuilder().element("p").stringify() == "p"


# ---------------------------------------------------------------------------
# Chaining from the facade
# ---------------------------------------------------------------------------


class TestChaining:
    def test_id_classes(self, builder):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self, builder):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_element_pseudo_class_chain(self, builder):
        sel = builder.element("div").pseudo_class("first-of-type").pseudo_class("hover")
        assert sel.stringify() == "div:first-of-type:hover"

    def test_order_violation_from_facade(self, builder):
        with pytest.raises(OrderViolation):
            builder.class_("a").id("b")
        with pytest.raises(OrderViolation):
            builder.pseudo_element("after").pseudo_class("hover")

    def test_duplicate_from_facade(self, builder):
        with pytest.raises(DuplicateFragment):
            builder.element("a").element("b")
        with pytest.raises(DuplicateFragment):
            builder.id("a").id("b")
        with pytest.raises(DuplicateFragment):
            builder.pseudo_element("a").pseudo_element("b")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_returns_combination(self, builder):
        assert isinstance(builder.combine(builder.element("a"), "+", builder.element("b")), Combination)

    @pytest.mark.parametrize("combinator", ["+", "~", ">"])
    def test_simple(self, builder, combinator):
        a = builder.element("div").class_("a")
        b = builder.element("span")
        combined = builder.combine(a, combinator, b)
        assert combined.stringify() == f"{a.stringify()} {combinator} {b.stringify()}"

    def test_nested(self, builder):
        a, b, c = builder.element("a"), builder.id("b"), builder.class_("c")
        combined = builder.combine(builder.combine(a, "~", b), " ", c)
        assert combined.stringify() == a.stringify() + " ~ " + b.stringify() + "   " + c.stringify()

    def test_deep_example(self, builder):
        combined = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_shared_operand(self, builder):
        item = builder.element("li").class_("item")
        combined = builder.combine(item, "+", item)
        assert combined.stringify() == "li.item + li.item"
