from __future__ import annotations

from cssbuilder.shapes import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self) -> None:
        assert Rectangle(10, 20).get_area() == 200
        assert Rectangle(0, 5).get_area() == 0

    def test_area_property(self) -> None:
        assert Rectangle(2.5, 4).area == 10.0

    def test_area_follows_mutation(self) -> None:
        r = Rectangle(3, 3)
        r.width = 4
        assert r.get_area() == 12

    def test_equality(self) -> None:
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
