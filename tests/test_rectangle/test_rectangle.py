from __future__ import annotations

from objectkit import Rectangle


class TestRectangle:
    def test_fields_and_area(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_float_area(self) -> None:
        assert Rectangle(2.5, 4).area() == 10.0

    def test_keyword_arguments(self) -> None:
        assert Rectangle(height=3, width=2).area() == 6

    def test_area_follows_mutation(self) -> None:
        r = Rectangle(1, 1)
        r.width = 5
        assert r.area() == 5

    def test_no_validation(self) -> None:
        r = Rectangle("ab", 3)
        assert r.area() == "ababab"

    def test_equality(self) -> None:
        assert Rectangle(1, 2) == Rectangle(1, 2)
        assert Rectangle(1, 2) != Rectangle(2, 1)
