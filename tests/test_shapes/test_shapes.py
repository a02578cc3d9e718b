"""Tests for the rectangle shape."""

import pytest

from objtasks.shapes import Rectangle, make_rectangle


class TestMakeRectangle:
    def test_fields(self):
        rect = make_rectangle(10, 20)
        assert rect.width == 10
        assert rect.height == 20

    def test_area(self):
        assert make_rectangle(10, 20).get_area() == 200

    def test_area_property(self):
        assert make_rectangle(3, 4).area == 12

    def test_returns_rectangle(self):
        assert isinstance(make_rectangle(1, 1), Rectangle)


class TestLiveArea:
    def test_mutating_width_changes_area(self):
        rect = make_rectangle(10, 20)
        assert rect.get_area() == 200
        rect.width = 5
        assert rect.get_area() == 100

    def test_mutating_height_changes_area(self):
        rect = make_rectangle(10, 20)
        rect.height = 0
        assert rect.get_area() == 0

    def test_float_dimensions(self):
        assert make_rectangle(1.5, 2).get_area() == pytest.approx(3.0)
