"""
Unit Tests for geometry.dimensions

Test Coverage:
- by_width / by_height: proportional scaling, truncation, no upscale
- by_shorter_side / by_longer_side: axis selection by orientation
- Degenerate sources clamp the derived side to 1
"""

import pytest

from thumb_toolkit.geometry import by_height, by_longer_side, by_shorter_side, by_width


class TestByWidth:
    
    def test_by_width_when_smaller_then_scales_height(self):
        assert by_width(1000, 500, 200) == (200, 100)
    
    def test_by_width_when_larger_than_source_then_keeps_original(self):
        assert by_width(1000, 500, 1500) == (1000, 500)
    
    def test_by_width_when_equal_to_source_then_keeps_original(self):
        assert by_width(1000, 500, 1000) == (1000, 500)
    
    def test_by_width_when_fractional_then_truncates(self):
        # 100 * 337 / 1000 = 33.7
        assert by_width(1000, 337, 100) == (100, 33)
    
    def test_by_width_when_derived_side_rounds_to_zero_then_clamps_to_one(self):
        assert by_width(10000, 10, 100) == (100, 1)


class TestByHeight:
    
    def test_by_height_when_smaller_then_scales_width(self):
        assert by_height(1000, 500, 250) == (500, 250)
    
    def test_by_height_when_larger_than_source_then_keeps_original(self):
        assert by_height(1000, 500, 600) == (1000, 500)


class TestBySide:
    
    def test_by_shorter_side_when_portrait_then_uses_width(self):
        assert by_shorter_side(600, 800, 300, 200) == (300, 400)
    
    def test_by_shorter_side_when_landscape_then_uses_height(self):
        assert by_shorter_side(800, 600, 300, 200) == (266, 200)
    
    def test_by_shorter_side_when_square_then_uses_height(self):
        assert by_shorter_side(500, 500, 100, 200) == (200, 200)
    
    def test_by_longer_side_when_landscape_then_uses_width(self):
        assert by_longer_side(800, 600, 300, 200) == (300, 225)
    
    def test_by_longer_side_when_portrait_then_uses_height(self):
        assert by_longer_side(600, 800, 300, 200) == (150, 200)
    
    def test_by_longer_side_when_square_then_uses_height(self):
        assert by_longer_side(500, 500, 100, 200) == (200, 200)


@pytest.mark.parametrize("ow,oh,target", [
    (1920, 1080, 4000),
    (640, 480, 640),
    (3, 7, 100),
])
def test_resolvers_never_upscale(ow, oh, target):
    for size in (
        by_width(ow, oh, target),
        by_height(ow, oh, target),
        by_shorter_side(ow, oh, target, target),
        by_longer_side(ow, oh, target, target),
    ):
        assert size.width <= ow
        assert size.height <= oh
