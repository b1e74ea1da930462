"""
Unit Tests for compositing.canvas

Test Coverage:
- plan_composite(): canvas size and copy rectangle for padded,
  cropped and unboxed plans
- composite(): end-to-end against each backend
"""

import pytest

from thumb_toolkit.compositing import composite, get_backend, plan_composite
from thumb_toolkit.compositing.backends import CopyRect
from thumb_toolkit.core.models import CanvasPlan, Color
from thumb_toolkit.geometry import fit, square

BLUE = Color(0, 0, 255, 255)


def _pixel(backend, raster, x, y):
    if backend.name == "numpy":
        return tuple(int(v) for v in raster[y, x])
    return raster.getpixel((x, y))


def _close(actual, expected, tolerance=12):
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


class TestPlanComposite:
    
    def test_plan_composite_when_padded_then_pastes_at_offset(self):
        instructions = plan_composite(CanvasPlan(500, 281, 0, 109, 0, 0, 500, 500))
        assert instructions.canvas == (500, 500)
        assert instructions.resample == (500, 281)
        assert instructions.copy == CopyRect(0, 0, 0, 109, 500, 281)
    
    def test_plan_composite_when_cropped_then_reads_at_crop(self):
        instructions = plan_composite(CanvasPlan(888, 500, 0, 0, 194, 0, 500, 500))
        assert instructions.copy == CopyRect(194, 0, 0, 0, 500, 500)
    
    def test_plan_composite_when_odd_crop_then_copy_fits_box(self):
        instructions = plan_composite(square(800, 600, 400))
        assert instructions.canvas == (400, 400)
        assert instructions.copy == CopyRect(66, 0, 0, 0, 400, 400)
    
    def test_plan_composite_when_unboxed_then_copies_everything(self):
        instructions = plan_composite(CanvasPlan(200, 100), BLUE)
        assert instructions.canvas == (200, 100)
        assert instructions.copy == CopyRect(0, 0, 0, 0, 200, 100)
        assert instructions.background == BLUE


@pytest.mark.parametrize("backend_name", ["pillow", "numpy"])
class TestComposite:
    
    def test_composite_when_contain_then_background_shows_in_padding(self, backend_name, red_png):
        # Arrange
        backend = get_backend(backend_name)
        source = backend.decode(red_png)
        plan = fit(200, 100, 100, 100, keep_aspect=True)
        
        # Act
        canvas = composite(backend, source.raster, plan, BLUE)
        
        # Assert
        assert backend.size(canvas) == (100, 100)
        assert _pixel(backend, canvas, 50, 10) == (0, 0, 255, 255)
        assert _close(_pixel(backend, canvas, 50, 50), (255, 0, 0, 255))
    
    def test_composite_when_cover_then_crops_center(self, backend_name, split_png):
        backend = get_backend(backend_name)
        source = backend.decode(split_png)
        
        canvas = composite(backend, source.raster, square(200, 100, 100))
        
        assert backend.size(canvas) == (100, 100)
        assert _close(_pixel(backend, canvas, 10, 50), (255, 0, 0, 255))
        assert _close(_pixel(backend, canvas, 90, 50), (0, 255, 0, 255))
    
    def test_composite_when_no_background_then_padding_is_transparent(self, backend_name, red_png):
        backend = get_backend(backend_name)
        source = backend.decode(red_png)
        
        canvas = composite(backend, source.raster, fit(200, 100, 100, 100, keep_aspect=True))
        
        assert _pixel(backend, canvas, 50, 10)[3] == 0
    
    def test_composite_does_not_modify_source(self, backend_name, red_png):
        backend = get_backend(backend_name)
        source = backend.decode(red_png)
        
        composite(backend, source.raster, square(200, 100, 50), BLUE)
        
        assert backend.size(source.raster) == (200, 100)
        assert _pixel(backend, source.raster, 0, 0) == (255, 0, 0, 255)
