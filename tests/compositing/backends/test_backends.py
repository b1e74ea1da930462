"""
Tests for the raster backends

Test Coverage:
- decode(): size and source format
- resample(), fill(), copy_rect(), composite_overlay()
- encode(): format selection, alpha dropped for JPEG, unknown formats
- clip_overlay(): partially and fully outside placements
"""

from io import BytesIO

import pytest
from PIL import Image

from thumb_toolkit.compositing.backends import CopyRect, clip_overlay, get_backend
from thumb_toolkit.core.models import Color, Dimensions

def _encode(image: Image.Image) -> bytes:
    output = BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


def _decode(data: bytes) -> Image.Image:
    with Image.open(BytesIO(data)) as img:
        return img.convert("RGBA")


def _pixel(backend, raster, x, y):
    if backend.name == "numpy":
        return tuple(int(v) for v in raster[y, x])
    return raster.getpixel((x, y))


@pytest.fixture(params=["pillow", "numpy"])
def backend(request):
    return get_backend(request.param)


class TestDecode:
    
    def test_decode_when_png_then_reports_size_and_format(self, backend, red_png):
        source = backend.decode(red_png)
        assert source.size == (200, 100)
        assert source.format == "PNG"
        assert backend.size(source.raster) == Dimensions(200, 100)
    
    def test_decode_when_jpeg_then_reports_jpeg(self, backend, sample_jpeg):
        assert backend.decode(sample_jpeg).format == "JPEG"
    
    def test_decode_when_over_pixel_limit_then_raises_os_error(self, backend, red_png, monkeypatch):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
        with pytest.raises(OSError, match="too large"):
            backend.decode(red_png)
    
    def test_decode_when_garbage_then_raises_os_error(self, backend):
        with pytest.raises(OSError):
            backend.decode(b"not an image")


class TestRasterOperations:
    
    def test_resample_when_shrinking_uniform_then_keeps_color(self, backend, red_png):
        source = backend.decode(red_png)
        small = backend.resample(source.raster, 50, 25)
        assert backend.size(small) == (50, 25)
        assert _pixel(backend, small, 25, 12)[:3] == (255, 0, 0)
    
    def test_resample_when_transparent_edge_then_no_dark_fringe(self, backend):
        # Arrange: left half fully transparent black, right half opaque white
        img = Image.new("RGBA", (200, 100), (0, 0, 0, 0))
        img.paste((255, 255, 255, 255), (100, 0, 200, 100))
        source = backend.decode(_encode(img))
        
        # Act
        small = backend.resample(source.raster, 3, 1)
        
        # Assert: the straddling pixel is translucent white, not grey
        red, green, blue, alpha = _pixel(backend, small, 1, 0)
        assert (red, green, blue) == (255, 255, 255)
        assert 0 < alpha < 255
    
    def test_resample_when_growing_then_has_requested_size(self, backend, red_png):
        source = backend.decode(red_png)
        assert backend.size(backend.resample(source.raster, 300, 150)) == (300, 150)
    
    def test_fill_when_translucent_then_alpha_replaced(self, backend):
        canvas = backend.fill(backend.new_canvas(4, 3), Color(255, 255, 255, 127))
        assert backend.size(canvas) == (4, 3)
        assert _pixel(backend, canvas, 3, 2) == (255, 255, 255, 127)
    
    def test_new_canvas_is_transparent(self, backend):
        assert _pixel(backend, backend.new_canvas(2, 2), 1, 1)[3] == 0
    
    def test_copy_rect_when_opaque_then_replaces_region(self, backend, red_png):
        source = backend.decode(red_png)
        canvas = backend.fill(backend.new_canvas(10, 10), Color(0, 0, 255))
        
        result = backend.copy_rect(canvas, source.raster, CopyRect(0, 0, 5, 5, 5, 5))
        
        assert _pixel(backend, result, 7, 7) == (255, 0, 0, 255)
        assert _pixel(backend, result, 2, 2) == (0, 0, 255, 255)
        assert _pixel(backend, canvas, 7, 7) == (0, 0, 255, 255)
    
    def test_composite_overlay_when_partially_outside_then_clipped(self, backend, black_overlay_png):
        overlay = backend.decode(black_overlay_png)
        canvas = backend.fill(backend.new_canvas(20, 20), Color(255, 255, 255))
        
        result = backend.composite_overlay(canvas, overlay.raster, 15, -5)
        
        assert backend.size(result) == (20, 20)
        assert _pixel(backend, result, 17, 2) == (0, 0, 0, 255)
        assert _pixel(backend, result, 17, 7) == (255, 255, 255, 255)
    
    def test_composite_overlay_when_fully_outside_then_unchanged(self, backend, black_overlay_png):
        overlay = backend.decode(black_overlay_png)
        canvas = backend.fill(backend.new_canvas(20, 20), Color(255, 255, 255))
        
        result = backend.composite_overlay(canvas, overlay.raster, 50, 50)
        
        assert _pixel(backend, result, 19, 19) == (255, 255, 255, 255)
    
    def test_composite_overlay_when_translucent_then_blends(self, backend):
        overlay = backend.decode(_encode(Image.new("RGBA", (4, 4), (0, 0, 0, 128))))
        canvas = backend.fill(backend.new_canvas(4, 4), Color(255, 255, 255))
        
        red, green, blue, alpha = _pixel(backend, backend.composite_overlay(canvas, overlay.raster, 0, 0), 1, 1)
        
        assert alpha == 255
        assert 120 <= red <= 135
        assert red == green == blue


class TestEncode:
    
    def test_encode_when_png_then_keeps_alpha(self, backend):
        canvas = backend.fill(backend.new_canvas(8, 8), Color(10, 20, 30, 0))
        data = backend.encode(canvas, "PNG")
        assert data.startswith(b"\x89PNG")
        assert _decode(data).getpixel((0, 0))[3] == 0
    
    def test_encode_when_jpg_alias_then_writes_opaque_jpeg(self, backend):
        canvas = backend.fill(backend.new_canvas(8, 8), Color(10, 20, 30, 0))
        data = backend.encode(canvas, "jpg", quality=80)
        with Image.open(BytesIO(data)) as img:
            assert img.format == "JPEG"
            assert img.mode == "RGB"
    
    def test_encode_when_unknown_format_then_raises_value_error(self, backend):
        with pytest.raises(ValueError, match="No encoder"):
            backend.encode(backend.new_canvas(2, 2), "NOPE")


class TestClipOverlay:
    
    def test_clip_overlay_when_inside_then_whole_overlay(self):
        rect = clip_overlay(Dimensions(100, 100), Dimensions(10, 20), 5, 6)
        assert rect == CopyRect(0, 0, 5, 6, 10, 20)
    
    def test_clip_overlay_when_negative_origin_then_trims_source(self):
        rect = clip_overlay(Dimensions(100, 100), Dimensions(50, 50), -10, 80)
        assert rect == CopyRect(10, 0, 0, 80, 40, 20)
    
    def test_clip_overlay_when_outside_then_none(self):
        assert clip_overlay(Dimensions(100, 100), Dimensions(10, 10), 100, 0) is None
