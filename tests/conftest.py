import pytest
import sys
from io import BytesIO
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import thumb_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    """Encode a PIL image to bytes."""
    output = BytesIO()
    if fmt == "JPEG":
        image = image.convert("RGB")
    image.save(output, format=fmt)
    return output.getvalue()


# Common test fixtures
@pytest.fixture
def red_png() -> bytes:
    """200x100 opaque red PNG."""
    return encode(Image.new("RGBA", (200, 100), (255, 0, 0, 255)))


@pytest.fixture
def split_png() -> bytes:
    """200x100 PNG, left half red and right half green."""
    img = Image.new("RGBA", (200, 100), (255, 0, 0, 255))
    img.paste((0, 255, 0, 255), (100, 0, 200, 100))
    return encode(img)


@pytest.fixture
def black_overlay_png() -> bytes:
    """10x10 opaque black PNG used as watermark."""
    return encode(Image.new("RGBA", (10, 10), (0, 0, 0, 255)))


@pytest.fixture
def sample_jpeg() -> bytes:
    """300x200 JPEG."""
    return encode(Image.new("RGB", (300, 200), "white"), "JPEG")
