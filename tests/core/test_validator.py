"""
Tests for core.schemas.validator

Test Coverage:
- validate_config(): accepts valid documents
- validate_config(): reports path and every violation
"""

import pytest

from thumb_toolkit.core.schemas import ValidationError, validate_config


def test_validate_config_when_minimal_then_passes():
    validate_config({"thumbs": {"small": {"width": 200}}})


def test_validate_config_when_full_then_passes():
    validate_config({
        "backend": "numpy",
        "background": [255, 255, 255, 0],
        "watermark": "overlay.png",
        "max_workers": 2,
        "thumbs": {
            "small": {"width": [200]},
            "card": {"fit": [500, 500, True], "watermark": 9},
            "avatar": {"square": [120], "watermark": {"anchor": 5, "offset": [4, 4]},
                       "format": "PNG", "quality": 90},
        },
    })


def test_validate_config_when_thumbs_missing_then_raises_error():
    with pytest.raises(ValidationError, match="thumbs"):
        validate_config({"backend": "pillow"})


def test_validate_config_when_unknown_thumb_key_then_reports_path():
    with pytest.raises(ValidationError) as exc_info:
        validate_config({"thumbs": {"small": {"widht": 200}}})
    assert exc_info.value.path == "thumbs.small"


def test_validate_config_when_several_violations_then_lists_all():
    with pytest.raises(ValidationError) as exc_info:
        validate_config({
            "background": [255, 255, 300],
            "thumbs": {"small": {"width": 10, "quality": 0}},
        })
    assert len(exc_info.value.errors) == 2


def test_validate_config_when_bool_width_then_raises_error():
    with pytest.raises(ValidationError):
        validate_config({"thumbs": {"small": {"width": True}}})
