"""
Tests for backend selection

Test Coverage:
- get_backend(): names, aliases, unknown names, missing libraries
- available_backends(), backend_names()
"""

import pytest

from thumb_toolkit.compositing import backends
from thumb_toolkit.compositing.backends import (
    BackendError,
    BackendUnavailable,
    RasterBackend,
    UnsupportedBackend,
    available_backends,
    backend_names,
    get_backend,
)
from thumb_toolkit.compositing.backends.numpy_backend import NumpyBackend
from thumb_toolkit.compositing.backends.pillow_backend import PillowBackend


def test_get_backend_default_is_pillow():
    assert isinstance(get_backend(), PillowBackend)


@pytest.mark.parametrize("name,cls", [
    ("pillow", PillowBackend),
    ("PIL", PillowBackend),
    ("numpy", NumpyBackend),
    (" ndarray ", NumpyBackend),
])
def test_get_backend_by_name_or_alias(name, cls):
    backend = get_backend(name)
    assert isinstance(backend, cls)
    assert isinstance(backend, RasterBackend)


def test_get_backend_when_unknown_then_raises_unsupported():
    with pytest.raises(UnsupportedBackend, match="not a known image processing backend"):
        get_backend("imagick")


def test_get_backend_when_library_missing_then_raises_unavailable(monkeypatch):
    # Arrange: point the registry at a module that cannot be imported
    monkeypatch.setitem(
        backends._REGISTRY,
        "numpy",
        ("thumb_toolkit.compositing.backends.missing_backend", "MissingBackend", ("numpy",)),
    )
    
    # Act / Assert
    with pytest.raises(BackendUnavailable, match="numpy"):
        get_backend("numpy")


def test_backend_errors_share_base_class():
    assert issubclass(BackendUnavailable, BackendError)
    assert issubclass(UnsupportedBackend, BackendError)


def test_backend_names_and_available():
    assert backend_names() == ["numpy", "pillow"]
    assert available_backends() == ["numpy", "pillow"]
