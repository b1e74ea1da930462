"""
Module: compositing.backends

Purpose:
    Raster backend implementations and the registry that selects one by
    name at construction time.

Key Functions:
    - get_backend(): Instantiate a backend by name
    - available_backends(): Names whose libraries are importable

Key Classes:
    - RasterBackend: Capability interface
    - BackendUnavailable: Backend library missing from the runtime
    - UnsupportedBackend: Unknown backend name

Dependencies:
    - importlib (std): Lazy backend import

Used By:
    - generator: Backend selection from ThumbsConfig.backend
"""

from __future__ import annotations

import importlib
import importlib.util
import logging

from .base import (
    BackendError,
    BackendUnavailable,
    CopyRect,
    DecodedImage,
    RasterBackend,
    UnsupportedBackend,
    clip_overlay,
)

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "pillow"

# name -> (module, class, required top-level libraries)
_REGISTRY: dict[str, tuple[str, str, tuple[str, ...]]] = {
    "pillow": (f"{__name__}.pillow_backend", "PillowBackend", ("PIL",)),
    "numpy": (f"{__name__}.numpy_backend", "NumpyBackend", ("numpy", "PIL")),
}

_ALIASES = {
    "pil": "pillow",
    "ndarray": "numpy",
}


def backend_names() -> list[str]:
    """All known backend names."""
    return sorted(_REGISTRY)


def _canonical(name: str) -> str:
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    if key not in _REGISTRY:
        raise UnsupportedBackend(
            f"The backend {name!r} is not a known image processing backend "
            f"(known: {', '.join(backend_names())})"
        )
    return key


def available_backends() -> list[str]:
    """
    Names of backends whose libraries are importable.
    
    Returns:
        Sorted list of backend names
    """
    return [
        name
        for name, (_, _, libraries) in sorted(_REGISTRY.items())
        if all(importlib.util.find_spec(lib) is not None for lib in libraries)
    ]


def get_backend(name: str = DEFAULT_BACKEND) -> RasterBackend:
    """
    Instantiate a backend by name.
    
    Args:
        name: Backend name ("pillow", "numpy") or alias ("pil", "ndarray")
        
    Returns:
        New RasterBackend instance
        
    Raises:
        UnsupportedBackend: If the name is not known
        BackendUnavailable: If the backend's library cannot be imported
        
    Example:
        >>> get_backend("numpy").name
        'numpy'
    """
    key = _canonical(name)
    module_name, class_name, libraries = _REGISTRY[key]
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise BackendUnavailable(
            f"The backend {key!r} needs {', '.join(libraries)}, which could not be imported: {exc}"
        ) from exc
    logger.debug(f"Using raster backend {key!r}")
    return getattr(module, class_name)()


__all__ = [
    "BackendError",
    "BackendUnavailable",
    "CopyRect",
    "DecodedImage",
    "DEFAULT_BACKEND",
    "RasterBackend",
    "UnsupportedBackend",
    "available_backends",
    "backend_names",
    "clip_overlay",
    "get_backend",
]
