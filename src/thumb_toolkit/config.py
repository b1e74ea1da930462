"""
Module: config

Purpose:
    Configuration for thumbnail generation. Parses a loosely typed
    mapping (or JSON file) once into an immutable ThumbsConfig holding a
    tuple of ThumbnailSpec. Every malformed rule shape fails here, before
    any image is processed; there is no fallback to the original size.

Key Classes:
    - ThumbsConfig: Immutable configuration
    - ConfigurationError: Raised for any invalid configuration

Key Functions:
    - config_from_dict(): Parse a configuration mapping
    - load_config(): Parse a JSON configuration file
    - parse_rule(): Parse one thumbnail's rule shape

Dependencies:
    - core.schemas.validator: jsonschema structural validation
    - core.models: Rules, specs, Color

Used By:
    - generator: ThumbnailGenerator takes a ThumbsConfig

Configuration Shape:
    {
        "backend": "pillow",
        "background": [255, 255, 255, 0],
        "watermark": "overlay.png",
        "max_workers": 1,
        "thumbs": {
            "small": {"width": 200},
            "card": {"fit": [500, 500, true], "watermark": 9}
        }
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from .compositing.backends import DEFAULT_BACKEND
from .core.formats import normalize_format
from .core.models import (
    RULE_KEYS,
    ByHeight,
    ByLongerSide,
    ByShorterSide,
    ByWidth,
    Color,
    Fit,
    LayoutRule,
    Square,
    ThumbnailSpec,
    WatermarkSettings,
)
from .core.schemas import ValidationError, validate_config

logger = logging.getLogger(__name__)

# Transparent white, the fill used when no background is configured
DEFAULT_BACKGROUND = Color(255, 255, 255, 0)


class ConfigurationError(ValueError):
    """Raised when configuration cannot be turned into thumbnail specs."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


@dataclass(frozen=True)
class ThumbsConfig:
    """
    Configuration for thumbnail generation (immutable).
    
    Attributes:
        thumbs: Thumbnail specs, in configuration order
        backend: Raster backend name ("pillow" or "numpy")
        background: Canvas fill, None for an unfilled (transparent) canvas
        watermark_path: Path of the watermark overlay image
        max_workers: Threads used to render specs of one upload (1 = serial)
    
    Example:
        >>> config = ThumbsConfig(thumbs=(ThumbnailSpec("small", ByWidth(200)),))
        >>> config.names
        ('small',)
    """
    
    thumbs: tuple[ThumbnailSpec, ...]
    backend: str = DEFAULT_BACKEND
    background: Optional[Color] = DEFAULT_BACKGROUND
    watermark_path: Optional[Path] = None
    max_workers: int = 1
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.thumbs:
            raise ConfigurationError("At least one thumbnail must be configured")
        seen: set[str] = set()
        for spec in self.thumbs:
            if spec.name in seen:
                raise ConfigurationError(f"Duplicate thumbnail name: {spec.name!r}", path=f"thumbs.{spec.name}")
            seen.add(spec.name)
        if self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be >= 1: {self.max_workers}", path="max_workers")
    
    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.thumbs)
    
    @property
    def uses_watermark(self) -> bool:
        """True if any spec asks for a watermark."""
        return any(spec.watermark is not None for spec in self.thumbs)
    
    def spec(self, name: str) -> ThumbnailSpec:
        """
        Get a spec by name.
        
        Raises:
            KeyError: If no spec has that name
        """
        for spec in self.thumbs:
            if spec.name == name:
                return spec
        raise KeyError(f"No thumbnail named {name!r}")
    
    def read_watermark(self) -> Optional[bytes]:
        """
        Read the watermark overlay bytes.
        
        Returns:
            Overlay bytes, or None when no watermark path is configured
            
        Raises:
            ConfigurationError: If the configured file cannot be read
        """
        if self.watermark_path is None:
            return None
        try:
            return self.watermark_path.read_bytes()
        except OSError as exc:
            raise ConfigurationError(
                f"Watermark image cannot be read: {self.watermark_path} ({exc})",
                path="watermark",
            ) from exc
    
    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the configuration shape.
        
        Returns:
            Dict accepted by config_from_dict()
        """
        d: dict[str, Any] = {
            "backend": self.backend,
            "background": list(self.background.as_tuple()) if self.background else None,
            "thumbs": {spec.name: spec.to_dict() for spec in self.thumbs},
        }
        if self.watermark_path is not None:
            d["watermark"] = str(self.watermark_path)
        if self.max_workers != 1:
            d["max_workers"] = self.max_workers
        return d
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base_path: Path | None = None) -> ThumbsConfig:
        return config_from_dict(data, base_path=base_path)


# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────

def config_from_dict(
    data: Mapping[str, Any],
    *,
    base_path: Path | None = None,
) -> ThumbsConfig:
    """
    Parse a configuration mapping.
    
    Args:
        data: Configuration mapping (see module docstring)
        base_path: If provided, a relative watermark path is relative to this
        
    Returns:
        ThumbsConfig instance
        
    Raises:
        ConfigurationError: If the structure or any thumbnail rule is invalid
    """
    try:
        validate_config(data)
    except ValidationError as exc:
        raise ConfigurationError(str(exc), path=exc.path, errors=exc.errors) from exc
    
    specs = tuple(
        parse_spec(name, thumb) for name, thumb in data["thumbs"].items()
    )
    
    background = DEFAULT_BACKGROUND
    if "background" in data:
        background = _parse_background(data["background"])
    
    watermark_path = None
    if data.get("watermark"):
        watermark_path = Path(data["watermark"])
        if base_path is not None and not watermark_path.is_absolute():
            watermark_path = base_path / watermark_path
    
    config = ThumbsConfig(
        thumbs=specs,
        backend=data.get("backend", DEFAULT_BACKEND),
        background=background,
        watermark_path=watermark_path,
        max_workers=data.get("max_workers", 1),
    )
    logger.debug(f"Loaded {len(specs)} thumbnail specs: {', '.join(config.names)}")
    return config


def load_config(path: Path | str) -> ThumbsConfig:
    """
    Load a JSON configuration file.
    
    A relative watermark path is resolved against the file's directory.
    
    Args:
        path: Path to the JSON file
        
    Returns:
        ThumbsConfig instance
        
    Raises:
        ConfigurationError: If the file cannot be read or parsed, or is invalid
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Cannot load configuration {path}: {exc}") from exc
    return config_from_dict(data, base_path=path.parent)


def parse_spec(name: str, thumb: Mapping[str, Any]) -> ThumbnailSpec:
    """
    Parse one named thumbnail.
    
    Args:
        name: Thumbnail name
        thumb: Its configuration mapping
        
    Returns:
        ThumbnailSpec instance
        
    Raises:
        ConfigurationError: If the rule, watermark, format or quality is invalid
    """
    rule = parse_rule(name, thumb)
    watermark = _parse_watermark(name, thumb["watermark"]) if "watermark" in thumb else None
    output_format = normalize_format(thumb["format"]) if thumb.get("format") else None
    try:
        return ThumbnailSpec(
            name=name,
            rule=rule,
            watermark=watermark,
            output_format=output_format,
            quality=thumb.get("quality"),
        )
    except ValueError as exc:
        raise ConfigurationError(f"Thumbnail {name!r}: {exc}", path=f"thumbs.{name}") from exc


def parse_rule(name: str, thumb: Mapping[str, Any]) -> LayoutRule:
    """
    Parse the rule shape of one thumbnail.
    
    Exactly one of the keys width, height, shorter, longer, fit, square
    must be present:
    
    - ``width``/``height``: integer or one-element list
    - ``shorter``/``longer``: [width, height]
    - ``fit``: [width, height] or [width, height, keep_aspect]
    - ``square``: [side] or [side, keep_aspect]
    
    Args:
        name: Thumbnail name (for error messages)
        thumb: Thumbnail configuration mapping
        
    Returns:
        LayoutRule variant
        
    Raises:
        ConfigurationError: If no key, several keys, wrong arity or bad values
        
    Example:
        >>> parse_rule("card", {"fit": [500, 500, True]})
        Fit(width=500, height=500, keep_aspect=True)
    """
    keys = [key for key in RULE_KEYS if key in thumb]
    path = f"thumbs.{name}"
    if not keys:
        raise ConfigurationError(
            f"Thumbnail {name!r}: unknown type or incorrect parameters of creating "
            f"thumbnails (expected one of: {', '.join(RULE_KEYS)})",
            path=path,
        )
    if len(keys) > 1:
        raise ConfigurationError(
            f"Thumbnail {name!r}: ambiguous rule, found {', '.join(keys)}",
            path=path,
        )
    
    key = keys[0]
    path = f"{path}.{key}"
    value = thumb[key]
    try:
        if key == ByWidth.kind:
            return ByWidth(_single(value, key))
        if key == ByHeight.kind:
            return ByHeight(_single(value, key))
        if key == ByShorterSide.kind:
            return ByShorterSide(*_values(value, key, (2,)))
        if key == ByLongerSide.kind:
            return ByLongerSide(*_values(value, key, (2,)))
        if key == Fit.kind:
            return Fit(*_values(value, key, (2, 3)))
        return Square(*_values(value, key, (1, 2)))
    except ValueError as exc:
        raise ConfigurationError(f"Thumbnail {name!r}: {exc}", path=path) from exc


def _single(value: Any, key: str) -> Any:
    if isinstance(value, (list, tuple)):
        (item,) = _values(value, key, (1,))
        return item
    return value


def _values(value: Any, key: str, arities: tuple[int, ...]) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list of {' or '.join(map(str, arities))} values: {value!r}")
    if len(value) not in arities:
        raise ValueError(
            f"{key} takes {' or '.join(map(str, arities))} values, got {len(value)}"
        )
    return list(value)


def _parse_watermark(name: str, value: Any) -> WatermarkSettings:
    try:
        if isinstance(value, Mapping):
            offset = tuple(value.get("offset", (0, 0)))
            return WatermarkSettings(anchor=value["anchor"], offset=offset)
        return WatermarkSettings(anchor=value)
    except (KeyError, ValueError) as exc:
        raise ConfigurationError(
            f"Thumbnail {name!r}: invalid watermark: {exc}",
            path=f"thumbs.{name}.watermark",
        ) from exc


def _parse_background(value: Any) -> Optional[Color]:
    if value is None:
        return None
    try:
        return Color.from_sequence(value)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid background: {exc}", path="background") from exc
