"""
Module: rules

Purpose:
    Provides the LayoutRule variants - the six declarative ways a named
    thumbnail can derive its size from the source image. Each variant is
    an immutable dataclass validated on construction.

Key Classes:
    - ByWidth: Scale to a target width
    - ByHeight: Scale to a target height
    - ByShorterSide: Map the source's shorter side onto its target
    - ByLongerSide: Map the source's longer side onto its target
    - Fit: Box fit, cover (crop) or contain (pad)
    - Square: Square box fit, cover (crop) or contain (pad)

Key Types:
    - LayoutRule: Union of the six variants

Dependencies:
    - dataclasses (std)

Used By:
    - config: Rules are parsed from configuration mappings
    - geometry.resolver: Dispatches a rule onto the resolvers

Design Notes:
    Each variant serializes back to the configuration key it was parsed
    from (``to_dict``), so a ThumbsConfig can be written out and reloaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union


def _require_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer: {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be > 0: {value}")


def _require_bool(name: str, value: bool) -> None:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a bool: {value!r}")


@dataclass(frozen=True, slots=True)
class ByWidth:
    """
    Scale so the width matches, never upscaling.
    
    Example:
        >>> ByWidth(200).to_dict()
        {'width': 200}
    """
    
    kind: ClassVar[str] = "width"
    
    width: int
    
    def __post_init__(self) -> None:
        _require_positive("width", self.width)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: self.width}


@dataclass(frozen=True, slots=True)
class ByHeight:
    """Scale so the height matches, never upscaling."""
    
    kind: ClassVar[str] = "height"
    
    height: int
    
    def __post_init__(self) -> None:
        _require_positive("height", self.height)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: self.height}


@dataclass(frozen=True, slots=True)
class ByShorterSide:
    """
    Map the source's shorter side onto its target.
    
    The other side of the result is then >= its target, which makes this
    the building block of cover-fitting.
    """
    
    kind: ClassVar[str] = "shorter"
    
    width: int
    height: int
    
    def __post_init__(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: [self.width, self.height]}


@dataclass(frozen=True, slots=True)
class ByLongerSide:
    """
    Map the source's longer side onto its target.
    
    The other side of the result is then <= its target, which makes this
    the building block of contain-fitting.
    """
    
    kind: ClassVar[str] = "longer"
    
    width: int
    height: int
    
    def __post_init__(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: [self.width, self.height]}


@dataclass(frozen=True, slots=True)
class Fit:
    """
    Fit the source into a width x height box.
    
    Attributes:
        width: Box width
        height: Box height
        keep_aspect: True = contain (pad), False = cover (crop)
    """
    
    kind: ClassVar[str] = "fit"
    
    width: int
    height: int
    keep_aspect: bool = False
    
    def __post_init__(self) -> None:
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        _require_bool("keep_aspect", self.keep_aspect)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: [self.width, self.height, self.keep_aspect]}


@dataclass(frozen=True, slots=True)
class Square:
    """
    Fit the source into a side x side box.
    
    Attributes:
        side: Box side length
        keep_aspect: True = contain (pad), False = cover (crop)
    """
    
    kind: ClassVar[str] = "square"
    
    side: int
    keep_aspect: bool = False
    
    def __post_init__(self) -> None:
        _require_positive("side", self.side)
        _require_bool("keep_aspect", self.keep_aspect)
    
    def to_dict(self) -> dict[str, Any]:
        return {self.kind: [self.side, self.keep_aspect]}


LayoutRule = Union[ByWidth, ByHeight, ByShorterSide, ByLongerSide, Fit, Square]

# Configuration keys in the order they are tried when parsing
RULE_TYPES: tuple[type, ...] = (ByWidth, ByHeight, ByShorterSide, ByLongerSide, Fit, Square)
RULE_KEYS: tuple[str, ...] = tuple(rule_type.kind for rule_type in RULE_TYPES)
