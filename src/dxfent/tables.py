"""Shared drawing attribute handles: colors, line types, layers.

Entities reference these handles, they never own them.  Every handle
is immutable after creation, so a single instance can safely be shared
by any number of entities.  Named handles are interned: asking for the
same name twice through the ``named()`` / ``from_index()`` factories
returns the same object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Tuple

from ezdxf.colors import aci2rgb

BY_BLOCK_INDEX = 0
BY_LAYER_INDEX = 256

_color_cache: Dict[int, "AciColor"] = {}
_linetype_cache: Dict[str, "LineType"] = {}
_layer_cache: Dict[str, "Layer"] = {}
_appid_cache: Dict[str, "ApplicationRegistry"] = {}


@dataclass(frozen=True)
class AciColor:
    """AutoCAD color index, 1-255, or one of the by-block/by-layer sentinels."""

    index: int

    BY_BLOCK: ClassVar["AciColor"]
    BY_LAYER: ClassVar["AciColor"]
    RED: ClassVar["AciColor"]
    YELLOW: ClassVar["AciColor"]
    GREEN: ClassVar["AciColor"]
    CYAN: ClassVar["AciColor"]
    BLUE: ClassVar["AciColor"]
    MAGENTA: ClassVar["AciColor"]
    DEFAULT: ClassVar["AciColor"]

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise ValueError('bad (non-integer) color index: {}'.format(self.index))
        if self.index < BY_BLOCK_INDEX or self.index > BY_LAYER_INDEX:
            raise ValueError('color index out of range 0-256: {}'.format(self.index))

    @classmethod
    def from_index(cls, index: int) -> "AciColor":
        color = _color_cache.get(index)
        if color is None:
            color = cls(index)
            _color_cache[index] = color
        return color

    @property
    def is_by_layer(self) -> bool:
        return self.index == BY_LAYER_INDEX

    @property
    def is_by_block(self) -> bool:
        return self.index == BY_BLOCK_INDEX

    @property
    def rgb(self) -> Tuple[int, int, int]:
        """RGB value of the standard AutoCAD palette entry."""
        if self.is_by_layer or self.is_by_block:
            raise ValueError('{} has no rgb value'.format(self))
        return tuple(aci2rgb(self.index))

    def __str__(self) -> str:
        if self.is_by_layer:
            return "ByLayer"
        if self.is_by_block:
            return "ByBlock"
        return str(self.index)


AciColor.BY_BLOCK = AciColor.from_index(BY_BLOCK_INDEX)
AciColor.BY_LAYER = AciColor.from_index(BY_LAYER_INDEX)
AciColor.RED = AciColor.from_index(1)
AciColor.YELLOW = AciColor.from_index(2)
AciColor.GREEN = AciColor.from_index(3)
AciColor.CYAN = AciColor.from_index(4)
AciColor.BLUE = AciColor.from_index(5)
AciColor.MAGENTA = AciColor.from_index(6)
AciColor.DEFAULT = AciColor.from_index(7)


@dataclass(frozen=True)
class LineType:
    """Named line pattern.

    ``pattern`` holds dash lengths in drawing units: positive values are
    dashes, negative values are gaps and zero is a dot.  An empty pattern
    is a solid line.
    """

    name: str
    description: str = ""
    pattern: Tuple[float, ...] = field(default=())

    BY_LAYER: ClassVar["LineType"]
    BY_BLOCK: ClassVar["LineType"]
    CONTINUOUS: ClassVar["LineType"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError('bad line type name: {!r}'.format(self.name))
        object.__setattr__(self, "pattern", tuple(float(x) for x in self.pattern))

    @classmethod
    def named(cls, name: str, description: str = "", pattern=()) -> "LineType":
        """Return the interned line type called ``name``.

        Description and pattern are only used when the name is seen for
        the first time.
        """
        if not isinstance(name, str) or not name:
            raise ValueError('bad line type name: {!r}'.format(name))
        key = name.lower()
        linetype = _linetype_cache.get(key)
        if linetype is None:
            linetype = cls(name, description, tuple(pattern))
            _linetype_cache[key] = linetype
        return linetype

    @property
    def is_by_layer(self) -> bool:
        return self.name.lower() == "bylayer"

    @property
    def is_by_block(self) -> bool:
        return self.name.lower() == "byblock"

    @property
    def total_length(self) -> float:
        return sum(abs(x) for x in self.pattern)

    def __str__(self) -> str:
        return self.name


LineType.BY_LAYER = LineType.named("ByLayer")
LineType.BY_BLOCK = LineType.named("ByBlock")
LineType.CONTINUOUS = LineType.named("Continuous", "Solid line")


@dataclass(frozen=True)
class Layer:
    """Named layer carrying the color and line type its entities inherit."""

    name: str
    color: AciColor = AciColor.DEFAULT
    line_type: LineType = LineType.CONTINUOUS

    DEFAULT: ClassVar["Layer"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError('bad layer name: {!r}'.format(self.name))
        if not isinstance(self.color, AciColor):
            raise ValueError('bad layer color: {!r}'.format(self.color))
        if self.color.is_by_layer or self.color.is_by_block:
            raise ValueError('layer color must be an explicit index, got {}'.format(self.color))
        if not isinstance(self.line_type, LineType):
            raise ValueError('bad layer line type: {!r}'.format(self.line_type))
        if self.line_type.is_by_layer or self.line_type.is_by_block:
            raise ValueError('layer line type must be explicit, got {}'.format(self.line_type))

    @classmethod
    def named(cls, name: str, color: AciColor = AciColor.DEFAULT,
              line_type: LineType = LineType.CONTINUOUS) -> "Layer":
        """Return the interned layer called ``name``."""
        if not isinstance(name, str) or not name:
            raise ValueError('bad layer name: {!r}'.format(name))
        key = name.lower()
        layer = _layer_cache.get(key)
        if layer is None:
            layer = cls(name, color, line_type)
            _layer_cache[key] = layer
        return layer

    def __str__(self) -> str:
        return self.name


Layer.DEFAULT = Layer.named("0")


@dataclass(frozen=True)
class ApplicationRegistry:
    """Application name that owns a block of extended data."""

    name: str

    DEFAULT: ClassVar["ApplicationRegistry"]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError('bad application registry name: {!r}'.format(self.name))

    @classmethod
    def named(cls, name: str) -> "ApplicationRegistry":
        if not isinstance(name, str) or not name:
            raise ValueError('bad application registry name: {!r}'.format(name))
        key = name.upper()
        appid = _appid_cache.get(key)
        if appid is None:
            appid = cls(name)
            _appid_cache[key] = appid
        return appid

    def __str__(self) -> str:
        return self.name


ApplicationRegistry.DEFAULT = ApplicationRegistry.named("ACAD")


__all__ = [
    "BY_BLOCK_INDEX",
    "BY_LAYER_INDEX",
    "AciColor",
    "LineType",
    "Layer",
    "ApplicationRegistry",
]
