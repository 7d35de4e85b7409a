# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dxfent")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from dxfent.vectors import Vector2, Vector3
from dxfent.tables import AciColor, ApplicationRegistry, Layer, LineType
from dxfent.xdata import XData, XDataCode, XDataRecord
from dxfent.xform import CoordinateSystem, transform
from dxfent.entity import (
    DxfEntity,
    DxfObjectCode,
    EntityType,
    InvalidReferenceError,
    PrecisionError,
)
from dxfent.polyline import Polyline, PolylineVertex
from dxfent.circle import Circle

__all__ = [
    "__version__",
    "Vector2",
    "Vector3",
    "AciColor",
    "ApplicationRegistry",
    "Layer",
    "LineType",
    "XData",
    "XDataCode",
    "XDataRecord",
    "CoordinateSystem",
    "transform",
    "DxfEntity",
    "DxfObjectCode",
    "EntityType",
    "InvalidReferenceError",
    "PrecisionError",
    "Polyline",
    "PolylineVertex",
    "Circle",
]
