## base class of DXF entities for dxfent
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2024 dxfent contributors
## All rights reserved
## See licensing terms in vectors.py

from __future__ import annotations

from abc import ABC
from collections.abc import Mapping
from enum import Enum

from dxfent.tables import AciColor, Layer, LineType
from dxfent.vectors import Vector3
from dxfent.xdata import XDataSlot


class EntityType(Enum):
    CIRCLE = "Circle"
    POLYLINE = "Polyline"


class DxfObjectCode(str, Enum):
    CIRCLE = "CIRCLE"
    POLYLINE = "POLYLINE"


class InvalidReferenceError(ValueError):
    """Raised when a shared attribute is set to None or to the wrong kind of handle."""


class PrecisionError(ValueError):
    """Raised when a tessellation precision is out of range."""

    def __init__(self, parameter, value, message):
        super().__init__('{} = {}: {}'.format(parameter, value, message))
        self.parameter = parameter
        self.value = value


class DxfEntity(ABC):
    """Attribute surface shared by every dxfent entity.

    Color, layer and line type are references to shared handles from
    ``dxfent.tables``.  The normal is always stored normalized.
    """

    TYPE: EntityType

    def __init__(self, code: DxfObjectCode):
        self.__code = code
        self.__color = AciColor.BY_LAYER
        self.__layer = Layer.DEFAULT
        self.__line_type = LineType.BY_LAYER
        self.__normal = Vector3.unit_z()
        self.__xdata = None

    @property
    def code(self) -> DxfObjectCode:
        return self.__code

    @property
    def type(self) -> EntityType:
        return self.TYPE

    ## Various property functions

    @property
    def color(self) -> AciColor:
        return self.__color

    def _set_color(self, c):
        self.__color = c

    @color.setter
    def color(self, c):
        if c is None:
            raise InvalidReferenceError('color reference may not be None')
        if not isinstance(c, AciColor):
            raise InvalidReferenceError('bad color: {!r}'.format(c))
        self._set_color(c)

    @property
    def layer(self) -> Layer:
        return self.__layer

    def _set_layer(self, lyr):
        self.__layer = lyr

    @layer.setter
    def layer(self, lyr):
        if lyr is None:
            raise InvalidReferenceError('layer reference may not be None')
        if not isinstance(lyr, Layer):
            raise InvalidReferenceError('bad layer: {!r}'.format(lyr))
        self._set_layer(lyr)

    @property
    def line_type(self) -> LineType:
        return self.__line_type

    def _set_line_type(self, lt):
        self.__line_type = lt

    @line_type.setter
    def line_type(self, lt):
        if lt is None:
            raise InvalidReferenceError('line type reference may not be None')
        if not isinstance(lt, LineType):
            raise InvalidReferenceError('bad line type: {!r}'.format(lt))
        self._set_line_type(lt)

    @property
    def normal(self) -> Vector3:
        # copy, Vector3 is mutable
        return self.__normal.copy()

    @normal.setter
    def normal(self, n):
        # normalize a copy, the caller keeps its own vector
        self.__normal = Vector3.of(n).normalize()

    @property
    def xdata(self) -> XDataSlot:
        return self.__xdata

    @xdata.setter
    def xdata(self, xd: XDataSlot):
        if xd is not None and not isinstance(xd, Mapping):
            raise ValueError('bad xdata, expected a mapping or None: {!r}'.format(xd))
        self.__xdata = xd

    def __str__(self):
        return self.TYPE.value

    def __repr__(self):
        return '<{} layer={} color={} line_type={}>'.format(
            self.TYPE.value, self.layer, self.color, self.line_type)
