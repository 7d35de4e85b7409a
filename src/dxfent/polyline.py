"""Two dimensional polyline entity, the output of circle tessellation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from dxfent.entity import DxfEntity, DxfObjectCode, EntityType
from dxfent.vectors import Vector2, isgoodnum


@dataclass(frozen=True)
class PolylineVertex:
    """Polyline vertex in object coordinates.

    ``bulge`` is the tangent of a quarter of the included angle of the
    arc segment to the next vertex; zero means a straight segment.
    """

    location: Vector2
    bulge: float = 0.0

    @classmethod
    def xy(cls, x: float, y: float, bulge: float = 0.0) -> "PolylineVertex":
        return cls(Vector2(x, y), bulge)

    @property
    def x(self) -> float:
        return self.location.x

    @property
    def y(self) -> float:
        return self.location.y


class Polyline(DxfEntity):
    """Open or closed sequence of 2D vertexes lying in the OCS plane at ``elevation``.

    A closed polyline does not repeat its first vertex; closure is only
    expressed by ``is_closed``.
    """

    TYPE = EntityType.POLYLINE

    def __init__(self, vertexes: Optional[Iterable[PolylineVertex]] = None,
                 is_closed: bool = False):
        super().__init__(DxfObjectCode.POLYLINE)
        self.vertexes: List[PolylineVertex] = list(vertexes) if vertexes else []
        self.is_closed = is_closed
        self.__elevation = 0.0
        self.__thickness = 0.0

    @property
    def elevation(self) -> float:
        return self.__elevation

    @elevation.setter
    def elevation(self, e):
        if not isgoodnum(e):
            raise ValueError('bad elevation: {}'.format(e))
        self.__elevation = float(e)

    @property
    def thickness(self) -> float:
        return self.__thickness

    @thickness.setter
    def thickness(self, t):
        if not isgoodnum(t):
            raise ValueError('bad thickness: {}'.format(t))
        self.__thickness = float(t)

    def points(self) -> List[Vector2]:
        return [v.location for v in self.vertexes]

    def __len__(self) -> int:
        return len(self.vertexes)
