"""Circle entity and its polygonal approximation.

A ``Circle`` stores its center in world coordinates together with a
normal that defines the plane of the circle.  ``Circle.to_polyline()``
approximates the circle with a closed ``Polyline`` whose vertexes are
expressed in the circle's object coordinate system (OCS), which is how
DXF stores planar 2D polylines::

    c = Circle(Vector3(10, 5, 0), 2.5)
    c.layer = Layer.named("HOLES")
    poly = c.to_polyline(32)

The first vertex always sits at the local "north" of the circle and
vertexes run counter-clockwise around the normal.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from dxfent.entity import DxfEntity, DxfObjectCode, EntityType, PrecisionError
from dxfent.polyline import Polyline, PolylineVertex
from dxfent.vectors import Vector2, Vector3, isgoodnum
from dxfent.xform import CoordinateSystem, TransformFunc, transform as ocs_transform

logger = logging.getLogger(__name__)

MIN_PRECISION = 3


class Circle(DxfEntity):
    """DXF circle entity."""

    TYPE = EntityType.CIRCLE

    def __init__(self, center: Optional[Vector3] = None, radius: float = 1.0):
        super().__init__(DxfObjectCode.CIRCLE)
        self.center = Vector3.zero() if center is None else center
        self.radius = radius
        self.thickness = 0.0

    @property
    def center(self) -> Vector3:
        """circle center in world coordinates"""
        return self.__center.copy()

    @center.setter
    def center(self, c):
        self.__center = Vector3.of(c)

    @property
    def radius(self) -> float:
        return self.__radius

    @radius.setter
    def radius(self, r):
        # non-positive radii are accepted, see to_polyline()
        if not isgoodnum(r):
            raise ValueError('bad radius: {}'.format(r))
        self.__radius = float(r)

    @property
    def thickness(self) -> float:
        """extrusion depth along the normal"""
        return self.__thickness

    @thickness.setter
    def thickness(self, t):
        if not isgoodnum(t):
            raise ValueError('bad thickness: {}'.format(t))
        self.__thickness = float(t)

    def polygonal_vertexes(self, precision: int) -> List[Vector2]:
        """Sample ``precision`` points of the circle around the OCS origin.

        The first sample lies at angle pi/2, later samples follow in
        increasing angle order.
        """
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError('precision must be an integer, got {!r}'.format(precision))
        if precision < MIN_PRECISION:
            raise PrecisionError('precision', precision,
                                 'the circle precision must be greater or equal to three')

        step = 2.0 * math.pi / precision
        vertexes = []
        for i in range(precision):
            angle = math.pi / 2.0 + step * i
            vertexes.append(Vector2(self.radius * math.cos(angle),
                                    self.radius * math.sin(angle)))
        return vertexes

    def to_polyline(self, precision: int,
                    transform: TransformFunc = ocs_transform) -> Polyline:
        """Approximate the circle with a closed polyline of ``precision`` vertexes.

        ``transform`` maps the world center into the circle's OCS; it
        defaults to ``dxfent.xform.transform``.  The polyline shares the
        color, layer, line type and xdata references of this circle.
        """
        vertexes = self.polygonal_vertexes(precision)
        if self.radius <= 0.0:
            logger.warning("tessellating %s with non-positive radius %g", self, self.radius)

        ocs_center = transform(self.center, self.normal,
                               CoordinateSystem.WORLD, CoordinateSystem.OBJECT)

        poly = Polyline(is_closed=True)
        poly.color = self.color
        poly.layer = self.layer
        poly.line_type = self.line_type
        poly.normal = self.normal
        poly.elevation = ocs_center.z
        poly.thickness = self.thickness
        poly.xdata = self.xdata

        for v in vertexes:
            poly.vertexes.append(PolylineVertex.xy(v.x + ocs_center.x, v.y + ocs_center.y))

        logger.debug("tessellated %s into %d vertexes at elevation %g",
                     self, precision, poly.elevation)
        return poly
