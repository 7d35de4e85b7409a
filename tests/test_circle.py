import logging
import math

import pytest

from dxfent.circle import Circle
from dxfent.entity import DxfObjectCode, EntityType, InvalidReferenceError, PrecisionError
from dxfent.polyline import Polyline
from dxfent.tables import AciColor, ApplicationRegistry, Layer, LineType
from dxfent.vectors import Vector2, Vector3
from dxfent.xdata import XData
from dxfent.xform import CoordinateSystem, transform
## unit tests for dxfent circle.py


class FakeTransform:
    """coordinate transform with a fixed answer that records its calls"""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, point, normal, from_cs, to_cs):
        self.calls.append((point, normal, from_cs, to_cs))
        return self.result


class TestCircleAttributes:
    """unit tests for the circle data model"""

    def test_default(self):
        c = Circle()
        assert c.center == Vector3(0, 0, 0)
        assert c.radius == 1.0
        assert c.thickness == 0.0
        assert c.normal == Vector3(0, 0, 1)
        assert c.layer is Layer.DEFAULT
        assert c.color is AciColor.BY_LAYER
        assert c.line_type is LineType.BY_LAYER
        assert c.xdata is None
        assert c.type == EntityType.CIRCLE
        assert c.code == DxfObjectCode.CIRCLE
        assert str(c) == "Circle"

    def test_explicit(self):
        center = Vector3(1, 2, 3)
        c = Circle(center, 4.5)
        assert c.center == center
        assert c.radius == 4.5
        center.x = 100.0
        assert c.center.x == 1.0

    def test_normal_is_normalized(self):
        c = Circle()
        for n in [Vector3(0, 0, 10), Vector3(1, 2, 3), Vector3(-0.001, 0, 0), Vector3(5, -5, 1e3)]:
            c.normal = n
            assert c.normal.magnitude() == pytest.approx(1.0)
            assert c.normal.isclose(n.normalized())

    def test_normal_setter_copies(self):
        c = Circle()
        n = Vector3(0, 0, 5)
        c.normal = n
        assert n == Vector3(0, 0, 5)
        assert c.normal is not n

    def test_zero_normal_rejected(self):
        c = Circle()
        c.normal = Vector3(0, 1, 1)
        before = c.normal
        with pytest.raises(ValueError):
            c.normal = Vector3.zero()
        assert c.normal == before

    def test_returned_normal_is_detached(self):
        c = Circle()
        c.normal.x = 3.0
        assert c.normal.magnitude() == pytest.approx(1.0)
        n = c.normal
        n.z = 5.0
        assert c.normal == Vector3(0, 0, 1)

    def test_returned_center_is_detached(self):
        c = Circle(Vector3(1, 2, 3), 1.0)
        c.center.x = 42.0
        center = c.center
        center.y = -7.0
        assert c.center == Vector3(1, 2, 3)

    @pytest.mark.parametrize("attr", ["color", "layer", "line_type"])
    def test_none_reference_rejected(self, attr):
        c = Circle()
        before = getattr(c, attr)
        with pytest.raises(InvalidReferenceError):
            setattr(c, attr, None)
        assert getattr(c, attr) is before

    def test_wrong_reference_rejected(self):
        c = Circle()
        with pytest.raises(InvalidReferenceError):
            c.layer = "0"
        with pytest.raises(InvalidReferenceError):
            c.color = 1
        with pytest.raises(ValueError):
            c.line_type = LineType.CONTINUOUS.name
        assert c.layer is Layer.DEFAULT

    def test_set_references(self):
        c = Circle()
        layer = Layer.named("CircleAttrLayer", AciColor.GREEN)
        c.layer = layer
        c.color = AciColor.RED
        c.line_type = LineType.CONTINUOUS
        assert c.layer is layer
        assert c.color is AciColor.RED
        assert c.line_type is LineType.CONTINUOUS

    def test_bad_scalars(self):
        c = Circle()
        with pytest.raises(ValueError):
            c.radius = "big"
        with pytest.raises(ValueError):
            c.thickness = None
        assert c.radius == 1.0


class TestTessellation:
    """unit tests for Circle.to_polyline"""

    def test_default_square(self):
        poly = Circle().to_polyline(4)
        assert isinstance(poly, Polyline)
        assert len(poly.vertexes) == 4
        assert poly.is_closed
        assert poly.elevation == 0.0
        expected = [Vector2(0, 1), Vector2(-1, 0), Vector2(0, -1), Vector2(1, 0)]
        for v, e in zip(poly.points(), expected):
            assert v.isclose(e)

    @pytest.mark.parametrize("precision", [3, 4, 7, 32, 100])
    def test_vertex_count_and_radius(self, precision):
        c = Circle(Vector3(3, -2, 1.5), 2.75)
        c.normal = Vector3(1, 2, 3)
        poly = c.to_polyline(precision)
        ocs_center = transform(c.center, c.normal, CoordinateSystem.WORLD, CoordinateSystem.OBJECT)
        assert len(poly) == precision
        for v in poly.points():
            d = math.hypot(v.x - ocs_center.x, v.y - ocs_center.y)
            assert d == pytest.approx(2.75)
        assert poly.elevation == pytest.approx(ocs_center.z)

    def test_counter_clockwise_from_north(self):
        poly = Circle(Vector3(0, 0, 0), 2.0).to_polyline(12)
        pts = poly.points()
        assert pts[0].isclose(Vector2(0, 2))
        angles = [math.atan2(p.y, p.x) % (2 * math.pi) for p in pts]
        steps = [(b - a) % (2 * math.pi) for a, b in zip(angles, angles[1:])]
        for s in steps:
            assert s == pytest.approx(2 * math.pi / 12)

    def test_no_repeated_closing_vertex(self):
        poly = Circle().to_polyline(8)
        assert not poly.points()[0].isclose(poly.points()[-1])

    @pytest.mark.parametrize("precision", [2, 1, 0, -5])
    def test_precision_out_of_range(self, precision):
        c = Circle(Vector3(1, 1, 1), 3.0)
        with pytest.raises(PrecisionError) as info:
            c.to_polyline(precision)
        assert info.value.parameter == "precision"
        assert info.value.value == precision
        assert isinstance(info.value, ValueError)
        assert c.center == Vector3(1, 1, 1)
        assert c.radius == 3.0

    def test_precision_must_be_integer(self):
        with pytest.raises(TypeError):
            Circle().to_polyline(4.0)

    def test_attribute_inheritance(self):
        layer = Layer.named("CircleInheritLayer")
        xdata = {ApplicationRegistry.named("CIRCLE_TEST"): XData(ApplicationRegistry.named("CIRCLE_TEST"))}
        c = Circle(Vector3(5, 5, 0), 1.0)
        c.layer = layer
        c.color = AciColor.CYAN
        c.line_type = LineType.CONTINUOUS
        c.thickness = 2.5
        c.xdata = xdata

        poly = c.to_polyline(6)
        assert poly.layer is layer
        assert poly.color is AciColor.CYAN
        assert poly.line_type is LineType.CONTINUOUS
        assert poly.xdata is xdata
        assert poly.thickness == 2.5
        assert poly.is_closed
        assert poly.normal == c.normal

    def test_source_not_mutated(self):
        c = Circle(Vector3(1, 2, 3), 4.0)
        c.normal = Vector3(0, 1, 1)
        before = (c.center.copy(), c.radius, c.normal.copy(), c.thickness)
        c.to_polyline(10)
        assert (c.center, c.radius, c.normal, c.thickness) == before

    def test_independent_lifetime(self):
        c = Circle(Vector3(0, 0, 0), 1.0)
        poly = c.to_polyline(4)
        c.radius = 10.0
        c.center = Vector3(50, 50, 50)
        assert poly.points()[0].isclose(Vector2(0, 1))
        assert poly.elevation == 0.0

    def test_reversed_normal_with_fake_transform(self):
        fake = FakeTransform(Vector3(7.0, -2.0, 11.0))
        c = Circle(Vector3(3, 4, 5), 1.0)
        c.normal = Vector3(0, 0, -1)

        poly = c.to_polyline(4, transform=fake)

        assert len(fake.calls) == 1
        point, normal, from_cs, to_cs = fake.calls[0]
        assert point == Vector3(3, 4, 5)
        assert normal == Vector3(0, 0, -1)
        assert from_cs == CoordinateSystem.WORLD
        assert to_cs == CoordinateSystem.OBJECT
        assert poly.elevation == 11.0
        assert poly.points()[0].isclose(Vector2(7.0, -1.0))
        assert poly.points()[2].isclose(Vector2(7.0, -3.0))

    def test_reversed_normal_default_transform(self):
        c = Circle(Vector3(3, 4, 5), 1.0)
        c.normal = Vector3(0, 0, -2)
        poly = c.to_polyline(4)
        assert poly.elevation == pytest.approx(-5.0)
        assert poly.points()[0].isclose(Vector2(-3.0, 5.0))

    def test_failing_precision_skips_transform(self):
        fake = FakeTransform(Vector3.zero())
        with pytest.raises(PrecisionError):
            Circle().to_polyline(2, transform=fake)
        assert fake.calls == []

    def test_non_positive_radius_is_preserved(self, caplog):
        c = Circle(Vector3(0, 0, 0), -1.0)
        with caplog.at_level(logging.WARNING, logger="dxfent.circle"):
            poly = c.to_polyline(4)
        assert "non-positive radius" in caplog.text
        assert poly.points()[0].isclose(Vector2(0, -1))
        assert len(poly) == 4
