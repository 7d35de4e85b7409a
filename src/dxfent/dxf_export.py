"""
Hand dxfent entities to an ezdxf document.

dxfent does not encode DXF itself: these helpers translate entities into
ezdxf entities in a modelspace, registering the layers, line types and
application ids they reference on first use.

Copyright (c) 2024 dxfent contributors
All rights reserved (MIT License)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import ezdxf

from dxfent.circle import Circle
from dxfent.config import DEFAULT_DXF_VERSION
from dxfent.entity import DxfEntity, EntityType
from dxfent.polyline import Polyline
from dxfent.tables import ApplicationRegistry, Layer, LineType
from dxfent.xform import CoordinateSystem, transform

logger = logging.getLogger(__name__)


def new_document(dxfversion: Optional[str] = None):
    """Create an empty ezdxf document.

    setup=False avoids creating default blocks and styles the entities
    never reference.
    """
    if dxfversion is None:
        dxfversion = DEFAULT_DXF_VERSION
    return ezdxf.new(dxfversion=dxfversion, setup=False)


def ensure_linetype(doc, line_type: LineType) -> str:
    """Register ``line_type`` in ``doc`` unless it is already known; return its name."""
    name = line_type.name
    if line_type.is_by_layer or line_type.is_by_block:
        return name
    if not doc.linetypes.has_entry(name):
        # ezdxf simple patterns lead with the total pattern length
        pattern = [line_type.total_length, *line_type.pattern] if line_type.pattern else [0.0]
        doc.linetypes.add(name, pattern, description=line_type.description)
    return name


def ensure_layer(doc, layer: Layer) -> str:
    name = layer.name
    if not doc.layers.has_entry(name):
        linetype = ensure_linetype(doc, layer.line_type)
        doc.layers.add(name, color=layer.color.index, linetype=linetype)
    return name


def ensure_appid(doc, registry: ApplicationRegistry) -> str:
    name = registry.name
    if not doc.appids.has_entry(name):
        doc.appids.new(name)
    return name


def _common_attribs(doc, entity: DxfEntity) -> Dict[str, Any]:
    return {
        'layer': ensure_layer(doc, entity.layer),
        'color': entity.color.index,
        'linetype': ensure_linetype(doc, entity.line_type),
        'extrusion': entity.normal.to_tuple(),
    }


def _attach_xdata(doc, dxf_entity, entity: DxfEntity) -> None:
    if not entity.xdata:
        return
    for registry, xdata in entity.xdata.items():
        dxf_entity.set_xdata(ensure_appid(doc, registry), xdata.to_tags())


def add_circle(msp, circle: Circle):
    """Add ``circle`` to the layout ``msp`` as a DXF CIRCLE.

    DXF stores the circle center in OCS, so the world center is mapped
    through the circle normal first.
    """
    doc = msp.doc
    center = transform(circle.center, circle.normal,
                       CoordinateSystem.WORLD, CoordinateSystem.OBJECT)
    attribs = _common_attribs(doc, circle)
    attribs['thickness'] = circle.thickness
    e = msp.add_circle(center.to_tuple(), circle.radius, dxfattribs=attribs)
    _attach_xdata(doc, e, circle)
    return e


def add_polyline(msp, polyline: Polyline):
    """Add ``polyline`` to the layout ``msp`` as a DXF LWPOLYLINE."""
    doc = msp.doc
    attribs = _common_attribs(doc, polyline)
    attribs['elevation'] = polyline.elevation
    attribs['thickness'] = polyline.thickness
    points = [(v.x, v.y, v.bulge) for v in polyline.vertexes]
    e = msp.add_lwpolyline(points, format="xyb", close=polyline.is_closed,
                           dxfattribs=attribs)
    _attach_xdata(doc, e, polyline)
    return e


def add_entity(msp, entity: DxfEntity):
    if not isinstance(entity, DxfEntity):
        raise TypeError('bad thing passed to add_entity: {!r}'.format(entity))
    if entity.type == EntityType.CIRCLE:
        return add_circle(msp, entity)
    if entity.type == EntityType.POLYLINE:
        return add_polyline(msp, entity)
    raise TypeError('unsupported entity type: {}'.format(entity.type))


def write_dxf(entities: Iterable[DxfEntity], output_path: Path | str,
              dxfversion: Optional[str] = None) -> Path:
    """Write ``entities`` to a new DXF file and return its path.

    A missing ``.dxf`` suffix is appended.
    """
    path = Path(output_path)
    if path.suffix.lower() != '.dxf':
        path = path.with_name(path.name + '.dxf')

    doc = new_document(dxfversion)
    msp = doc.modelspace()
    count = 0
    for entity in entities:
        add_entity(msp, entity)
        count += 1
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.saveas(path)
    logger.info("wrote %d entities to %s (%s)", count, path, doc.dxfversion)
    return path


__all__ = [
    "new_document",
    "ensure_linetype",
    "ensure_layer",
    "ensure_appid",
    "add_circle",
    "add_polyline",
    "add_entity",
    "write_dxf",
]
