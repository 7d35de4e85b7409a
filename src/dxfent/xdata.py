"""Extended entity data (XDATA) payloads.

dxfent does not interpret extended data.  An entity only carries an
optional mapping of ``ApplicationRegistry`` to ``XData`` and hands the
same mapping on to entities derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from dxfent.tables import ApplicationRegistry


class XDataCode(IntEnum):
    """DXF group codes allowed inside an XDATA block."""

    STRING = 1000
    APPLICATION_NAME = 1001
    CONTROL_STRING = 1002
    LAYER_NAME = 1003
    BINARY_DATA = 1004
    DATABASE_HANDLE = 1005
    REAL_X = 1010
    REAL_Y = 1020
    REAL_Z = 1030
    WORLD_SPACE_POSITION_X = 1011
    WORLD_SPACE_DISPLACEMENT_X = 1012
    WORLD_DIRECTION_X = 1013
    REAL = 1040
    DISTANCE = 1041
    SCALE_FACTOR = 1042
    INT16 = 1070
    INT32 = 1071


@dataclass(frozen=True)
class XDataRecord:
    code: XDataCode
    value: Any

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "code", XDataCode(self.code))
        except ValueError:
            raise ValueError('bad xdata group code: {}'.format(self.code)) from None


@dataclass
class XData:
    """Records attached to an entity on behalf of one application."""

    application_registry: ApplicationRegistry
    records: List[XDataRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.application_registry, ApplicationRegistry):
            raise ValueError('bad application registry: {!r}'.format(self.application_registry))

    def append(self, code, value) -> XDataRecord:
        record = XDataRecord(code, value)
        self.records.append(record)
        return record

    def extend(self, pairs: Iterable[Tuple[int, Any]]) -> None:
        for code, value in pairs:
            self.append(code, value)

    def to_tags(self) -> List[Tuple[int, Any]]:
        """records as plain ``(group code, value)`` pairs"""
        return [(int(r.code), r.value) for r in self.records]

    def __iter__(self) -> Iterator[XDataRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


XDataSlot = Optional[Dict[ApplicationRegistry, XData]]


__all__ = [
    "XDataCode",
    "XDataRecord",
    "XData",
    "XDataSlot",
]
