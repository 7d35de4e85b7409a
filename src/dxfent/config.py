"""Settings for dxfent tools, stored as YAML."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from dxfent.circle import MIN_PRECISION

DEFAULT_PRECISION = 64
DEFAULT_DXF_VERSION = "R2010"
DXF_VERSIONS = ("R2000", "R2004", "R2007", "R2010", "R2013", "R2018")


@dataclass
class Settings:
    default_precision: int = DEFAULT_PRECISION
    dxf_version: str = DEFAULT_DXF_VERSION
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        p = self.default_precision
        if isinstance(p, bool) or not isinstance(p, int) or p < MIN_PRECISION:
            raise ValueError('default_precision must be an integer >= {}, got {!r}'.format(MIN_PRECISION, p))
        if self.dxf_version not in DXF_VERSIONS:
            raise ValueError('unsupported dxf_version: {!r}'.format(self.dxf_version))
        level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError('bad log_level: {!r}'.format(self.log_level))
        self.log_level = level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        if not isinstance(data, Mapping):
            raise ValueError('settings must be a mapping, got {!r}'.format(data))
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError('unknown settings: {}'.format(", ".join(unknown)))
        return cls(**dict(data))

    def to_mapping(self) -> Dict[str, Any]:
        return asdict(self)


def load_settings(path: Path | str) -> Settings:
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"settings file not found: {settings_path}")
    with settings_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return Settings.from_mapping(data)


def save_settings(settings: Settings, path: Path | str) -> Path:
    settings_path = Path(path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with settings_path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(settings.to_mapping(), fp, sort_keys=False)
    return settings_path


__all__ = [
    "DEFAULT_PRECISION",
    "DEFAULT_DXF_VERSION",
    "DXF_VERSIONS",
    "Settings",
    "load_settings",
    "save_settings",
]
