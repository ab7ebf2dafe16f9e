"""Configuration helpers for layout, geometry and navigation components."""

from __future__ import annotations

import copy
from dataclasses import dataclass

BASE_DISTANCE = 0.3
GEODESIC_EPSILON = 1e-10
COORDINATE_EPSILON = 1e-5
# distance kept from the unit circle when a layout position rounds onto it
BOUNDARY_MARGIN = 1e-9


@dataclass
class HyperTreeConfig:
    """Tunable constants shared by the layout and rendering stages."""

    base_distance: float = BASE_DISTANCE
    # spacing heuristic: base + (length_ceiling - base) * cos(turns*pi / (2n + offset))
    length_ceiling: float = 0.95
    spacing_turns: float = 20.0
    spacing_offset: float = 38.0

    def __post_init__(self) -> None:
        if not 0.0 < self.base_distance < 1.0:
            raise ValueError(f"base_distance must lie in (0, 1), got {self.base_distance!r}")
        if not 0.0 < self.length_ceiling < 1.0:
            raise ValueError(f"length_ceiling must lie in (0, 1), got {self.length_ceiling!r}")
        if self.spacing_offset <= 0.0:
            raise ValueError(f"spacing_offset must be positive, got {self.spacing_offset!r}")


_DEFAULT_CONFIG = HyperTreeConfig()


def get_default_config() -> HyperTreeConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: HyperTreeConfig) -> None:
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = copy.deepcopy(config)


__all__ = [
    "BASE_DISTANCE",
    "GEODESIC_EPSILON",
    "COORDINATE_EPSILON",
    "BOUNDARY_MARGIN",
    "HyperTreeConfig",
    "get_default_config",
    "set_default_config",
]
