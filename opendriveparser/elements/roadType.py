from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# factors to m/s, OpenDRIVE treats a missing unit as m/s
SPEED_UNITS = {
    "": 1.0,
    "m/s": 1.0,
    "km/h": 1.0 / 3.6,
    "mph": 0.44704,
}


@dataclass(frozen=True)
class RoadTypeSpeed:
    """Road type and speed limit valid from sPos onward."""
    sPos: float = 0.0
    type: str = ""
    maxSpeed: float = 0.0
    unit: str = ""

    @property
    def maxSpeedMps(self) -> Optional[float]:
        factor = SPEED_UNITS.get(self.unit)
        if factor is None:
            return None
        return self.maxSpeed * factor
