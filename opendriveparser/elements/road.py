from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..elements.roadLanes import LaneSection
from ..elements.roadLink import Link
from ..elements.roadType import RoadTypeSpeed


@dataclass
class Road:
    id: int = 0
    name: str = ""
    length: float = 0.0
    # None when the road is not part of a junction
    junction: Optional[int] = None

    link: Link = field(default_factory=Link)
    types: list[RoadTypeSpeed] = field(default_factory=list)
    laneSections: list[LaneSection] = field(default_factory=list)

    def getLaneSection(self, laneSectionIdx: int) -> Optional[LaneSection]:
        if 0 <= laneSectionIdx < len(self.laneSections):
            return self.laneSections[laneSectionIdx]
        return None

    def getLastLaneSectionIdx(self) -> int:
        """Returns the index of the last lane section of the road"""
        return max(len(self.laneSections) - 1, 0)
