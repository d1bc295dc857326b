from __future__ import annotations

from abc import ABC, abstractmethod

from .geom.cubicPolynomial import CubicPolynomial

# "no link" values on the builder interface
ROAD_NO_LINK = -1
LANE_NO_LINK = 0


class MapBuilder(ABC):
    """Receives the parsed road network, one call per entity.

    For every road the parser calls, in this order: addRoad, setRoadTypeSpeed
    once per type entry, then for every lane section addRoadSection followed
    by addRoadSectionLane for each lane of that section. sectionIndex is the
    zero-based position of the section within its road.
    """

    @abstractmethod
    def addRoad(self, roadId: int, name: str, length: float, junctionId: int,
                predecessorId: int, successorId: int) -> None:
        pass

    @abstractmethod
    def setRoadTypeSpeed(self, roadId: int, s: float, type: str,
                         maxSpeed: float, unit: str) -> None:
        pass

    @abstractmethod
    def addRoadSection(self, roadId: int, polynomial: CubicPolynomial) -> None:
        pass

    @abstractmethod
    def addRoadSectionLane(self, roadId: int, sectionIndex: int, laneId: int,
                           laneType: str, level: bool,
                           predecessorLaneId: int, successorLaneId: int) -> None:
        pass


class RecordingMapBuilder(MapBuilder):
    """Keeps every builder call as a (method name, args) tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def addRoad(self, roadId, name, length, junctionId, predecessorId, successorId):
        self.calls.append(
            ("addRoad", (roadId, name, length, junctionId, predecessorId, successorId)))

    def setRoadTypeSpeed(self, roadId, s, type, maxSpeed, unit):
        self.calls.append(("setRoadTypeSpeed", (roadId, s, type, maxSpeed, unit)))

    def addRoadSection(self, roadId, polynomial):
        self.calls.append(("addRoadSection", (roadId, polynomial)))

    def addRoadSectionLane(self, roadId, sectionIndex, laneId, laneType, level,
                           predecessorLaneId, successorLaneId):
        self.calls.append(
            ("addRoadSectionLane",
             (roadId, sectionIndex, laneId, laneType, level,
              predecessorLaneId, successorLaneId)))

    def callsTo(self, methodName: str) -> list[tuple]:
        return [args for name, args in self.calls if name == methodName]
