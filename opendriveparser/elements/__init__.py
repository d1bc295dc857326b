from .road import Road
from .roadLanes import Lane, LaneLink, LaneOffset, LaneSection
from .roadLink import Link, Predecessor, Successor
from .roadType import RoadTypeSpeed

__all__ = [
    "Road",
    "Lane",
    "LaneLink",
    "LaneOffset",
    "LaneSection",
    "Link",
    "Predecessor",
    "Successor",
    "RoadTypeSpeed",
]
