from .elements import (
    Lane,
    LaneLink,
    LaneOffset,
    LaneSection,
    Link,
    Predecessor,
    Road,
    RoadTypeSpeed,
    Successor,
)
from .exceptions import LaneOffsetUnderflowError
from .geom import CubicPolynomial
from .mapBuilder import LANE_NO_LINK, ROAD_NO_LINK, MapBuilder, RecordingMapBuilder
from .parser import RoadParser, load_opendrive, parse_opendrive
