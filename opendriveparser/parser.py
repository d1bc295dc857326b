from __future__ import annotations

import os
from collections import deque

from lxml import etree

import logger
from utils.load_config import load_config

from . import attributes as attr
from .elements.road import Road
from .elements.roadLanes import Lane, LaneLink, LaneOffset, LaneSection
from .elements.roadLink import Predecessor, Successor
from .elements.roadType import RoadTypeSpeed
from .exceptions import LaneOffsetUnderflowError
from .mapBuilder import LANE_NO_LINK, ROAD_NO_LINK, MapBuilder

logging = logger.get_logger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


def load_opendrive(xodr_path: str):
    """Read an OpenDRIVE file and return its root element."""
    tree = etree.parse(xodr_path)
    return tree.getroot()


def parse_opendrive(rootNode, mapBuilder: MapBuilder, **kwargs) -> list[Road]:
    """Extract every road below rootNode and forward it to mapBuilder.

    Keyword arguments are passed to RoadParser.
    """
    return RoadParser(**kwargs).parse(rootNode, mapBuilder)


class RoadParser:
    """Reads road, lane offset, lane section and lane elements of an OpenDRIVE
    document and hands them to a MapBuilder.

    Lane offsets carry no reference to the lane section they belong to: the
    n-th laneSection of a road takes the n-th laneOffset of the same road.
    A road with fewer laneOffset than laneSection elements raises
    LaneOffsetUnderflowError unless strictLaneOffsets is disabled, in which
    case the exhausted sections get a zero offset.

    Attributes:
        config: The configuration dictionary.
        strictLaneOffsets: Whether a lane offset underflow is fatal.
        rootTag: Tag of the element whose road children are read.
    """

    def __init__(self,
                 config_file_path: str = DEFAULT_CONFIG_PATH,
                 strictLaneOffsets: bool = None,
                 rootTag: str = None) -> None:
        self.config = load_config(config_file_path)
        self.strictLaneOffsets = (
            bool(self.config.get("STRICT_LANE_OFFSETS", True))
            if strictLaneOffsets is None else strictLaneOffsets
        )
        self.rootTag = (
            str(self.config.get("ROOT_TAG", "OpenDRIVE"))
            if rootTag is None else rootTag
        )

    def parse(self, rootNode, mapBuilder: MapBuilder) -> list[Road]:
        roads = self.extractRoads(rootNode)
        self.forwardRoads(roads, mapBuilder)
        return roads

    def extractRoads(self, rootNode) -> list[Road]:
        roads = [self.parseRoad(road) for road in self._roadNodes(rootNode)]
        logging.info(
            "extracted %d road(s), %d lane section(s)",
            len(roads), sum(len(road.laneSections) for road in roads))
        return roads

    def findLaneOffsetShortfalls(self, rootNode) -> dict[int, tuple[int, int]]:
        """Roads with fewer lane offsets than lane sections.

        Returns:
            dict: road id -> (number of laneOffset, number of laneSection)
        """
        shortfalls = {}
        for road in self._roadNodes(rootNode):
            lanes = attr.child(road, "lanes")
            numOffsets = len(attr.children(lanes, "laneOffset"))
            numSections = len(attr.children(lanes, "laneSection"))
            if numOffsets < numSections:
                shortfalls[attr.as_int(road, "id")] = (numOffsets, numSections)
        return shortfalls

    def parseRoad(self, road) -> Road:
        newRoad = Road()

        newRoad.id = attr.as_int(road, "id")
        newRoad.name = attr.as_str(road, "name")
        newRoad.length = attr.as_float(road, "length")
        junction = attr.as_int(road, "junction")
        newRoad.junction = None if junction == -1 else junction

        # Links
        link = attr.child(road, "link")
        if link is not None:
            predecessor = attr.child(link, "predecessor")
            if predecessor is not None:
                newRoad.link.predecessor = Predecessor(
                    elementId=attr.as_int(predecessor, "elementId"),
                    elementType=attr.as_str(predecessor, "elementType"),
                    contactPoint=attr.as_str(predecessor, "contactPoint"),
                )

            successor = attr.child(link, "successor")
            if successor is not None:
                newRoad.link.successor = Successor(
                    elementId=attr.as_int(successor, "elementId"),
                    elementType=attr.as_str(successor, "elementType"),
                    contactPoint=attr.as_str(successor, "contactPoint"),
                )

        # Types
        for roadType in attr.children(road, "type"):
            speed = attr.child(roadType, "speed")
            newRoad.types.append(RoadTypeSpeed(
                sPos=attr.as_float(roadType, "s"),
                type=attr.as_str(roadType, "type"),
                maxSpeed=attr.as_float(speed, "max"),
                unit=attr.as_str(speed, "unit"),
            ))

        lanes = attr.child(road, "lanes")

        # Lane offsets, consumed front first by the lane sections below
        laneOffsets = deque(
            LaneOffset(
                sPos=attr.as_float(laneOffset, "s"),
                a=attr.as_float(laneOffset, "a"),
                b=attr.as_float(laneOffset, "b"),
                c=attr.as_float(laneOffset, "c"),
                d=attr.as_float(laneOffset, "d"),
            )
            for laneOffset in attr.children(lanes, "laneOffset")
        )
        numLaneOffsets = len(laneOffsets)

        # Lane sections
        laneSections = attr.children(lanes, "laneSection")
        for laneSectionIdx, laneSection in enumerate(laneSections):
            sPos = attr.as_float(laneSection, "s")

            if laneOffsets:
                laneOffset = laneOffsets.popleft()
            elif self.strictLaneOffsets:
                raise LaneOffsetUnderflowError(
                    newRoad.id, laneSectionIdx, numLaneOffsets, len(laneSections))
            else:
                logging.warning(
                    "road %d: no lane offset left for lane section %d, using a zero offset",
                    newRoad.id, laneSectionIdx)
                laneOffset = LaneOffset(sPos=sPos)

            newLaneSection = LaneSection(
                idx=laneSectionIdx, sPos=sPos, laneOffset=laneOffset)

            # Center lane carries no information for the map builder
            for sideTag in ("left", "right"):
                side = attr.child(laneSection, sideTag)
                for lane in attr.children(side, "lane"):
                    newLaneSection.lanes.append(self.parseLane(lane))

            newRoad.laneSections.append(newLaneSection)

        if laneOffsets:
            logging.debug(
                "road %d: %d lane offset(s) not assigned to a lane section",
                newRoad.id, len(laneOffsets))

        logging.debug(
            "road %d: %d type(s), %d lane section(s)",
            newRoad.id, len(newRoad.types), len(newRoad.laneSections))

        return newRoad

    def parseLane(self, lane) -> Lane:
        predecessorId = None
        successorId = None

        link = attr.child(lane, "link")
        if link is not None:
            predecessor = attr.child(link, "predecessor")
            if predecessor is not None:
                predecessorId = attr.as_int(predecessor, "id")
            successor = attr.child(link, "successor")
            if successor is not None:
                successorId = attr.as_int(successor, "id")

        return Lane(
            id=attr.as_int(lane, "id"),
            type=attr.as_str(lane, "type", "none"),
            level=attr.as_bool(lane, "level"),
            link=LaneLink(predecessorId=predecessorId, successorId=successorId),
        )

    def forwardRoads(self, roads: list[Road], mapBuilder: MapBuilder) -> None:
        for road in roads:
            mapBuilder.addRoad(
                road.id,
                road.name,
                road.length,
                _orDefault(road.junction, ROAD_NO_LINK),
                _orDefault(road.link.predecessorId, ROAD_NO_LINK),
                _orDefault(road.link.successorId, ROAD_NO_LINK),
            )

            for roadType in road.types:
                mapBuilder.setRoadTypeSpeed(
                    road.id, roadType.sPos, roadType.type,
                    roadType.maxSpeed, roadType.unit)

            for sectionIndex, laneSection in enumerate(road.laneSections):
                mapBuilder.addRoadSection(road.id, laneSection.polynomial)

                for lane in laneSection.lanes:
                    mapBuilder.addRoadSectionLane(
                        road.id,
                        sectionIndex,
                        lane.id,
                        lane.type,
                        lane.level,
                        _orDefault(lane.link.predecessorId, LANE_NO_LINK),
                        _orDefault(lane.link.successorId, LANE_NO_LINK),
                    )

    def _roadNodes(self, rootNode) -> list:
        # Only accept xml element
        if isinstance(rootNode, etree._ElementTree):
            rootNode = rootNode.getroot()
        if not etree.iselement(rootNode):
            raise TypeError("RootNode is not a xml element")

        if attr.strip_ns(rootNode.tag) != self.rootTag:
            logging.warning(
                "root element <%s> is not <%s>, no roads read",
                attr.strip_ns(rootNode.tag), self.rootTag)
            return []

        return attr.children(rootNode, "road")


def _orDefault(value, default):
    return default if value is None else value
