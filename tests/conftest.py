import os

import pytest
from lxml import etree

from opendriveparser import RecordingMapBuilder, RoadParser

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SIMPLE_ROADS_FILE = os.path.join(
    ROOT_DIR, "networkFiles", "simpleRoads", "simpleRoads.xodr")


def make_doc(body: str):
    return etree.fromstring("<OpenDRIVE>" + body + "</OpenDRIVE>")


@pytest.fixture
def builder():
    return RecordingMapBuilder()


@pytest.fixture
def parser():
    return RoadParser()


@pytest.fixture
def simple_roads_file():
    return SIMPLE_ROADS_FILE
