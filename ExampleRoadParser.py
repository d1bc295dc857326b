from rich import print
from rich.table import Table

import logger
from opendriveparser import RecordingMapBuilder, RoadParser, load_opendrive

# config a logger, set use_stdout=True to output log to terminal
log = logger.setup_app_level_logger(file_name="app_debug.log",
                                    level="DEBUG",
                                    use_stdout=False)

xodrFile = 'networkFiles/simpleRoads/simpleRoads.xodr'

if __name__ == '__main__':
    rootNode = load_opendrive(xodrFile)

    parser = RoadParser()
    shortfalls = parser.findLaneOffsetShortfalls(rootNode)
    if shortfalls:
        print('[yellow]roads with missing lane offsets:[/yellow]', shortfalls)

    builder = RecordingMapBuilder()
    roads = parser.parse(rootNode, builder)

    table = Table(title=xodrFile)
    table.add_column('road')
    table.add_column('name')
    table.add_column('length', justify='right')
    table.add_column('junction')
    table.add_column('sections', justify='right')
    table.add_column('lanes', justify='right')
    for road in roads:
        table.add_row(
            str(road.id),
            road.name,
            '{:.2f}'.format(road.length),
            str(road.junction),
            str(len(road.laneSections)),
            str(sum(len(section.lanes) for section in road.laneSections)),
        )
    print(table)
    print('{} map builder calls'.format(len(builder.calls)))
