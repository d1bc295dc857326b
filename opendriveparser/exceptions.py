class LaneOffsetUnderflowError(Exception):
    """A road has more lane sections than lane offset polynomials."""

    def __init__(self, roadId: int, sectionIdx: int,
                 numLaneOffsets: int, numLaneSections: int) -> None:
        self.roadId = roadId
        self.sectionIdx = sectionIdx
        self.numLaneOffsets = numLaneOffsets
        self.numLaneSections = numLaneSections
        self.errorinfo = (
            "road {} has {} lane offset(s) for {} lane section(s), "
            "no lane offset left for lane section {}".format(
                roadId, numLaneOffsets, numLaneSections, sectionIdx))
        super().__init__(self.errorinfo)

    def __str__(self) -> str:
        return self.errorinfo
