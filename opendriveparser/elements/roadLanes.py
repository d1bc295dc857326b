from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..geom.cubicPolynomial import CubicPolynomial


@dataclass(frozen=True)
class LaneOffset:
    """Lateral offset of the lane reference line, valid from sPos until the next one."""
    sPos: float = 0.0
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @property
    def coeffs(self) -> list[float]:
        """Array of coefficients for usage with numpy.polynomial.polynomial.polyval"""
        return [self.a, self.b, self.c, self.d]

    def value(self, sQuery: float) -> float:
        return CubicPolynomial(self.a, self.b, self.c, self.d, self.sPos).evaluate(sQuery)


@dataclass(frozen=True)
class LaneLink:
    predecessorId: Optional[int] = None
    successorId: Optional[int] = None


@dataclass(frozen=True)
class Lane:
    id: int = 0
    type: str = "none"
    level: bool = False
    link: LaneLink = field(default_factory=LaneLink)

    @property
    def side(self) -> str:
        """Side of the reference line given by the id sign"""
        if self.id > 0:
            return "left"
        if self.id < 0:
            return "right"
        return "center"


@dataclass
class LaneSection:
    idx: int = 0
    sPos: float = 0.0
    laneOffset: LaneOffset = field(default_factory=LaneOffset)
    lanes: list[Lane] = field(default_factory=list)

    @property
    def a(self) -> float:
        return self.laneOffset.a

    @property
    def b(self) -> float:
        return self.laneOffset.b

    @property
    def c(self) -> float:
        return self.laneOffset.c

    @property
    def d(self) -> float:
        return self.laneOffset.d

    @property
    def polynomial(self) -> CubicPolynomial:
        """Offset coefficients anchored at the section start, as sent to the map builder"""
        return CubicPolynomial(self.a, self.b, self.c, self.d, self.sPos)

    @property
    def leftLanes(self) -> list[Lane]:
        """Attention! lanes keep document order, they are not sorted by id"""
        return [lane for lane in self.lanes if lane.id > 0]

    @property
    def rightLanes(self) -> list[Lane]:
        return [lane for lane in self.lanes if lane.id < 0]

    def getLane(self, laneId: int) -> Optional[Lane]:
        for lane in self.lanes:
            if lane.id == laneId:
                return lane
        return None
