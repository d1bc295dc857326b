from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Predecessor:
    elementId: int = 0
    elementType: str = ""
    contactPoint: str = ""

    def __str__(self):
        return str(self.elementType) + " with id " + str(self.elementId) + " contact at " + str(self.contactPoint)


@dataclass(frozen=True)
class Successor(Predecessor):
    pass


@dataclass
class Link:
    """Road-level linkage, None on either end means the road is not linked there."""
    predecessor: Optional[Predecessor] = None
    successor: Optional[Successor] = None

    def __str__(self):
        return " > predecessor: " + str(self.predecessor) + " | successor: " + str(self.successor)

    @property
    def predecessorId(self) -> Optional[int]:
        if self.predecessor is None:
            return None
        return self.predecessor.elementId

    @property
    def successorId(self) -> Optional[int]:
        if self.successor is None:
            return None
        return self.successor.elementId
