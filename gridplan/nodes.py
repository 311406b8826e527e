"""
Search graph vertices and single-step moves.
"""

from typing import NamedTuple, Optional, Tuple


class Motion(NamedTuple):
    """One move of the motion model: cell offset and its step cost."""
    dx: int
    dy: int
    cost: float


class SearchNode(NamedTuple):
    """
    A vertex of the search graph.
    
    `parent_index` is the grid index of the node this one was expanded
    from, or None for the start node. Nodes live in the frontier/visited
    maps, so the predecessor is looked up by index rather than held.
    """
    x: int
    y: int
    cost: float = 0.0
    parent_index: Optional[int] = None

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def step(self, motion: Motion, parent_index: int) -> "SearchNode":
        """Create the neighbour reached by `motion`."""
        return SearchNode(self.x + motion.dx, self.y + motion.dy,
                          self.cost + motion.cost, parent_index)
