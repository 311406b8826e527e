"""
Breadth-first frontier expansion over an occupancy grid.
"""

import enum
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Optional, Sequence, Tuple

from .config import MOTION_MODEL
from .nodes import Motion, SearchNode
from .occupancy import OccupancyGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class SearchState(enum.Enum):
    RUNNING = "running"
    GOAL_FOUND = "goal_found"
    FRONTIER_EXHAUSTED = "frontier_exhausted"


class SearchObserver:
    """
    Receives search events for display or reporting.
    
    Every hook is a no-op here; subclasses override what they need.
    Return values are ignored and hooks cannot steer the search.
    """

    def on_search_started(self, grid: OccupancyGrid, start: Cell, goal: Cell) -> None:
        pass

    def on_node_visited(self, x: float, y: float) -> None:
        pass

    def on_goal_found(self, node: SearchNode) -> None:
        pass

    def on_frontier_exhausted(self) -> None:
        pass

    def on_path(self, path: Sequence[Tuple[float, float]]) -> None:
        pass


@dataclass
class SearchResult:
    """Terminal state of one search and the structures needed to rebuild its path."""
    state: SearchState
    goal_node: SearchNode
    visited: Dict[int, SearchNode] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.state is SearchState.GOAL_FOUND

    @property
    def expanded(self) -> int:
        return len(self.visited)


class FrontierSearch:
    """
    Breadth-first search with a first-in-first-out frontier.
    
    A cell is recorded the first time it is discovered and never updated,
    so the result is shortest in expansion steps, not in weighted cost
    when diagonal moves cost more than orthogonal ones.
    
    The search is a small state machine: call `step()` until `state` is no
    longer RUNNING, or call `run()` to do so in one go.
    """

    def __init__(self, grid: OccupancyGrid, start_cell: Cell, goal_cell: Cell,
                 motion_model: Sequence[Motion] = MOTION_MODEL,
                 observer: Optional[SearchObserver] = None):
        self.grid = grid
        self.motion_model = tuple(motion_model)
        self.observer = observer or SearchObserver()

        self.start_node = SearchNode(start_cell[0], start_cell[1])
        self.goal_node = SearchNode(goal_cell[0], goal_cell[1])

        self.frontier: Dict[int, SearchNode] = {}
        self.frontier_order: Deque[int] = deque()
        self.visited: Dict[int, SearchNode] = {}
        self.state = SearchState.RUNNING

        # A start outside the grid has no index of its own; the first step exhausts
        if grid.in_bounds(*start_cell):
            start_index = grid.grid_index(*start_cell)
            self.frontier[start_index] = self.start_node
            self.frontier_order.append(start_index)

    def step(self) -> SearchState:
        """Expand one node and return the resulting state."""
        if self.state is not SearchState.RUNNING:
            return self.state

        if not self.frontier_order:
            logger.warning("Frontier exhausted after %d expansions, goal %s unreachable",
                           len(self.visited), self.goal_node.cell)
            self.state = SearchState.FRONTIER_EXHAUSTED
            self.observer.on_frontier_exhausted()
            return self.state

        key = self.frontier_order.popleft()
        current = self.frontier.pop(key)
        self.visited[key] = current
        self.observer.on_node_visited(*self.grid.grid_to_world(current.x, current.y))

        if current.cell == self.goal_node.cell:
            self.goal_node = self.goal_node._replace(cost=current.cost,
                                                     parent_index=current.parent_index)
            logger.info("Goal found at cell %s with cost %.3f after %d expansions",
                        self.goal_node.cell, self.goal_node.cost, len(self.visited))
            self.state = SearchState.GOAL_FOUND
            self.observer.on_goal_found(self.goal_node)
            return self.state

        for motion in self.motion_model:
            node = current.step(motion, key)
            if not self.grid.is_free(node.x, node.y):
                continue
            n_id = self.grid.grid_index(node.x, node.y)
            if n_id in self.visited or n_id in self.frontier:
                continue
            self.frontier[n_id] = node
            self.frontier_order.append(n_id)

        return self.state

    def run(self) -> SearchResult:
        """Expand until the goal is found or the frontier runs out."""
        logger.debug("Searching from cell %s to cell %s", self.start_node.cell, self.goal_node.cell)
        while self.step() is SearchState.RUNNING:
            pass
        return SearchResult(self.state, self.goal_node, self.visited)
