"""
Breadth-first grid planner: the public entry point of the package.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import MOTION_MODEL, Bounds, PlannerConfig
from .errors import NoPathFound
from .nodes import Motion
from .occupancy import OccupancyGrid
from .path import reconstruct_cells, reverse_path
from .search import FrontierSearch, SearchObserver, SearchState

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Cell = Tuple[int, int]


@dataclass
class PlanResult:
    """
    Outcome of one `plan` call.
    
    On failure `path` and `cells` are empty and `cost` is 0; call
    `raise_for_status()` to turn the failure into `NoPathFound`.
    
    The start cell is not collision checked: a start inside an inflated
    obstacle still expands, so `cells[0]` may be occupied. Every later
    cell is free. A start outside the grid always fails.
    """
    state: SearchState
    start_cell: Cell
    goal_cell: Cell
    path: Tuple[Point, ...] = ()   # start-to-goal world coordinates
    cells: Tuple[Cell, ...] = ()   # start-to-goal grid cells
    cost: float = 0.0
    expanded: int = 0
    visited_cells: Tuple[Cell, ...] = field(default=(), repr=False)  # expansion order

    @property
    def found(self) -> bool:
        return self.state is SearchState.GOAL_FOUND

    @property
    def xs(self) -> List[float]:
        return [x for x, _ in self.path]

    @property
    def ys(self) -> List[float]:
        return [y for _, y in self.path]

    def raise_for_status(self) -> "PlanResult":
        if not self.found:
            raise NoPathFound(self.start_cell, self.goal_cell, self.expanded)
        return self


class BreadthFirstSearchPlanner:
    """
    Plan collision-free grid paths for a point robot.
    
    The occupancy grid is built once from the obstacle points; each
    `plan` call runs an independent breadth-first search on it.
    
    Example:
        planner = BreadthFirstSearchPlanner(ox, oy, resolution=2.0, robot_radius=1.0)
        result = planner.plan(10.0, 10.0, 50.0, 50.0)
        if result.found:
            print(result.path)
    """

    def __init__(self, obstacle_x: Sequence[float], obstacle_y: Sequence[float],
                 resolution: float, robot_radius: float,
                 bounds: Optional[Bounds] = None,
                 motion_model: Sequence[Motion] = MOTION_MODEL,
                 observer: Optional[SearchObserver] = None):
        """
        Args:
            obstacle_x: X coordinates of obstacle points
            obstacle_y: Y coordinates of obstacle points
            resolution: Grid resolution in world units per cell
            robot_radius: Clearance radius around every obstacle point
            bounds: Optional (min_x, min_y, max_x, max_y) that widens the grid
            motion_model: Ordered moves available from each cell
            observer: Optional receiver of search events (rendering, reporting)
        
        Raises:
            ConfigurationError: If the inputs cannot build a grid
        """
        self.grid = OccupancyGrid(obstacle_x, obstacle_y, resolution, robot_radius, bounds)
        self.motion_model = tuple(motion_model)
        self.observer = observer

    @classmethod
    def from_config(cls, obstacle_x: Sequence[float], obstacle_y: Sequence[float],
                    config: PlannerConfig, **kwargs) -> "BreadthFirstSearchPlanner":
        return cls(obstacle_x, obstacle_y, config.resolution, config.robot_radius,
                   config.bounds, **kwargs)

    def plan(self, start_x: float, start_y: float, goal_x: float, goal_y: float) -> PlanResult:
        """
        Search a path between two world positions.
        
        Args:
            start_x, start_y: Start position in world coordinates
            goal_x, goal_y: Goal position in world coordinates
        
        Returns:
            PlanResult; `found` is False when the frontier was exhausted
        
        Raises:
            GridStateError: If the predecessor chain is corrupt
        """
        grid = self.grid
        start_cell = grid.world_to_grid(start_x, start_y)
        goal_cell = grid.world_to_grid(goal_x, goal_y)

        for name, cell in (("start", start_cell), ("goal", goal_cell)):
            if not grid.is_free(*cell):
                logger.warning("%s cell %s is outside the grid or occupied", name, cell)

        observer = self.observer or SearchObserver()
        observer.on_search_started(grid, start_cell, goal_cell)

        search = FrontierSearch(grid, start_cell, goal_cell, self.motion_model, observer)
        outcome = search.run()
        visited_cells = tuple(node.cell for node in outcome.visited.values())

        if not outcome.found:
            return PlanResult(outcome.state, start_cell, goal_cell,
                              expanded=outcome.expanded, visited_cells=visited_cells)

        cells = tuple(reverse_path(reconstruct_cells(outcome.goal_node, outcome.visited, grid)))
        path = tuple(grid.grid_to_world(x, y) for x, y in cells)
        observer.on_path(path)

        return PlanResult(outcome.state, start_cell, goal_cell, path, cells,
                          outcome.goal_node.cost, outcome.expanded, visited_cells)
