"""
Rerun rendering of search progress and planned paths.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np
import rerun as rr

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .nodes import SearchNode
from .occupancy import OccupancyGrid
from .search import SearchObserver


def create_occupancy_grid_image(obstacle_map):
    """
    Create colored visualization of occupancy grid.
    
    Args:
        obstacle_map: 2D boolean array indexed [x, y], True=occupied
    
    Returns:
        Colored image array (H, W, 3) with uint8 dtype, rows ordered by y
    """
    occupied = np.asarray(obstacle_map, dtype=bool).T
    grid_viz = np.zeros((*occupied.shape, 3), dtype=np.uint8)
    grid_viz[~occupied] = [0, 255, 0]   # Green = free
    grid_viz[occupied] = [255, 0, 0]    # Red = occupied
    return grid_viz


class RerunSearchRenderer(SearchObserver):
    """
    Stream a search to the Rerun viewer.
    
    Visited cells are buffered and logged every `flush_every` visits so
    the viewer is not flooded with one message per node.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or DEFAULT_RENDER_CONFIG
        self.visited: List[Tuple[float, float]] = []
        self._initialized = False

    def on_search_started(self, grid: OccupancyGrid, start, goal) -> None:
        if not self._initialized:
            rr.init(self.config.application_id, spawn=self.config.spawn)
            self._initialized = True
        self.visited = []

        if len(grid.obstacles) > 0:
            rr.log(
                "world/obstacles",
                rr.Points2D(
                    grid.obstacles,
                    colors=np.tile(np.array([0, 0, 0], dtype=np.uint8), (len(grid.obstacles), 1)),
                    radii=np.full(len(grid.obstacles), self.config.obstacle_radius)
                )
            )
        rr.log("grid/occupancy", rr.Image(create_occupancy_grid_image(grid.obstacle_map)))

        # Mark start and goal
        rr.log(
            "world/start",
            rr.Points2D([grid.grid_to_world(*start)], colors=[[0, 255, 0]], radii=[1.0])
        )
        rr.log(
            "world/goal",
            rr.Points2D([grid.grid_to_world(*goal)], colors=[[0, 0, 255]], radii=[1.0])
        )

    def on_node_visited(self, x: float, y: float) -> None:
        self.visited.append((x, y))
        if len(self.visited) % self.config.flush_every == 0:
            self.flush()

    def on_goal_found(self, node: SearchNode) -> None:
        self.flush()
        rr.log("search/status", rr.TextLog(f"Goal found, cost {node.cost:.2f}"))

    def on_frontier_exhausted(self) -> None:
        self.flush()
        rr.log("search/status", rr.TextLog("Frontier exhausted, no path", level="WARN"))

    def on_path(self, path: Sequence[Tuple[float, float]]) -> None:
        rr.log(
            "world/path",
            rr.LineStrips2D(
                [np.asarray(path, dtype=float)],
                colors=[[255, 0, 0]],
                radii=[self.config.path_radius]
            )
        )

    def flush(self) -> None:
        """Log all cells visited so far."""
        if not self.visited:
            return
        rr.log(
            "world/visited",
            rr.Points2D(
                np.asarray(self.visited, dtype=float),
                colors=np.tile(np.array([0, 200, 200], dtype=np.uint8), (len(self.visited), 1)),
                radii=np.full(len(self.visited), self.config.visited_radius)
            )
        )
