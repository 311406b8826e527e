"""
Occupancy grid built from scattered obstacle points.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import KDTree

from .config import Bounds, PlannerConfig
from .errors import ConfigurationError
from .geometry import compute_bounds, round_half_up, stack_points

logger = logging.getLogger(__name__)


class OccupancyGrid:
    """
    Boolean obstacle grid inflated by the robot clearance radius.
    
    A cell is occupied when any obstacle point lies within `robot_radius`
    (inclusive, Euclidean) of the cell centre. The grid is built once
    and only answers read-only queries afterwards.
    
    Example:
        grid = OccupancyGrid([0.0, 1.0], [5.0, 5.0], resolution=1.0, robot_radius=0.5,
                             bounds=(-5, -5, 5, 5))
        grid.is_free(*grid.world_to_grid(0.0, 0.0))
    """

    def __init__(self, obstacle_x: Sequence[float], obstacle_y: Sequence[float],
                 resolution: float, robot_radius: float, bounds: Optional[Bounds] = None):
        """
        Args:
            obstacle_x: X coordinates of obstacle points
            obstacle_y: Y coordinates of obstacle points
            resolution: World units per cell, > 0
            robot_radius: Clearance radius, >= 0
            bounds: Optional (min_x, min_y, max_x, max_y) merged into the obstacle extent
        
        Raises:
            ConfigurationError: On malformed inputs
        """
        config = PlannerConfig(float(resolution), float(robot_radius), bounds).validate()
        self.resolution = config.resolution
        self.robot_radius = config.robot_radius

        self.obstacles = stack_points(obstacle_x, obstacle_y)
        self.min_x, self.min_y, self.max_x, self.max_y = compute_bounds(self.obstacles, bounds)

        self.width = max(round_half_up((self.max_x - self.min_x) / self.resolution), 0)
        self.height = max(round_half_up((self.max_y - self.min_y) / self.resolution), 0)
        if self.width == 0 or self.height == 0:
            raise ConfigurationError(
                f"grid has no cells: extent ({self.min_x}, {self.min_y})-({self.max_x}, {self.max_y}) "
                f"at resolution {self.resolution}"
            )

        self.obstacle_map = self._build_obstacle_map()
        self.obstacle_map.setflags(write=False)

        logger.debug(
            "Built %dx%d occupancy grid (min=(%d, %d), resolution=%.3f, radius=%.3f, occupied=%d)",
            self.width, self.height, self.min_x, self.min_y,
            self.resolution, self.robot_radius, int(self.obstacle_map.sum())
        )

    @classmethod
    def from_config(cls, obstacle_x: Sequence[float], obstacle_y: Sequence[float],
                    config: PlannerConfig) -> "OccupancyGrid":
        return cls(obstacle_x, obstacle_y, config.resolution, config.robot_radius, config.bounds)

    def _build_obstacle_map(self) -> np.ndarray:
        obstacle_map = np.zeros((self.width, self.height), dtype=bool)
        if len(self.obstacles) == 0:
            return obstacle_map

        # Cell centres in world space, indexed [ix, iy]
        xs = np.arange(self.width) * self.resolution + self.min_x
        ys = np.arange(self.height) * self.resolution + self.min_y
        grid_x, grid_y = np.meshgrid(xs, ys, indexing="ij")
        centers = np.column_stack([grid_x.ravel(), grid_y.ravel()])

        # Nearest obstacle within the radius is enough to block the cell
        tree = KDTree(self.obstacles)
        distances, _ = tree.query(centers, k=1)
        obstacle_map[:] = (distances <= self.robot_radius).reshape(self.width, self.height)
        return obstacle_map

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def world_to_cell(self, coord: float, axis_min: float) -> int:
        """Index of the cell whose centre is nearest to `coord` on one axis."""
        return round_half_up((coord - axis_min) / self.resolution)

    def cell_to_world(self, cell: int, axis_min: float) -> float:
        """World coordinate of a cell centre on one axis."""
        return cell * self.resolution + axis_min

    def world_to_grid(self, x: float, y: float) -> Tuple[int, int]:
        return self.world_to_cell(x, self.min_x), self.world_to_cell(y, self.min_y)

    def grid_to_world(self, cell_x: int, cell_y: int) -> Tuple[float, float]:
        return self.cell_to_world(cell_x, self.min_x), self.cell_to_world(cell_y, self.min_y)

    def grid_index(self, cell_x: int, cell_y: int) -> int:
        """Unique scalar key of a cell."""
        return cell_x + cell_y * self.width

    def index_to_cell(self, index: int) -> Tuple[int, int]:
        """Inverse of `grid_index` for in-bounds cells."""
        cell_y, cell_x = divmod(index, self.width)
        return cell_x, cell_y

    def in_bounds(self, cell_x: int, cell_y: int) -> bool:
        return 0 <= cell_x < self.width and 0 <= cell_y < self.height

    def is_free(self, cell_x: int, cell_y: int) -> bool:
        """False for cells outside the grid or marked occupied."""
        if not self.in_bounds(cell_x, cell_y):
            return False
        return not self.obstacle_map[cell_x, cell_y]

    def free_cell_count(self) -> int:
        return int(self.obstacle_map.size - self.obstacle_map.sum())
