"""
Configuration utilities and default settings.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError
from .nodes import Motion

Bounds = Tuple[float, float, float, float]

SQRT2 = math.sqrt(2.0)

# Order matters: children are generated in this order
MOTION_MODEL: Tuple[Motion, ...] = (
    Motion(1, 0, 1.0),
    Motion(0, 1, 1.0),
    Motion(-1, 0, 1.0),
    Motion(0, -1, 1.0),
    Motion(-1, -1, SQRT2),
    Motion(-1, 1, SQRT2),
    Motion(1, -1, SQRT2),
    Motion(1, 1, SQRT2),
)


@dataclass
class PlannerConfig:
    """Configuration for the grid planner."""
    resolution: float = 2.0
    robot_radius: float = 1.0
    bounds: Optional[Bounds] = None  # (min_x, min_y, max_x, max_y), widens the obstacle extent

    def validate(self) -> "PlannerConfig":
        """
        Check that the configuration can build a grid.
        
        Returns:
            The same config, for chaining
        
        Raises:
            ConfigurationError: If any value is out of range
        """
        if not math.isfinite(self.resolution) or self.resolution <= 0:
            raise ConfigurationError(f"resolution must be a positive number, got {self.resolution}")
        if not math.isfinite(self.robot_radius) or self.robot_radius < 0:
            raise ConfigurationError(f"robot_radius must be non-negative, got {self.robot_radius}")
        if self.bounds is not None:
            if len(self.bounds) != 4:
                raise ConfigurationError("bounds must be (min_x, min_y, max_x, max_y)")
            min_x, min_y, max_x, max_y = self.bounds
            if not all(math.isfinite(v) for v in self.bounds):
                raise ConfigurationError(f"bounds must be finite, got {self.bounds}")
            if min_x > max_x or min_y > max_y:
                raise ConfigurationError(f"bounds are inverted: {self.bounds}")
        return self


@dataclass
class RenderConfig:
    """Configuration for the rerun search renderer."""
    application_id: str = "gridplan"
    spawn: bool = True
    flush_every: int = 10  # Log visited cells in batches of this size
    visited_radius: float = 0.3
    obstacle_radius: float = 0.5
    path_radius: float = 0.4


# Default configurations
DEFAULT_PLANNER_CONFIG = PlannerConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()
