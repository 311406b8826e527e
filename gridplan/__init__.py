"""
Breadth-first path planning on 2D occupancy grids.
"""

from .config import (
    MOTION_MODEL,
    PlannerConfig,
    RenderConfig,
    DEFAULT_PLANNER_CONFIG,
    DEFAULT_RENDER_CONFIG,
)
from .errors import ConfigurationError, GridPlanError, GridStateError, NoPathFound
from .nodes import Motion, SearchNode
from .occupancy import OccupancyGrid
from .search import FrontierSearch, SearchObserver, SearchResult, SearchState
from .path import path_cost, reconstruct_cells, reconstruct_path, reverse_path
from .planner import BreadthFirstSearchPlanner, PlanResult
from .visualization import RerunSearchRenderer, create_occupancy_grid_image
from .io_utils import (
    Scenario,
    build_demo_scenario,
    load_scenario,
    plan_to_dict,
    save_plan,
    scenario_from_dict,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    'MOTION_MODEL',
    'PlannerConfig',
    'RenderConfig',
    'DEFAULT_PLANNER_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    # Errors
    'ConfigurationError',
    'GridPlanError',
    'GridStateError',
    'NoPathFound',
    # Grid and search
    'Motion',
    'SearchNode',
    'OccupancyGrid',
    'FrontierSearch',
    'SearchObserver',
    'SearchResult',
    'SearchState',
    # Paths
    'path_cost',
    'reconstruct_cells',
    'reconstruct_path',
    'reverse_path',
    # Planner
    'BreadthFirstSearchPlanner',
    'PlanResult',
    # Visualization
    'RerunSearchRenderer',
    'create_occupancy_grid_image',
    # IO utilities
    'Scenario',
    'build_demo_scenario',
    'load_scenario',
    'plan_to_dict',
    'save_plan',
    'scenario_from_dict',
]
