"""
Input/Output utilities for planning scenarios and results.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .config import PlannerConfig
from .errors import ConfigurationError
from .planner import PlanResult

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """Obstacle map plus start and goal positions."""
    obstacle_x: List[float]
    obstacle_y: List[float]
    start: Tuple[float, float]
    goal: Tuple[float, float]
    config: PlannerConfig = field(default_factory=PlannerConfig)


def load_json(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load JSON file safely.
    
    Args:
        file_path: Path to JSON file
    
    Returns:
        Dictionary with JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error loading JSON from %s: %s", file_path, e)
        return None


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.
    
    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation
    
    Returns:
        True if successful, False otherwise
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except OSError as e:
        logger.error("Error saving JSON to %s: %s", file_path, e)
        return False


def _pair(data: Dict[str, Any], key: str) -> Tuple[float, float]:
    value = data.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigurationError(f"scenario '{key}' must be a pair [x, y], got {value!r}")
    return float(value[0]), float(value[1])


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    """
    Build a scenario from parsed JSON.
    
    Raises:
        ConfigurationError: If required keys are missing or malformed
    """
    obstacles = data.get("obstacles")
    if not isinstance(obstacles, dict) or "x" not in obstacles or "y" not in obstacles:
        raise ConfigurationError("scenario needs an 'obstacles' object with 'x' and 'y' lists")

    defaults = PlannerConfig()
    bounds = data.get("bounds")
    try:
        config = PlannerConfig(
            resolution=float(data.get("resolution", defaults.resolution)),
            robot_radius=float(data.get("robot_radius", defaults.robot_radius)),
            bounds=tuple(float(v) for v in bounds) if bounds is not None else None,
        )
        obstacle_x = [float(v) for v in obstacles["x"]]
        obstacle_y = [float(v) for v in obstacles["y"]]
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"invalid scenario value: {e}") from e

    return Scenario(obstacle_x, obstacle_y, _pair(data, "start"), _pair(data, "goal"),
                    config.validate())


def load_scenario(file_path: Path) -> Scenario:
    """
    Load a planning scenario from JSON.
    
    Raises:
        ConfigurationError: If the file cannot be read or is malformed
    """
    data = load_json(file_path)
    if data is None:
        raise ConfigurationError(f"could not read scenario {file_path}")
    if not isinstance(data, dict):
        raise ConfigurationError(f"scenario {file_path} must be a JSON object")
    return scenario_from_dict(data)


def plan_to_dict(result: PlanResult) -> Dict[str, Any]:
    return {
        'found': result.found,
        'state': result.state.value,
        'start_cell': list(result.start_cell),
        'goal_cell': list(result.goal_cell),
        'cost': result.cost,
        'expanded': result.expanded,
        'path': [{'x': float(x), 'y': float(y)} for x, y in result.path],
    }


def save_plan(result: PlanResult, file_path: Path) -> bool:
    """Write a plan result as JSON."""
    return save_json(plan_to_dict(result), file_path)


def build_demo_scenario() -> Scenario:
    """
    Walled arena from -10 to 60 with two interior walls.
    
    One wall rises from the bottom at x=20, the other hangs from the
    top at x=40, so the path has to weave between them.
    """
    ox: List[float] = []
    oy: List[float] = []
    for i in range(-10, 60):
        ox.append(float(i))
        oy.append(-10.0)
    for i in range(-10, 60):
        ox.append(60.0)
        oy.append(float(i))
    for i in range(-10, 61):
        ox.append(float(i))
        oy.append(60.0)
    for i in range(-10, 61):
        ox.append(-10.0)
        oy.append(float(i))
    for i in range(-10, 40):
        ox.append(20.0)
        oy.append(float(i))
    for i in range(0, 40):
        ox.append(40.0)
        oy.append(60.0 - i)

    return Scenario(ox, oy, start=(10.0, 10.0), goal=(50.0, 50.0),
                    config=PlannerConfig(resolution=2.0, robot_radius=1.0))
