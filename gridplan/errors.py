"""
Exceptions raised by the grid planner.
"""

from typing import Optional, Tuple


class GridPlanError(Exception):
    """Base class for planner errors."""


class ConfigurationError(GridPlanError, ValueError):
    """Malformed construction inputs; raised before any search runs."""


class NoPathFound(GridPlanError):
    """The frontier was exhausted before the goal cell was reached."""

    def __init__(self, start_cell: Tuple[int, int], goal_cell: Tuple[int, int],
                 expanded: int = 0, message: Optional[str] = None):
        self.start_cell = start_cell
        self.goal_cell = goal_cell
        self.expanded = expanded
        super().__init__(
            message or f"no path from cell {start_cell} to cell {goal_cell} "
                       f"({expanded} nodes expanded)"
        )


class GridStateError(GridPlanError):
    """Search structures are inconsistent (e.g. a broken predecessor chain)."""
