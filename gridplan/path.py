"""
Path extraction from the predecessor chain of a finished search.
"""

from typing import Dict, List, Sequence, Tuple, TypeVar

from .config import MOTION_MODEL
from .errors import GridStateError
from .nodes import Motion, SearchNode
from .occupancy import OccupancyGrid

Point = Tuple[float, float]
T = TypeVar("T")


def reconstruct_cells(goal_node: SearchNode, visited: Dict[int, SearchNode],
                      grid: OccupancyGrid) -> List[Tuple[int, int]]:
    """
    Walk predecessor indices from the goal back to the start.
    
    Args:
        goal_node: Goal node with cost and predecessor copied from the search
        visited: Expanded nodes keyed by grid index
        grid: Grid the search ran on
    
    Returns:
        Grid cells in goal-to-start order, or an empty list if the goal
        was never reached
    
    Raises:
        GridStateError: If a predecessor is missing from `visited` or the chain loops
    """
    reached = visited.get(grid.grid_index(goal_node.x, goal_node.y))
    if goal_node.parent_index is None and (reached is None or reached.cell != goal_node.cell):
        return []

    cells = [goal_node.cell]
    parent_index = goal_node.parent_index
    while parent_index is not None:
        node = visited.get(parent_index)
        if node is None:
            raise GridStateError(f"predecessor index {parent_index} is not in the visited set")
        cells.append(node.cell)
        if len(cells) > len(visited) + 1:
            raise GridStateError("predecessor chain does not terminate at the start node")
        parent_index = node.parent_index
    return cells


def reconstruct_path(goal_node: SearchNode, visited: Dict[int, SearchNode],
                     grid: OccupancyGrid) -> List[Point]:
    """
    World coordinates of the path, goal first.
    
    Use `reverse_path` for start-to-goal order.
    """
    return [grid.grid_to_world(x, y) for x, y in reconstruct_cells(goal_node, visited, grid)]


def reverse_path(path: Sequence[T]) -> List[T]:
    return list(reversed(path))


def path_cost(cells: Sequence[Tuple[int, int]],
              motion_model: Sequence[Motion] = MOTION_MODEL) -> float:
    """
    Sum of step costs along a cell path.
    
    Raises:
        GridStateError: If two consecutive cells are not one move apart
    """
    step_costs = {(m.dx, m.dy): m.cost for m in motion_model}
    total = 0.0
    for (x0, y0), (x1, y1) in zip(cells, cells[1:]):
        cost = step_costs.get((x1 - x0, y1 - y0))
        if cost is None:
            raise GridStateError(f"cells {(x0, y0)} and {(x1, y1)} are not one move apart")
        total += cost
    return total
