import pytest

from gridplan import BreadthFirstSearchPlanner, SearchObserver


class RecordingObserver(SearchObserver):
    def __init__(self):
        self.started = []
        self.visited = []
        self.goals = []
        self.exhausted = 0
        self.paths = []

    def on_search_started(self, grid, start, goal):
        self.started.append((start, goal))

    def on_node_visited(self, x, y):
        self.visited.append((x, y))

    def on_goal_found(self, node):
        self.goals.append(node)

    def on_frontier_exhausted(self):
        self.exhausted += 1

    def on_path(self, path):
        self.paths.append(list(path))


@pytest.fixture
def recording_observer():
    return RecordingObserver()


@pytest.fixture
def open_planner():
    """Empty 15x10 map at unit resolution, cells cover x in [-5, 9], y in [-5, 4]."""
    return BreadthFirstSearchPlanner([], [], 1.0, 0.0, bounds=(-5, -5, 10, 5))


@pytest.fixture
def wall_planner():
    """Solid wall at x=2 spanning y in [-5, 5] inside a 20x20 map."""
    ox = [2.0] * 11
    oy = [float(y) for y in range(-5, 6)]
    return BreadthFirstSearchPlanner(ox, oy, 1.0, 0.0, bounds=(-10, -10, 10, 10))


@pytest.fixture
def enclosed_planner():
    """Start cell at the origin boxed in by its eight neighbours."""
    ring = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]
    ox = [float(dx) for dx, _ in ring]
    oy = [float(dy) for _, dy in ring]
    return BreadthFirstSearchPlanner(ox, oy, 1.0, 0.0, bounds=(-5, -5, 5, 5))
