import math

from gridplan import (
    MOTION_MODEL,
    FrontierSearch,
    Motion,
    OccupancyGrid,
    SearchNode,
    SearchState,
)


def _open_grid():
    return OccupancyGrid([], [], 1.0, 0.0, bounds=(0, 0, 8, 6))


def test_motion_model_is_eight_connected():
    assert len(MOTION_MODEL) == 8
    assert len({(m.dx, m.dy) for m in MOTION_MODEL}) == 8
    for motion in MOTION_MODEL:
        expected = 1.0 if 0 in (motion.dx, motion.dy) else math.sqrt(2.0)
        assert motion.cost == expected
    assert MOTION_MODEL[:4] == (Motion(1, 0, 1.0), Motion(0, 1, 1.0),
                                Motion(-1, 0, 1.0), Motion(0, -1, 1.0))


def test_node_step_accumulates_cost():
    node = SearchNode(2, 3, 1.5, parent_index=7)
    child = node.step(Motion(1, -1, 2.0), parent_index=42)
    assert child == SearchNode(3, 2, 3.5, 42)
    assert SearchNode(0, 0).cost == 0.0
    assert SearchNode(0, 0).parent_index is None


def test_initial_state():
    grid = _open_grid()
    search = FrontierSearch(grid, (1, 1), (5, 4))
    assert search.state is SearchState.RUNNING
    assert list(search.frontier_order) == [grid.grid_index(1, 1)]
    assert search.frontier[grid.grid_index(1, 1)] == SearchNode(1, 1, 0.0, None)
    assert search.visited == {}


def test_first_expansion_follows_motion_order():
    grid = _open_grid()
    search = FrontierSearch(grid, (3, 3), (7, 5))
    search.step()
    cells = [search.frontier[i].cell for i in search.frontier_order]
    assert cells == [(3 + m.dx, 3 + m.dy) for m in MOTION_MODEL]
    start_index = grid.grid_index(3, 3)
    assert all(node.parent_index == start_index for node in search.frontier.values())


def test_frontier_and_visited_never_overlap_and_stay_in_bounds():
    grid = OccupancyGrid([3.0, 3.0, 3.0, 3.0], [0.0, 1.0, 2.0, 3.0], 1.0, 0.0, bounds=(0, 0, 8, 6))
    search = FrontierSearch(grid, (0, 0), (7, 1))
    while search.step() is SearchState.RUNNING:
        assert not set(search.frontier) & set(search.visited)
        assert set(search.frontier_order) == set(search.frontier)
        assert len(search.frontier_order) == len(search.frontier)
        for node in list(search.frontier.values()) + list(search.visited.values()):
            assert grid.in_bounds(node.x, node.y)
            assert grid.is_free(node.x, node.y)
    assert search.state is SearchState.GOAL_FOUND


def test_costs_chain_through_parents():
    grid = _open_grid()
    result = FrontierSearch(grid, (0, 0), (6, 4)).run()
    step_costs = {(m.dx, m.dy): m.cost for m in MOTION_MODEL}
    for node in result.visited.values():
        if node.parent_index is None:
            assert node.cost == 0.0
            continue
        parent = result.visited[node.parent_index]
        assert node.cost == parent.cost + step_costs[(node.x - parent.x, node.y - parent.y)]


def test_goal_node_takes_cost_and_parent_of_reached_cell():
    grid = _open_grid()
    result = FrontierSearch(grid, (0, 0), (2, 0)).run()
    assert result.found
    reached = result.visited[grid.grid_index(2, 0)]
    assert result.goal_node == reached
    assert result.goal_node.cost == 2.0


def test_step_after_termination_is_stable():
    grid = _open_grid()
    search = FrontierSearch(grid, (1, 1), (1, 1))
    assert search.step() is SearchState.GOAL_FOUND
    assert search.step() is SearchState.GOAL_FOUND
    assert len(search.visited) == 1


def test_unreachable_goal_exhausts_frontier(recording_observer):
    # Column of obstacles at x=4 spans the full grid height
    ox = [4.0] * 7
    oy = [float(y) for y in range(7)]
    grid = OccupancyGrid(ox, oy, 1.0, 0.0, bounds=(0, 0, 8, 6))
    result = FrontierSearch(grid, (0, 0), (7, 5), observer=recording_observer).run()
    assert result.state is SearchState.FRONTIER_EXHAUSTED
    assert not result.found
    # Every free cell left of the wall gets expanded exactly once
    assert result.expanded == 4 * 6
    assert recording_observer.exhausted == 1
    assert recording_observer.goals == []
    assert len(recording_observer.visited) == result.expanded


def test_breadth_first_counts_steps_not_weighted_cost():
    grid = _open_grid()
    result = FrontierSearch(grid, (0, 0), (3, 2)).run()
    assert result.found
    steps = 0
    node = result.goal_node
    while node.parent_index is not None:
        node = result.visited[node.parent_index]
        steps += 1
    assert steps == 3  # Chebyshev distance


def test_start_outside_grid_exhausts_on_first_step(recording_observer):
    grid = _open_grid()
    search = FrontierSearch(grid, (grid.width, 0), (0, 1), observer=recording_observer)
    assert search.frontier == {}
    assert search.step() is SearchState.FRONTIER_EXHAUSTED
    assert search.visited == {}
    assert recording_observer.exhausted == 1
