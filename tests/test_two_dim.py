"""Tests for grid and reusable A* adapters."""

import pytest

from astar_search.core.problem import ReusableSearchProblem, TwoDimSearchProblem
from astar_search.search.reusable import ReusableSearchProblemWrapper, astar_r
from astar_search.search.two_dim import TwoDimSearchProblemWrapper, astar_t


class Maze(TwoDimSearchProblem):
    """A simple serpentine maze::

        .
        ........
               .
        ........
        .
        ........

    where ``.`` is passable and everything else is impassable.
    """

    def __init__(self, xmax=7, ymax=5):
        self.xmax = xmax
        self.ymax = ymax

    def get(self, x, y):
        if x < 0 or x > self.xmax or y < 0 or y > self.ymax:
            return None
        if y % 4 == 0 and x > 0:
            return None
        if (y + 2) % 4 == 0 and x < self.xmax:
            return None
        return 0


class OpenField(TwoDimSearchProblem):
    """Unbounded grid where every cell is free."""

    def __init__(self, diagonal=False, tween=False):
        self.diagonal = diagonal
        self.allow_tween = tween

    def get(self, x, y):
        return 0

    def diag(self):
        return self.diagonal

    def tween(self):
        return self.allow_tween


class WeightedLine(ReusableSearchProblem):
    """Integers with steps of +1/-1 costing 1 and jumps of +3 costing 2."""

    def __init__(self, lower=0, upper=20):
        self.lower = lower
        self.upper = upper
        self.target = None

    def heuristic(self, state):
        return 0

    def neighbors(self, state):
        for nxt, cost in ((state - 1, 1), (state + 1, 1), (state + 3, 2)):
            if self.lower <= nxt <= self.upper:
                yield nxt, cost


MAZE_PATH = [
    (0, 0),
    (0, 1), (1, 1), (2, 1), (3, 1), (4, 1), (5, 1), (6, 1), (7, 1),
    (7, 2),
    (7, 3), (6, 3), (5, 3), (4, 3), (3, 3), (2, 3), (1, 3), (0, 3),
    (0, 4),
]


class TestTwoDimNeighbors:
    """Test move generation of the grid wrapper."""

    def test_orthogonal_moves(self):
        wrapper = TwoDimSearchProblemWrapper(OpenField(), (0, 0), (5, 5))

        assert wrapper.neighbors((1, 1)) == [
            ((1, 2), 2), ((0, 1), 2), ((2, 1), 2), ((1, 0), 2)
        ]

    def test_diagonal_moves(self):
        wrapper = TwoDimSearchProblemWrapper(OpenField(diagonal=True), (0, 0), (5, 5))

        assert wrapper.neighbors((1, 1))[4:] == [
            ((0, 2), 3), ((2, 2), 3), ((2, 0), 3), ((0, 0), 3)
        ]

    def test_cell_cost_added(self):
        class Hill(OpenField):
            def get(self, x, y):
                return 5 if (x, y) == (1, 0) else 0

        wrapper = TwoDimSearchProblemWrapper(Hill(), (0, 0), (3, 0))

        assert ((1, 0), 7) in wrapper.neighbors((0, 0))

    def test_heuristic_is_manhattan(self):
        wrapper = TwoDimSearchProblemWrapper(OpenField(), (0, 0), (3, -4))

        assert wrapper.heuristic((0, 0)) == 7
        assert wrapper.heuristic((3, -4)) == 0
        assert wrapper.estimate_length() == 7


class TestAstarT:
    """Test astar_t on grids."""

    def test_start_is_end(self):
        path, cost = astar_t(OpenField(), (0, 0), (0, 0))

        assert list(path) == [(0, 0)]
        assert cost == 0

    def test_next_cell(self):
        path, cost = astar_t(OpenField(), (0, 0), (0, 1))

        assert list(path) == [(0, 0), (0, 1)]
        assert cost == 2

    def test_few_steps(self):
        path, cost = astar_t(OpenField(), (0, 0), (0, 4))

        assert list(path) == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
        assert cost == 8

    def test_maze(self):
        path, cost = astar_t(Maze(), (0, 0), (0, 4))

        assert list(path) == MAZE_PATH
        assert cost == 2 * (len(MAZE_PATH) - 1)

    def test_maze_repeatable(self):
        maze = Maze()

        first = astar_t(maze, (0, 0), (0, 4))
        second = astar_t(maze, (0, 0), (0, 4))

        assert list(first[0]) == list(second[0])
        assert first[1] == second[1]

    def test_maze_reverse(self):
        maze = Maze()

        forward, _ = astar_t(maze, (0, 0), (0, 4))
        backward, _ = astar_t(maze, (0, 4), (0, 0))

        assert list(forward) == list(reversed(backward))

    def test_wall_unreachable(self):
        assert astar_t(Maze(), (0, 0), (3, 0)) is None

    def test_diagonal_shortcut(self):
        path, cost = astar_t(OpenField(diagonal=True), (0, 0), (2, 2))

        assert list(path) == [(0, 0), (1, 1), (2, 2)]
        assert cost == 6


class TestAstarR:
    """Test astar_r with endpoints chosen per call."""

    def test_jump_preferred(self):
        path, cost = astar_r(WeightedLine(), 0, 6)

        assert list(path) == [0, 3, 6]
        assert cost == 4

    def test_many_endpoints_one_problem(self):
        problem = WeightedLine()

        assert astar_r(problem, 0, 1)[1] == 1
        assert astar_r(problem, 5, 2)[1] == 3
        assert astar_r(problem, 2, 2)[1] == 0

    def test_out_of_range_end(self):
        assert astar_r(WeightedLine(upper=5), 0, 10) is None

    def test_wrapper_delegates(self):
        problem = WeightedLine()
        wrapper = ReusableSearchProblemWrapper(problem, 1, 4)

        assert wrapper.start() == 1
        assert wrapper.is_end(4)
        assert not wrapper.is_end(3)
        assert wrapper.estimate_length() is None
        assert wrapper.zero_cost() == 0
        assert list(wrapper.neighbors(1)) == [(0, 1), (2, 1), (4, 2)]


@pytest.mark.parametrize("goal", [(3, 0), (0, -3), (-2, 2)])
def test_open_field_cost_matches_distance(goal):
    """Without obstacles the cost is twice the Manhattan distance."""
    _, cost = astar_t(OpenField(), (0, 0), goal)

    assert cost == 2 * (abs(goal[0]) + abs(goal[1]))
