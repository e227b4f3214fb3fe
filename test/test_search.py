"""
Unit tests for the best-first search engine.

Run with: pytest test/test_search.py
"""

import pytest
import numpy as np
from pathsearch.models.errors import InvalidNodeError, MalformedGraphError, SearchError
from pathsearch.models.results import INFINITY, AllDistances, NotFound, Path
from pathsearch.planning.graph import SearchGraph, GridGraph, AdjacencyGraph
from pathsearch.planning.heuristics import zero_heuristic, manhattan_distance
from pathsearch.planning.reconstruct import path_cost
from pathsearch.planning.search import BestFirstSearch, search


class BrokenGraph(SearchGraph):
    """Two-node graph whose neighbour lists are supplied by the test."""

    def __init__(self, adjacency):
        self.adjacency = adjacency

    @property
    def num_nodes(self):
        return 2

    def neighbors(self, index):
        return self.adjacency.get(index, [])


def _assert_valid_grid_path(graph, nodes):
    """Consecutive cells are orthogonal neighbours and never obstacles."""
    for cell in nodes:
        assert graph.is_walkable(cell)
    for (r1, c1), (r2, c2) in zip(nodes, nodes[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


class TestExampleScenarios:
    """Tests for the reference scenarios."""

    def test_walled_grid_path(self, walled_grid):
        """Test 5x5 grid with a wall and one gap gives a 9-node path."""
        graph = GridGraph(walled_grid)
        goal = (4, 4)
        result = search(graph, (0, 0), goal=goal,
                        heuristic=lambda node: manhattan_distance(node, goal))

        assert isinstance(result, Path)
        assert len(result) == 9
        assert result.cost == 8.0
        assert result.nodes[0] == (0, 0)
        assert result.nodes[-1] == (4, 4)
        assert (4, 2) in result.nodes  # the only gap in the wall
        _assert_valid_grid_path(graph, result.nodes)

    def test_weighted_graph_distances(self, sample_graph):
        """Test the 5-node weighted graph distances from vertex 0."""
        result = search(sample_graph, 0)

        assert isinstance(result, AllDistances)
        assert result.as_list() == [0.0, 4.0, 2.0, 6.0, 7.0]

    def test_isolated_node_source_is_goal(self):
        """Test a single node with no edges where source equals goal."""
        graph = AdjacencyGraph(1)
        result = search(graph, 0, goal=0)

        assert isinstance(result, Path)
        assert result.nodes == [0]
        assert result.cost == 0.0
        assert result.edge_count == 0


class TestDijkstraMode:
    """Tests for single-source distances."""

    def test_unreachable_nodes_are_infinite(self):
        """Test unreachable nodes report INFINITY."""
        graph = AdjacencyGraph(4, [(0, 1, 3), (2, 3, 1)], directed=False)
        result = search(graph, 0)

        assert result.cost_to(1) == 3.0
        assert result.cost_to(2) == INFINITY
        assert not result.is_reachable(3)
        assert result.reachable_count == 2

    def test_directed_edges_respected(self):
        """Test edges are only traversed in their stored direction."""
        graph = AdjacencyGraph(2, [(1, 0, 5)], directed=True)

        assert search(graph, 0).cost_to(1) == INFINITY
        assert search(graph, 1).cost_to(0) == 5.0

    def test_zero_weight_edges(self):
        """Test zero-weight edges are allowed."""
        graph = AdjacencyGraph(3, [(0, 1, 0), (1, 2, 0)])
        result = search(graph, 0)

        assert result.as_list() == [0.0, 0.0, 0.0]

    def test_grid_distances_keyed_by_cell(self):
        """Test grid distances map back to (row, col) identifiers."""
        graph = GridGraph(np.zeros((2, 3), dtype=int))
        distances = search(graph, (0, 0)).as_dict()

        assert distances[(0, 0)] == 0.0
        assert distances[(1, 2)] == 3.0
        assert len(distances) == 6

    def test_result_is_truthy(self, sample_graph):
        """Test AllDistances is truthy."""
        assert search(sample_graph, 0)


class TestAStarMode:
    """Tests for goal-directed search."""

    def test_unreachable_goal_returns_not_found(self, sealed_grid):
        """Test a fully walled-off goal yields NotFound."""
        graph = GridGraph(sealed_grid)
        result = search(graph, (0, 0), goal=(4, 4))

        assert isinstance(result, NotFound)
        assert not result
        assert not result.aborted
        assert result.source == (0, 0)
        assert result.goal == (4, 4)

    def test_goal_on_obstacle_is_not_found(self, walled_grid):
        """Test an obstacle goal is a valid id but never reached."""
        graph = GridGraph(walled_grid)
        result = search(graph, (0, 0), goal=(0, 2))

        assert isinstance(result, NotFound)

    def test_zero_heuristic_matches_dijkstra(self, walled_grid):
        """Test A* with h = 0 behaves exactly like Dijkstra."""
        graph = GridGraph(walled_grid)
        plain = search(graph, (0, 0), goal=(4, 4))
        informed = search(graph, (0, 0), goal=(4, 4), heuristic=zero_heuristic)

        assert plain.nodes == informed.nodes
        assert plain.cost == informed.cost
        assert plain.stats.as_dict() == informed.stats.as_dict()

    def test_heuristic_reduces_expansions(self):
        """Test Manhattan guidance expands fewer nodes on an open grid."""
        graph = GridGraph(np.zeros((15, 15), dtype=int))
        source, goal = (7, 0), (7, 14)

        plain = search(graph, source, goal=goal)
        informed = search(graph, source, goal=goal,
                          heuristic=lambda node: manhattan_distance(node, goal))

        assert plain.cost == informed.cost == 14.0
        assert informed.stats.nodes_expanded == 15
        assert informed.stats.nodes_expanded < plain.stats.nodes_expanded

    @pytest.mark.parametrize("seed", range(8))
    def test_astar_cost_matches_dijkstra_on_random_grids(self, seed):
        """Test A* and Dijkstra agree on optimal cost for random grids."""
        rng = np.random.RandomState(seed)
        cells = (rng.rand(12, 12) < 0.3).astype(int)
        cells[0, 0] = cells[11, 11] = 0
        graph = GridGraph(cells)
        goal = (11, 11)

        plain = search(graph, (0, 0), goal=goal)
        informed = search(graph, (0, 0), goal=goal,
                          heuristic=lambda node: manhattan_distance(node, goal))

        assert bool(plain) == bool(informed)
        if plain:
            assert plain.cost == informed.cost
            assert informed.edge_count == informed.cost
            _assert_valid_grid_path(graph, informed.nodes)

    def test_path_cost_matches_edge_weights(self, sample_graph):
        """Test the reported cost equals the summed edge weights."""
        result = search(sample_graph, 0, goal=4)

        assert result.cost == 7.0
        assert path_cost(sample_graph, result.nodes) == result.cost

    def test_non_unit_step_cost(self, walled_grid):
        """Test path cost scales with the grid step cost."""
        graph = GridGraph(walled_grid, step_cost=2.5)
        result = search(graph, (0, 0), goal=(4, 4))

        assert result.cost == pytest.approx(result.edge_count * 2.5)


class TestFrontierBookkeeping:
    """Tests for lazy deletion, tie-breaking and statistics."""

    def test_stale_entry_discarded(self, improving_graph):
        """Test an outdated higher-cost entry is dropped once its node is settled."""
        engine = BestFirstSearch(improving_graph)
        result = engine.search(0)

        assert result.as_list() == [0.0, 1.0, 3.0]
        assert engine.stats.stale_discarded == 1
        assert engine.stats.entries_pushed == 4
        assert engine.stats.iterations == 4
        assert engine.stats.nodes_expanded == 3
        assert engine.records.get_predecessor(2) == 1

    def test_stale_entry_does_not_relax(self, improving_graph):
        """Test popping the stale entry leaves the final cost untouched."""
        engine = BestFirstSearch(improving_graph)
        result = engine.search(0, goal=2)

        assert result.nodes == [0, 1, 2]
        assert result.cost == 3.0

    def test_outdated_cost_discarded_before_settling(self, improving_graph):
        """Test an entry whose cost was since improved never settles its node."""
        evaluations = []

        def shifting_estimate(node):
            if node != 2:
                return 0.0
            evaluations.append(node)
            return 0.0 if len(evaluations) == 1 else 100.0

        engine = BestFirstSearch(improving_graph)
        result = engine.search(0, goal=2, heuristic=shifting_estimate)

        # The cost-10 entry for node 2 pops first but is outdated by the cost-3 one
        assert result.nodes == [0, 1, 2]
        assert result.cost == 3.0
        assert engine.stats.stale_discarded == 1
        assert engine.stats.iterations == 4
        assert engine.stats.nodes_expanded == 3

    def test_equal_cost_first_discovered_wins(self):
        """Test ties keep the predecessor found first."""
        graph = AdjacencyGraph(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1)])
        assert search(graph, 0, goal=3).nodes == [0, 1, 3]

        swapped = AdjacencyGraph(4, [(0, 2, 1), (0, 1, 1), (1, 3, 1), (2, 3, 1)])
        assert search(swapped, 0, goal=3).nodes == [0, 2, 3]

    def test_records_after_search(self, sample_graph):
        """Test the record table reflects the finished search."""
        engine = BestFirstSearch(sample_graph)
        engine.search(0)

        source = engine.records.record(0)
        assert source.best_cost == 0.0
        assert source.predecessor is None
        assert source.settled
        assert engine.records.record(4).predecessor == 3
        assert engine.records.settled_count() == 5

    def test_max_frontier_tracked(self, sample_graph):
        """Test the peak frontier size is recorded."""
        result = search(sample_graph, 0)
        assert result.stats.max_frontier >= 2


class TestIterationHook:
    """Tests for the per-iteration abort hook."""

    def test_immediate_abort(self, sample_graph):
        """Test a hook returning False on the first call aborts."""
        result = search(sample_graph, 0, on_iteration=lambda it, size: False)

        assert isinstance(result, NotFound)
        assert result.aborted
        assert result.stats.iterations == 0

    def test_abort_after_three_iterations(self):
        """Test the hook stops the search at the requested iteration."""
        graph = GridGraph(np.zeros((5, 5), dtype=int))
        result = search(graph, (0, 0), goal=(4, 4),
                        on_iteration=lambda it, size: it <= 3)

        assert result.aborted
        assert result.stats.iterations == 3

    def test_hook_called_once_per_iteration(self, sample_graph):
        """Test the hook sees every iteration with the frontier size."""
        calls = []

        def hook(iteration, frontier_size):
            calls.append((iteration, frontier_size))
            return True

        result = search(sample_graph, 0, on_iteration=hook)

        assert isinstance(result, AllDistances)
        assert len(calls) == result.stats.iterations
        assert calls[0] == (1, 1)
        assert [c[0] for c in calls] == list(range(1, len(calls) + 1))


class TestErrors:
    """Tests for precondition violations."""

    @pytest.mark.parametrize("node", [(5, 0), (0, 5), (-1, 0), (0,), "ab", 3, (0.0, 1)])
    def test_invalid_grid_source(self, walled_grid, node):
        """Test out-of-domain grid sources raise InvalidNodeError."""
        with pytest.raises(InvalidNodeError):
            search(GridGraph(walled_grid), node)

    def test_invalid_goal(self, sample_graph):
        """Test an out-of-range goal raises InvalidNodeError."""
        with pytest.raises(InvalidNodeError) as excinfo:
            search(sample_graph, 0, goal=5)
        assert excinfo.value.node == 5

    @pytest.mark.parametrize("node", [-1, 5, True, 1.0, None])
    def test_invalid_adjacency_source(self, sample_graph, node):
        """Test bad vertex ids raise InvalidNodeError."""
        with pytest.raises(InvalidNodeError):
            search(sample_graph, node)

    def test_invalid_node_is_value_error(self, sample_graph):
        """Test InvalidNodeError can be caught as ValueError and SearchError."""
        with pytest.raises(ValueError):
            search(sample_graph, 9)
        with pytest.raises(SearchError):
            search(sample_graph, 9)

    def test_out_of_range_neighbor(self):
        """Test a neighbour outside the graph raises MalformedGraphError."""
        graph = BrokenGraph({0: [(5, 1.0)]})
        with pytest.raises(MalformedGraphError):
            search(graph, 0)

    def test_negative_weight(self):
        """Test a negative edge weight raises MalformedGraphError."""
        graph = BrokenGraph({0: [(1, -1.0)]})
        with pytest.raises(MalformedGraphError):
            search(graph, 0)

    def test_malformed_edge_not_reached(self):
        """Test broken edges outside the reachable part are never seen."""
        graph = BrokenGraph({1: [(7, 1.0)]})
        result = search(graph, 0)
        assert result.as_list() == [0.0, INFINITY]


class TestDeterminism:
    """Tests for repeatability and per-call state."""

    def test_repeated_search_identical(self, walled_grid):
        """Test the same inputs give the same path twice."""
        graph = GridGraph(walled_grid)
        first = search(graph, (0, 0), goal=(4, 4))
        second = search(graph, (0, 0), goal=(4, 4))

        assert first.nodes == second.nodes
        assert first.cost == second.cost
        assert first.stats == second.stats

    def test_engine_reuse(self, sample_graph):
        """Test one engine instance gives identical results on reuse."""
        engine = BestFirstSearch(sample_graph)
        first = engine.search(0)
        second = engine.search(0)

        np.testing.assert_array_equal(first.costs, second.costs)

    def test_searches_do_not_share_state(self, sample_graph):
        """Test a later search leaves an earlier result untouched."""
        engine = BestFirstSearch(sample_graph)
        from_zero = engine.search(0)
        snapshot = from_zero.costs.copy()
        from_four = engine.search(4)

        np.testing.assert_array_equal(from_zero.costs, snapshot)
        assert from_four.cost_to(4) == 0.0
        assert from_four.cost_to(0) == 7.0


# Fixtures
@pytest.fixture
def walled_grid():
    """Fixture providing a 5x5 grid with a wall in column 2 open at row 4."""
    cells = np.zeros((5, 5), dtype=int)
    cells[0:4, 2] = 1
    return cells


@pytest.fixture
def sealed_grid():
    """Fixture providing a 5x5 grid whose bottom-right cell is walled off."""
    cells = np.zeros((5, 5), dtype=int)
    cells[3, 4] = 1
    cells[4, 3] = 1
    return cells


@pytest.fixture
def sample_graph():
    """Fixture providing the undirected 5-node weighted graph."""
    edges = [(0, 1, 4), (0, 2, 2), (1, 2, 3), (1, 3, 2), (2, 3, 4), (3, 4, 1)]
    return AdjacencyGraph(5, edges, directed=False)


@pytest.fixture
def improving_graph():
    """Fixture providing a graph where node 2 is first found expensively."""
    return AdjacencyGraph(3, [(0, 1, 1), (0, 2, 10), (1, 2, 2)])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
