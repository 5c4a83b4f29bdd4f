import networkx as nx
import pytest

from pathwalk.algorithms.dijkstra import DijkstraIterator
from pathwalk.algorithms.paths import edges_to, nodes_to, path_to, shortest_path, spf
from pathwalk.algorithms.policies import attr_cost
from pathwalk.graph.convert import from_networkx
from pathwalk.types.base import Direction


class TestReconstruction:
    def test_edges_and_nodes_to_settled_node(self, diamond):
        it = DijkstraIterator(diamond, "A", edge_cost=attr_cost())
        list(it)
        assert [e.key for e in edges_to(it, "D")] == ["AB", "BC", "CD"]
        assert nodes_to(it, "D") == ["A", "B", "C", "D"]

    def test_source_has_empty_edge_list(self, diamond):
        it = DijkstraIterator(diamond, "A")
        assert edges_to(it, "A") == []
        assert nodes_to(it, "A") == ["A"]

    def test_reached_node_gives_best_known_path(self, diamond):
        it = DijkstraIterator(diamond, "A", edge_cost=attr_cost())
        it.advance()
        assert nodes_to(it, "C") == ["A", "C"]
        it.advance()
        assert nodes_to(it, "C") == ["A", "B", "C"]

    def test_unreached_node_raises(self, diamond):
        it = DijkstraIterator(diamond, "A")
        with pytest.raises(KeyError, match="has not been reached"):
            edges_to(it, "D")

    def test_reverse_search_path(self, diamond):
        it = DijkstraIterator(diamond, "D", direction=Direction.IN, edge_cost=attr_cost())
        list(it)
        assert nodes_to(it, "A") == ["D", "C", "B", "A"]
        assert [e.key for e in edges_to(it, "A")] == ["CD", "BC", "AB"]

    def test_path_to(self, diamond):
        it = DijkstraIterator(diamond, "A", edge_cost=attr_cost())
        list(it)
        path = path_to(it, "D")
        assert path.nodes == ("A", "B", "C", "D")
        assert path.costs == (0, 1, 2, 3)
        assert path.cost == 3
        assert path.src_node == "A"
        assert path.dst_node == "D"


class TestShortestPath:
    def test_weighted(self, diamond):
        path = shortest_path(diamond, "A", "D", edge_cost=attr_cost("cost"))
        assert path is not None
        assert path.nodes == ("A", "B", "C", "D")
        assert [e.key for e in path.edges] == ["AB", "BC", "CD"]
        assert path.cost == 3

    def test_stops_once_destination_settled(self, diamond):
        settled = []
        shortest_path(diamond, "A", "B", on_settle=settled.append)
        assert settled == ["A", "B"]

    def test_source_equals_destination(self, diamond):
        path = shortest_path(diamond, "A", "A")
        assert path.nodes == ("A",)
        assert path.edges == ()
        assert path.cost == 0

    def test_unreachable_returns_none(self, two_islands):
        assert shortest_path(two_islands, "A", "Y") is None

    def test_missing_source_raises(self, diamond):
        with pytest.raises(KeyError):
            shortest_path(diamond, "Z", "A")

    def test_matches_networkx_on_grid(self):
        nxg = nx.grid_2d_graph(5, 5)
        g = from_networkx(nxg)
        path = shortest_path(g, (0, 0), (4, 4))
        assert path.hops == nx.shortest_path_length(nxg, (0, 0), (4, 4))
        for u, v in zip(path.nodes, path.nodes[1:]):
            assert nxg.has_edge(u, v)


class TestSpf:
    def test_costs_and_pred(self, diamond):
        costs, pred = spf(diamond, "A", edge_cost=attr_cost("cost"))
        assert costs == {"A": 0, "B": 1, "C": 2, "D": 3}
        assert list(costs) == ["A", "B", "C", "D"]
        assert pred["A"] is None
        assert {n: e.key for n, e in pred.items() if e is not None} == {
            "B": "AB",
            "C": "BC",
            "D": "CD",
        }

    def test_unreachable_nodes_absent(self, two_islands):
        costs, pred = spf(two_islands, "X")
        assert costs == {"X": 0, "Y": 1}
        assert set(pred) == {"X", "Y"}
