import unittest

from friendgraph.graph_builder import build_graph
from friendgraph.inference import choose_source
from friendgraph.traversal import UnknownNodeError


class TestChooseSource(unittest.TestCase):

    def setUp(self):
        self.graph = build_graph([('A', ['B']), ('C', ['B', 'D']), ('E', ['D', 'F'])])

    def test_first(self):
        self.assertEqual(choose_source(self.graph), 'A')
        self.assertEqual(choose_source(self.graph, strategy='first'), 'A')

    def test_max_degree_ties_go_to_first_seen(self):
        # B, C, D and E all have degree 2, B came first
        self.assertEqual(choose_source(self.graph, strategy='max_degree'), 'B')

    def test_explicit_source_wins(self):
        self.assertEqual(choose_source(self.graph, strategy='max_degree', source='F'), 'F')

    def test_explicit_source_must_exist(self):
        with self.assertRaises(UnknownNodeError):
            choose_source(self.graph, source='Z')

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            choose_source(self.graph, strategy='random')

    def test_empty_graph(self):
        with self.assertRaises(ValueError):
            choose_source({})


if __name__ == '__main__':
    unittest.main()
