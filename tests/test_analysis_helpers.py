import math
import unittest

from friendgraph.analysis_helpers import graph_metrics
from friendgraph.graph_builder import build_graph
from friendgraph.traversal import shortest_distances


class TestGraphMetrics(unittest.TestCase):

    def test_chain_from_end(self):
        graph = build_graph([('A', ['B']), ('B', ['C']), ('C', ['D'])])
        max_len, min_len, median, std_dev, avg = graph_metrics(shortest_distances(graph, 'A'))

        self.assertEqual(max_len, 3)
        self.assertEqual(min_len, 0)
        self.assertAlmostEqual(median, 1.5)
        self.assertAlmostEqual(avg, 1.5)
        self.assertAlmostEqual(std_dev, math.sqrt(1.25))

    def test_odd_count_median(self):
        distances = {'s': 0, 'a': 1, 'b': 1, 'c': 2, 'd': 5}
        max_len, min_len, median, std_dev, avg = graph_metrics(distances)

        self.assertEqual((max_len, min_len), (5, 0))
        self.assertAlmostEqual(median, 1.0)
        self.assertAlmostEqual(avg, 1.8)
        # population std, not the n-1 one
        self.assertAlmostEqual(std_dev, math.sqrt(2.96))

    def test_single_source(self):
        self.assertEqual(graph_metrics({'A': 0}), (0, 0, 0.0, 0.0, 0.0))

    def test_types(self):
        max_len, min_len, median, std_dev, avg = graph_metrics({'A': 0, 'B': 1})
        self.assertIsInstance(max_len, int)
        self.assertIsInstance(min_len, int)
        for value in (median, std_dev, avg):
            self.assertIsInstance(value, float)

    def test_empty_map(self):
        self.assertIsNone(graph_metrics({}))


if __name__ == '__main__':
    unittest.main()
