# graph-wide degree analysis, looks at everyone at once

import networkx as nx # pyright: ignore[reportMissingModuleSource]
from collections import Counter

from friendgraph.constants import DISTANCE_2
from friendgraph.graph_builder import to_networkx
from friendgraph.traversal import nodes_at_distance


class GraphAnalyzer:

    def __init__(self, graph):
        self.graph = graph
        self._second_order = None

    def degrees(self) -> dict:
        # raw list length, parallel edges count twice
        return {node: len(neighbors) for node, neighbors in self.graph.items()}

    def second_order_counts(self) -> dict:

        # distinct people exactly 2 hops away, per person
        # one depth limited bfs per node so this is the slow part on big files

        if self._second_order is None:
            self._second_order = {
                node: len(nodes_at_distance(self.graph, node, DISTANCE_2))
                for node in self.graph
            }
        return self._second_order

    def degree_distribution(self) -> dict:
        return dict(Counter(self.degrees().values()))

    def degree_distribution_at_distance_2(self) -> dict:
        # people with nobody at 2 hops still show up under 0
        return dict(Counter(self.second_order_counts().values()))

    def calculate_average_degrees(self) -> tuple:

        if not self.graph:
            return 0.0, 0.0

        n = len(self.graph)
        avg_degree = sum(self.degrees().values()) / n
        avg_degree_2 = sum(self.second_order_counts().values()) / n
        return avg_degree, avg_degree_2

    def compute_degree_stats(self) -> dict:

        degrees = list(self.degrees().values())

        if not degrees:
            return {'error': 'empty graph'}

        return {
            'min': min(degrees),
            'max': max(degrees),
            'avg': sum(degrees) / len(degrees),
            'distribution': dict(Counter(degrees)),
        }

    def find_high_degree_nodes(self, threshold: int = 30) -> list:

        # the popular kids

        high_deg = []
        for node, deg in self.degrees().items():
            if deg >= threshold:
                high_deg.append({
                    'person': node,
                    'degree': deg,
                    'second_order': self.second_order_counts()[node],
                })

        return sorted(high_deg, key=lambda x: x['degree'], reverse=True)

    def find_isolated_nodes(self) -> list:
        # listed nobody and nobody listed them
        return [node for node, neighbors in self.graph.items() if not neighbors]

    def component_summary(self) -> dict:

        # bfs from one source only sees its own component, this tells u how much that misses

        G = to_networkx(self.graph)
        sizes = sorted((len(c) for c in nx.connected_components(G)), reverse=True)

        return {
            'n_components': len(sizes),
            'sizes': sizes,
            'largest': sizes[0] if sizes else 0,
        }


def degree_distribution(graph):
    return GraphAnalyzer(graph).degree_distribution()


def degree_distribution_at_distance_2(graph):
    return GraphAnalyzer(graph).degree_distribution_at_distance_2()


def calculate_average_degrees(graph):
    return GraphAnalyzer(graph).calculate_average_degrees()
