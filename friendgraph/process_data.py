# main pipeline: load the friends csv, build the graph, print the stats

import sys

from friendgraph.constants import DEFAULT_DATA_PATH, DEFAULT_SOURCE_STRATEGY, HIGH_DEGREE_THRESHOLD
from friendgraph.data_loader import DataFileError, FriendListLoader
from friendgraph.analysis_helpers import graph_metrics
from friendgraph.graph_analysis import GraphAnalyzer
from friendgraph.graph_builder import edge_count
from friendgraph.inference import choose_source
from friendgraph.traversal import UnknownNodeError, shortest_distances


def print_stats(graph, source, metrics, analyzer):

    print("\n" + "="*60)
    print("FRIEND GRAPH SUMMARY")
    print("="*60)

    print(f"\nNumber of nodes in the graph: {len(graph)}")
    print(f"Edges (parallel ones included): {edge_count(graph)}")

    components = analyzer.component_summary()
    print(f"Connected components: {components['n_components']} (largest {components['largest']})")

    print(f"\nPath lengths from {source}:")
    if metrics is None:
        print("  nothing reachable, no path stats")
    else:
        max_len, min_len, median, std_dev, avg = metrics
        print(f"  Max path length: {max_len}")
        print(f"  Min path length: {min_len}")
        print(f"  Median path length: {median:.2f}")
        print(f"  Standard deviation: {std_dev:.2f}")
        print(f"  Average distance: {avg:.2f}")

    print(f"\nDegree Distribution: {analyzer.degree_distribution()}")
    print(f"Degree Distribution at Distance 2: {analyzer.degree_distribution_at_distance_2()}")

    average_degree, average_degree_2 = analyzer.calculate_average_degrees()
    print(f"\nAverage degree at distance 1: {average_degree:.2f}")
    print(f"Average degree at distance 2: {average_degree_2:.2f}")

    degree_stats = analyzer.compute_degree_stats()
    if 'error' not in degree_stats:
        print(f"Degree range: {degree_stats['min']} to {degree_stats['max']}")

    high_deg = analyzer.find_high_degree_nodes(threshold=HIGH_DEGREE_THRESHOLD)
    print(f"\nHigh degree nodes ({HIGH_DEGREE_THRESHOLD}+): {len(high_deg)}")
    for node in high_deg[:5]:
        print(f"  {node['person']}: degree {node['degree']}, second order {node['second_order']}")

    isolated = analyzer.find_isolated_nodes()
    print(f"\nIsolated nodes: {len(isolated)}")


def main(data_path=DEFAULT_DATA_PATH, source=None, strategy=DEFAULT_SOURCE_STRATEGY):

    print("loading data...")
    loader = FriendListLoader(data_path)
    try:
        loader.load()
    except (OSError, DataFileError) as e:
        print(f"Failed to read data: {e}")
        return None
    print(f"  {len(loader.records)} rows, {len(loader.people)} people")

    print("\nbuilding graph...")
    graph = loader.build_graph()

    try:
        source = choose_source(graph, strategy=strategy, source=source)
    except (UnknownNodeError, ValueError) as e:
        print(f"Cannot pick a bfs source: {e}")
        return None

    print("\nrunning graph analysis...")
    distances = shortest_distances(graph, source)
    metrics = graph_metrics(distances)
    analyzer = GraphAnalyzer(graph)

    print_stats(graph, source, metrics, analyzer)

    print("\ndone")

    return graph, metrics, analyzer


if __name__ == "__main__":
    data_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DATA_PATH
    source = sys.argv[2] if len(sys.argv) > 2 else None
    main(data_path, source)
