import networkx as nx # pyright: ignore[reportMissingModuleSource]
from collections import Counter

# graph = {person: [friend, friend, ...]}
# plain dict of lists so parallel edges survive, networkx.Graph would collapse them


def build_graph(records, keep_empty=False, dedupe=False):

    # every edge goes in both directions, even if the other row lists it again.
    # A lists B and B lists A -> two parallel A-B edges, degree counts both.
    # dedupe=True skips edges already there if u want a simple graph instead

    graph = {}

    for person_id, friends in records:

        # people with no friends still get an entry
        graph.setdefault(person_id, [])

        for friend in friends:
            if not friend and not keep_empty:
                continue
            if dedupe and friend in graph[person_id]:
                continue

            graph.setdefault(friend, []).append(person_id)
            graph[person_id].append(friend)

    return graph


def to_networkx(graph):

    # simple undirected view, parallel edges collapse into one

    G = nx.Graph()
    G.add_nodes_from(graph)
    for node, neighbors in graph.items():
        for neighbor in neighbors:
            G.add_edge(node, neighbor)
    return G


def node_count(graph):
    return len(graph)


def edge_count(graph):
    # each edge sits in two lists, except self loops which sit twice in the same one
    return sum(len(neighbors) for neighbors in graph.values()) // 2


def is_symmetric(graph):

    # B shows up k times in A's list <=> A shows up k times in B's list

    counts = {node: Counter(neighbors) for node, neighbors in graph.items()}

    for node, neighbor_counts in counts.items():
        for neighbor, k in neighbor_counts.items():
            if neighbor not in counts:
                return False
            if counts[neighbor][node] != k:
                return False
    return True
