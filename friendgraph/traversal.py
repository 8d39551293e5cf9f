from collections import deque


class UnknownNodeError(KeyError):
    """Raised when a traversal starts from someone who is not in the graph."""


def shortest_distances(graph, source, max_depth=None):
    """
    Hop distance from source to everyone reachable.

    Plain BFS. A node counts as visited the moment it is queued, so parallel edges
    never queue the same person twice. Unreachable people are just missing from
    the result. With max_depth the search does not expand past that many hops.
    """

    if source not in graph:
        raise UnknownNodeError(source)

    distances = {}
    visited = {source}
    queue = deque([(source, 0)])

    while queue:
        current, dist = queue.popleft()
        distances[current] = dist

        if max_depth is not None and dist >= max_depth:
            continue

        for neighbor in graph[current]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append((neighbor, dist + 1))

    return distances


def nodes_at_distance(graph, source, hops):

    # distinct people exactly `hops` away, nothing closer or further

    distances = shortest_distances(graph, source, max_depth=hops)
    return {node for node, dist in distances.items() if dist == hops}
