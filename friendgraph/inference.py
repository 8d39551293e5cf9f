# decisions made on top of the built graph
# right now thats only "who do we run the bfs from"

from friendgraph.constants import DEFAULT_SOURCE_STRATEGY, SOURCE_STRATEGIES
from friendgraph.traversal import UnknownNodeError


def choose_source(graph: dict, strategy: str = DEFAULT_SOURCE_STRATEGY, source=None) -> str:

    # explicit source always wins
    # first      -> first person in insertion order (the first row of the file)
    # max_degree -> most entries in their list, ties go to whoever came first

    if source is not None:
        if source not in graph:
            raise UnknownNodeError(source)
        return source

    if strategy not in SOURCE_STRATEGIES:
        raise ValueError(f"unknown source strategy {strategy!r}, pick one of {SOURCE_STRATEGIES}")

    if not graph:
        raise ValueError("cannot pick a source from an empty graph")

    if strategy == 'first':
        return next(iter(graph))

    # max keeps the first of equal keys
    return max(graph, key=lambda node: len(graph[node]))
