# path length stats over one bfs run

import numpy as np # pyright: ignore[reportMissingImports]


def graph_metrics(distance_map):
    """
    (max, min, median, std_dev, mean) over the hop counts in distance_map.

    The source's own 0 is a real entry so it is counted. std_dev is the population one
    (numpy's default ddof=0). Returns None for an empty map, there is nothing to
    summarise and callers have to handle that themselves.
    """

    if not distance_map:
        return None

    values = np.array(list(distance_map.values()), dtype=float)

    return (
        int(values.max()),
        int(values.min()),
        float(np.median(values)),
        float(np.std(values)),
        float(np.mean(values)),
    )
