"""Shortest driving routes on a small north-east US road network."""

from spgraph import WeightedDiGraph, shortest_path_with_cost

ROADS = [
    ("Boston", "New York", 215.0),
    ("Boston", "Albany", 170.0),
    ("New York", "Philadelphia", 95.0),
    ("Philadelphia", "Washington DC", 123.0),
    ("Albany", "Buffalo", 290.0),
    ("Buffalo", "Cleveland", 190.0),
    ("Cleveland", "Chicago", 345.0),
    ("New York", "Cleveland", 460.0),
    ("Chicago", "St. Louis", 300.0),
    ("Washington DC", "Atlanta", 640.0),
]

QUERIES = [
    ("Boston", "Chicago"),
    ("Boston", "Atlanta"),
    ("Albany", "St. Louis"),
]


def build_road_network() -> WeightedDiGraph:
    """Return the road network with every road usable in both directions."""
    g = WeightedDiGraph()
    for a, b, miles in ROADS:
        g.add_edge(a, b, miles)
        g.add_edge(b, a, miles)
    return g


def main() -> None:
    g = build_road_network()
    for start, destination in QUERIES:
        route = shortest_path_with_cost(g, start, destination)
        if route is None:
            print(f"Shortest {start} -> {destination}: no route")
        else:
            print(
                f"Shortest {start} -> {destination}: "
                f"{' -> '.join(route.vertices)} ({route.cost:.0f} miles)"
            )


if __name__ == "__main__":
    main()
