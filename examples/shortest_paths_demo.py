"""Shortest paths and structural checks on a small road network.

Builds an undirected weighted graph of towns, prints the shortest route from
the first town to every other one, and exports the network in DOT form.
"""

import logging

from densegraph import Graph, configure_logging


def build_network() -> Graph:
    g = Graph()
    g.add_nodes_from(["Ashby", "Brook", "Carver", "Dunmore", "Elston"])
    g.add_weighted_edges_from(
        [
            (0, 1, 4.0),
            (0, 2, 2.0),
            (1, 2, 1.0),
            (1, 3, 5.0),
            (2, 3, 8.0),
            (3, 4, 3.0),
        ]
    )
    return g


def main() -> None:
    configure_logging(level=logging.INFO)

    g = build_network()
    print(f"{g!r}: connected={g.is_connected()}, bipartite={g.is_bipartite()}")

    dist, paths = g.single_source_dijkstra(0)
    for target, (d, path) in enumerate(zip(dist, paths)):
        route = " -> ".join(g.get_node(i) for i in path)
        print(f"  {g.get_node(target):8s} {d:5.1f}  {route}")

    print()
    print(g.to_dot(), end="")


if __name__ == "__main__":
    main()
