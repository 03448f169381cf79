"""DOT-like text export for graphs.

Output grammar::

    graph G {          (``digraph G {`` for directed graphs)
      <index>;         one line per node, in index order
      <i> -- <j>;      one line per ordered pair with an edge (``->`` if directed)
    }

Edges are emitted for every ordered pair (i, j) with ``has_edge(i, j)``, so
an undirected edge appears twice, once in each direction. Weights are not
emitted.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .core import BaseGraph


def to_dot(graph: "BaseGraph") -> str:
    """
    Render graph in the DOT-like format above.

    Example:
        >>> g = Graph()
        >>> g.add_nodes_from("ab")
        >>> g.add_edge(0, 1)
        >>> print(to_dot(g), end="")
        graph G {
          0;
          1;
          0 -- 1;
          1 -- 0;
        }
    """
    if graph.is_directed():
        header, connector = "digraph G {\n", "->"
    else:
        header, connector = "graph G {\n", "--"

    n = graph.node_count
    lines = [header]
    lines.extend(f"  {i};\n" for i in range(n))
    for i in range(n):
        for j in range(n):
            if graph.has_edge(i, j):
                lines.append(f"  {i} {connector} {j};\n")
    lines.append("}\n")
    return "".join(lines)


def write_dot(graph: "BaseGraph", path: Union[str, Path]) -> None:
    """Write to_dot(graph) to path (overwrites an existing file)."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_dot(graph))
