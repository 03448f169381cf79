"""Performance benchmarks for densegraph.

This package contains microbenchmarks for the O(V^2) and O(V^3) hot paths:
dense Dijkstra and transitive closure.
"""
