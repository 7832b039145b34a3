#!/usr/bin/env python3
"""Dependency cycle example.

This example demonstrates the basic usage of CycleGraph:
1. Build a graph from labelled edges
2. Run the cheap SCC check
3. Enumerate elementary cycles under a cap
4. Export results with labels

Run this example:
    python examples/dependency_cycles.py
"""

import json

from cyclegraph import (
    DiGraph,
    enumerate_cycles_with_info,
    find_cycles_safe,
    tarjan_scc,
)


def main() -> None:
    graph = DiGraph.from_edges(
        [
            ("models", "storage"),
            ("storage", "cache"),
            ("cache", "models"),
            ("storage", "models"),
            ("api", "models"),
            ("api", "auth"),
            ("auth", "api"),
            ("logging", "logging"),
        ]
    )

    print(f"Graph: {graph!r}")

    # Linear-time check
    scc = tarjan_scc(graph)
    print(f"\nHas multi-node cycles: {scc.has_cycles}")
    print(f"Cyclic components: {scc.cycle_count}")
    print(f"Self-loops: {[graph.label_of(n) for n in scc.self_loops]}")

    # Full enumeration, capped
    result = enumerate_cycles_with_info(graph, max_cycles=10)
    print("\nElementary cycles:")
    print(json.dumps(result.with_labels(graph), indent=2))

    # One cycle per component
    print("\nRepresentative cycles:")
    for cycle in find_cycles_safe(graph, limit=10):
        print("  " + " -> ".join(graph.label_of(n) for n in cycle + cycle[:1]))


if __name__ == "__main__":
    main()
