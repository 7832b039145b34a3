"""CycleGraph strongly connected components.

Tarjan's algorithm over a GraphReader, used both to answer "does the graph
contain a cycle" in O(V + E) and as a cheap pre-check before cycle
enumeration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from cyclegraph.core.graph import GraphReader
from cyclegraph.core.results import SCCResult

logger = logging.getLogger(__name__)

_UNVISITED = -1


def tarjan_scc(graph: GraphReader) -> SCCResult:
    """Partition the graph into strongly connected components.

    DFS roots are taken in increasing index order, so every node, isolated
    ones included, ends up in exactly one component. Each component lists
    its nodes in the order they were popped off the Tarjan stack, which
    makes the DFS root the last element.

    The depth-first search runs on an explicit stack of
    ``(node, successor iterator)`` frames, so long paths cannot exhaust the
    interpreter's recursion limit.

    Returns:
        SCCResult. ``has_cycles`` is True iff some component has more than
        one node; self-loops are listed in ``self_loops`` instead.
    """
    n = graph.node_count()
    if n == 0:
        return SCCResult(components=(), has_cycles=False, cycle_count=0)

    counter = 0
    indices = [_UNVISITED] * n
    lowlink = [_UNVISITED] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[tuple[int, ...]] = []

    for root in range(n):
        if indices[root] != _UNVISITED:
            continue

        indices[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        work: list[tuple[int, Iterator[int]]] = [(root, iter(graph.successors(root)))]

        while work:
            v, successors = work[-1]
            for w in successors:
                if indices[w] == _UNVISITED:
                    indices[w] = lowlink[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack[w] = True
                    work.append((w, iter(graph.successors(w))))
                    break
                if on_stack[w]:
                    lowlink[v] = min(lowlink[v], indices[w])
            else:
                # All successors of v explored
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[v])

                if lowlink[v] == indices[v]:
                    component: list[int] = []
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        component.append(w)
                        if w == v:
                            break
                    components.append(tuple(component))

    cycle_count = sum(1 for c in components if len(c) > 1)
    self_loops = find_self_loops(graph)
    logger.debug(
        "Tarjan SCC: %d nodes, %d components, %d cyclic, %d self-loops",
        n,
        len(components),
        cycle_count,
        len(self_loops),
    )

    return SCCResult(
        components=tuple(components),
        has_cycles=cycle_count > 0,
        cycle_count=cycle_count,
        self_loops=self_loops,
    )


def find_self_loops(graph: GraphReader) -> tuple[int, ...]:
    """Return the nodes with an edge to themselves, in index order."""
    return tuple(
        v for v in range(graph.node_count()) if v in graph.successors(v)
    )


def has_cycles(graph: GraphReader, include_self_loops: bool = False) -> bool:
    """Check whether the graph contains a cycle.

    By default only multi-node strongly connected components count, which
    matches ``SCCResult.has_cycles``. Pass ``include_self_loops=True`` to
    also treat a self-loop as a cycle.
    """
    result = tarjan_scc(graph)
    if include_self_loops:
        return result.has_any_cycle
    return result.has_cycles
