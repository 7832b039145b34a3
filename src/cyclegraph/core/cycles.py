"""CycleGraph elementary cycle enumeration.

Implements Johnson's algorithm with a caller-supplied cap on the number of
cycles, and a cheaper finder that returns one representative cycle per
strongly connected component.

Reference: Donald B. Johnson, "Finding All the Elementary Circuits of a
Directed Graph", SIAM J. Computing, Vol. 4, No. 1, March 1975.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass

from cyclegraph.core.graph import GraphReader
from cyclegraph.core.results import CycleEnumerationResult
from cyclegraph.core.scc import tarjan_scc

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One level of the circuit search: a node and where we are in its successors."""

    node: int
    successors: Iterator[int]
    found: bool = False


def enumerate_cycles(graph: GraphReader, max_cycles: int) -> list[list[int]]:
    """Enumerate elementary cycles, stopping after ``max_cycles``.

    Start nodes are tried in increasing index order. The search from start
    ``s`` only visits nodes with index >= ``s``, so each cycle is reported
    once, rotated to begin at its smallest node. Self-loops are reported as
    single-node cycles.

    Args:
        graph: The directed graph
        max_cycles: Maximum number of cycles to return

    Returns:
        List of cycles, each a list of node indices in edge order. The edge
        from the last node back to the first closes the cycle.

    Raises:
        ValueError: If max_cycles is negative.
    """
    if max_cycles < 0:
        raise ValueError(f"max_cycles must be >= 0, got {max_cycles}")

    n = graph.node_count()
    cycles: list[list[int]] = []
    if n == 0 or max_cycles == 0:
        return cycles

    for start in range(n):
        if not _circuits_from(graph, start, cycles, max_cycles):
            break

    logger.debug(
        "Johnson enumeration: %d nodes, %d cycles (cap %d)",
        n,
        len(cycles),
        max_cycles,
    )
    return cycles


def enumerate_cycles_with_info(
    graph: GraphReader, max_cycles: int
) -> CycleEnumerationResult:
    """Enumerate cycles and report whether the cap was reached.

    ``truncated`` is set when ``count >= max_cycles``. This is conservative:
    it is also set when the cap happens to equal the exact number of cycles.
    """
    cycles = enumerate_cycles(graph, max_cycles)
    count = len(cycles)
    return CycleEnumerationResult(
        cycles=tuple(tuple(c) for c in cycles),
        count=count,
        truncated=max_cycles > 0 and count >= max_cycles,
    )


def _circuits_from(
    graph: GraphReader, start: int, cycles: list[list[int]], max_cycles: int
) -> bool:
    """Run one round of Johnson's circuit search rooted at ``start``.

    Blocked state lives only for this round. Returns False as soon as the
    cap is reached, True once the round is exhausted.
    """
    blocked: set[int] = {start}
    blocked_map: defaultdict[int, set[int]] = defaultdict(set)
    path: list[int] = [start]
    stack = [_Frame(start, iter(graph.successors(start)))]

    while stack:
        frame = stack[-1]
        descended = False

        for w in frame.successors:
            if w < start:
                continue
            if w == start:
                cycles.append(list(path))
                frame.found = True
                if len(cycles) >= max_cycles:
                    return False
            elif w not in blocked:
                blocked.add(w)
                path.append(w)
                stack.append(_Frame(w, iter(graph.successors(w))))
                descended = True
                break

        if descended:
            continue

        stack.pop()
        v = frame.node
        if frame.found:
            _unblock(v, blocked, blocked_map)
            if stack:
                stack[-1].found = True
        else:
            for w in graph.successors(v):
                if w >= start:
                    blocked_map[w].add(v)
        path.pop()

    return True


def _unblock(
    node: int, blocked: set[int], blocked_map: defaultdict[int, set[int]]
) -> None:
    """Unblock ``node`` and, transitively, every node waiting on it."""
    pending = [node]
    while pending:
        u = pending.pop()
        blocked.discard(u)
        for w in blocked_map.pop(u, ()):
            if w in blocked:
                pending.append(w)


def find_cycles_safe(graph: GraphReader, limit: int) -> list[list[int]]:
    """Find at most one cycle per strongly connected component.

    A polynomial alternative to full enumeration. Singleton components
    contribute their self-loop, if any; larger components contribute the
    first cycle met by a depth-first search from their smallest node that
    stays inside the component and visits successors in ascending order.

    Results are sorted by length, then lexicographically.
    """
    if limit <= 0:
        return []

    scc = tarjan_scc(graph)
    self_loops = set(scc.self_loops)
    cycles: list[list[int]] = []

    for component in scc.components:
        if len(cycles) >= limit:
            break
        if len(component) == 1:
            if component[0] in self_loops:
                cycles.append([component[0]])
            continue
        cycle = _first_cycle_in(graph, component)
        if cycle:
            cycles.append(cycle)

    cycles.sort(key=lambda c: (len(c), c))
    return cycles


def _first_cycle_in(graph: GraphReader, component: tuple[int, ...]) -> list[int]:
    members = set(component)
    adjacency = {
        u: sorted(w for w in graph.successors(u) if w in members) for u in members
    }

    root = min(component)
    visited = {root}
    path = [root]
    position = {root: 0}
    work: list[Iterator[int]] = [iter(adjacency[root])]

    while work:
        for w in work[-1]:
            if w in position:
                return path[position[w]:]
            if w not in visited:
                visited.add(w)
                position[w] = len(path)
                path.append(w)
                work.append(iter(adjacency[w]))
                break
        else:
            work.pop()
            del position[path.pop()]

    return []
