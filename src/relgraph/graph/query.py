from __future__ import annotations

from typing import List

from .core import Pair, Relation, T


def is_empty(r: Relation[T]) -> bool:
    return not r.domain


def has_vertex(x: T, r: Relation[T]) -> bool:
    return x in r.domain


def has_edge(x: T, y: T, r: Relation[T]) -> bool:
    return (x, y) in r.relation


def vertex_count(r: Relation[T]) -> int:
    return len(r.domain)


def edge_count(r: Relation[T]) -> int:
    return len(r.relation)


def vertex_list(r: Relation[T]) -> List[T]:
    """Vertices in ascending order."""
    return sorted(r.domain)


def edge_list(r: Relation[T]) -> List[Pair]:
    """Edges in ascending (source, target) order."""
    return sorted(r.relation)


def is_subgraph_of(x: Relation[T], y: Relation[T]) -> bool:
    """
    True if every vertex and every edge of ``x`` is also in ``y``.

    The total order on relations refines this: ``is_subgraph_of(x, y)``
    implies ``x <= y``.
    """
    return x.domain <= y.domain and x.relation <= y.relation
