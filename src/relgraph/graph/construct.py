"""Derived constructors expressed through the four algebra primitives."""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from .core import Pair, Relation, T, checked, connect, empty, overlay, referred_vertices, vertex


def edge(x: T, y: T) -> Relation[T]:
    """A graph with a single edge ``x -> y`` (a self-loop when x == y)."""
    return connect(vertex(x), vertex(y))


def vertices(xs: Iterable[T]) -> Relation[T]:
    """The graph with the given isolated vertices; duplicates collapse."""
    return Relation(xs, check=False)


def edges(pairs: Iterable[Pair]) -> Relation[T]:
    """
    The graph containing exactly the given edges and their endpoints.

    Each item must be a 2-tuple; anything else raises TypeError or
    ValueError before the relation is built.
    """
    relation = []
    for pair in pairs:
        if not isinstance(pair, tuple):
            raise TypeError(f"Edge must be a (source, target) tuple, got {type(pair).__name__}")
        if len(pair) != 2:
            raise ValueError(f"Edge must have exactly two endpoints, got {pair!r}")
        relation.append(pair)
    return checked(Relation(referred_vertices(relation), relation, check=False))


def overlays(rs: Iterable[Relation[T]]) -> Relation[T]:
    return reduce(overlay, rs, empty())


def connects(rs: Iterable[Relation[T]]) -> Relation[T]:
    return reduce(connect, rs, empty())


def clique(xs: Iterable[T]) -> Relation[T]:
    """
    Connect the given vertices in order: every vertex gets an edge to every
    vertex that follows it. A repeated vertex also gets a self-loop.
    """
    return connects(vertex(x) for x in xs)


def star(x: T, ys: Iterable[T]) -> Relation[T]:
    """Vertex ``x`` with an edge to each of ``ys``."""
    leaves = vertices(ys)
    if not leaves.domain:
        return vertex(x)
    return connect(vertex(x), leaves)
