from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Relation, connect, empty, overlay, vertex


def random_relation(
    rng: np.random.Generator,
    *,
    max_vertices: int = 6,
    max_size: int = 8,
) -> Relation[int]:
    """
    Build a random relation by composing the four algebra primitives.

    rng:
        numpy Generator; pass ``np.random.default_rng(seed)`` for
        reproducible output.
    max_vertices:
        Vertices are drawn from 0..max_vertices-1.
    max_size:
        Upper bound on the number of leaves (``empty`` / ``vertex`` calls)
        in the generated expression tree.

    Only the public constructors are used, so the result is always
    consistent; that is what makes this useful for randomized law tests.
    """
    if max_vertices <= 0:
        raise ValueError(f"max_vertices must be positive, got {max_vertices}")
    if max_size < 0:
        raise ValueError(f"max_size must be non-negative, got {max_size}")

    size = int(rng.integers(0, max_size + 1))
    return _build(rng, size, max_vertices)


def _build(rng: np.random.Generator, size: int, max_vertices: int) -> Relation[int]:
    if size == 0:
        return empty()
    if size == 1:
        return vertex(int(rng.integers(0, max_vertices)))

    left = int(rng.integers(1, size))
    op = overlay if rng.random() < 0.5 else connect
    return op(_build(rng, left, max_vertices), _build(rng, size - left, max_vertices))


def random_subgraph(
    rng: np.random.Generator,
    r: Relation[int],
    *,
    keep: Optional[float] = None,
) -> Relation[int]:
    """
    Return a random subgraph of ``r``.

    Each vertex is kept with probability ``keep`` (drawn uniformly when
    None); each edge whose endpoints both survive is kept with the same
    probability.
    """
    p = float(rng.random()) if keep is None else float(keep)
    if not (0.0 <= p <= 1.0):
        raise ValueError(f"keep must be in [0, 1], got {keep}")

    ordered = sorted(r.domain)
    vertex_mask = rng.random(len(ordered)) < p
    kept = {v for v, flag in zip(ordered, vertex_mask) if flag}

    candidates = [(a, b) for (a, b) in sorted(r.relation) if a in kept and b in kept]
    edge_mask = rng.random(len(candidates)) < p
    pairs = [pair for pair, flag in zip(candidates, edge_mask) if flag]

    return Relation(kept, pairs)
