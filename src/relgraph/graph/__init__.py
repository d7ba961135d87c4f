"""
relgraph.graph
==============

Directed graphs as binary relations, built with a small algebra.

Public API:

- Relation          : immutable (domain, relation) value; ``|`` overlays, ``>>`` connects.
- empty, vertex     : the two leaf constructors.
- overlay, connect  : the two combinators.
- compare, render   : size-lexicographic order and canonical text.
- is_consistent     : every related pair refers to domain vertices.
- edge, vertices, edges, overlays, connects, clique, star : derived constructors.
- is_empty, has_vertex, has_edge, vertex_count, edge_count,
  vertex_list, edge_list, is_subgraph_of                  : queries.
- random_relation, random_subgraph                        : numpy-driven generators for tests.
"""

from __future__ import annotations

from .core import (
    InconsistentRelationError,
    Relation,
    check_consistent,
    checked,
    compare,
    connect,
    empty,
    is_consistent,
    overlay,
    referred_vertices,
    render,
    set_product,
    vertex,
)
from .construct import clique, connects, edge, edges, overlays, star, vertices
from .query import (
    edge_count,
    edge_list,
    has_edge,
    has_vertex,
    is_empty,
    is_subgraph_of,
    vertex_count,
    vertex_list,
)
from .generate import random_relation, random_subgraph

__all__ = [
    "InconsistentRelationError",
    "Relation",
    "check_consistent",
    "checked",
    "compare",
    "connect",
    "empty",
    "is_consistent",
    "overlay",
    "referred_vertices",
    "render",
    "set_product",
    "vertex",
    "clique",
    "connects",
    "edge",
    "edges",
    "overlays",
    "star",
    "vertices",
    "edge_count",
    "edge_list",
    "has_edge",
    "has_vertex",
    "is_empty",
    "is_subgraph_of",
    "vertex_count",
    "vertex_list",
    "random_relation",
    "random_subgraph",
]
