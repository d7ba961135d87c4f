from __future__ import annotations

from itertools import chain, product
from numbers import Real
from typing import AbstractSet, Any, FrozenSet, Generic, Iterable, List, Tuple, TypeVar

from ..config import get_settings
from ..log import getLogger

logger = getLogger(__name__)

T = TypeVar("T")
Pair = Tuple[T, T]


class InconsistentRelationError(AssertionError):
    """A relation refers to vertices that are missing from its domain."""
    pass


class Relation(Generic[T]):
    """
    Directed graph represented as a binary relation on a finite domain.

    Structure:
      - domain:   frozenset of vertices.
      - relation: frozenset of (source, target) pairs, self-loops included.
                  Every element of every pair belongs to the domain.

    Values are immutable and are normally produced by ``empty``, ``vertex``,
    ``overlay`` and ``connect`` (and the helpers built on them). Two
    operators are provided as shorthand:

        x | y   == overlay(x, y)
        x >> y  == connect(x, y)

    These are NOT arithmetic: overlay and connect form an algebra with
    ``empty`` as the identity of both, connect distributes over overlay,
    and ``x >> y >> z == (x >> y) | (x >> z) | (y >> z)``. There are no
    inverses and no separate multiplicative identity, so the usual ring laws
    do not hold.

    Ordering is size-lexicographic: number of vertices, then the vertex sets
    (ascending), then number of edges, then the edge sets (ascending). It
    refines the subgraph relation, e.g.

        vertex(1) < vertex(2)
        vertex(3) < edge(1, 2)
        vertex(1) < edge(1, 1)
        edge(1, 1) < edge(1, 2)
        edge(1, 2) < edge(1, 1) | edge(2, 2)
        edge(1, 2) < edge(1, 3)

    ``repr`` gives the canonical rendering (see ``render``):

        empty()                          -> empty
        vertex(1)                        -> vertex 1
        vertex(1) | vertex(2)            -> vertices [1, 2]
        vertex(1) >> vertex(2)           -> edge 1 2
        vertex(1) >> vertex(2) >> vertex(3)
                                         -> edges [(1, 2), (1, 3), (2, 3)]
        (vertex(1) >> vertex(2)) | vertex(3)
                                         -> overlay (vertex 3) (edge 1 2)
    """

    __slots__ = ("_domain", "_relation", "_key")

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        domain: Iterable[T] = (),
        relation: Iterable[Pair] = (),
        *,
        check: bool = True,
    ) -> None:
        object.__setattr__(self, "_domain", frozenset(domain))
        object.__setattr__(self, "_relation", frozenset(relation))
        object.__setattr__(self, "_key", None)
        if check:
            check_consistent(self)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (_restore, (self._domain, self._relation))

    # ------------------------------------------------------------------ #
    # Fields
    # ------------------------------------------------------------------ #
    @property
    def domain(self) -> FrozenSet[T]:
        """The vertex set."""
        return self._domain

    @property
    def relation(self) -> FrozenSet[Pair]:
        """The set of related (source, target) pairs."""
        return self._relation

    # ------------------------------------------------------------------ #
    # Ordering, equality, hashing
    # ------------------------------------------------------------------ #
    def _order_key(self) -> Tuple[int, List[T], int, List[Pair]]:
        key = self._key
        if key is None:
            key = (
                len(self._domain),
                sorted(self._domain),
                len(self._relation),
                sorted(self._relation),
            )
            object.__setattr__(self, "_key", key)
        return key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self._domain == other._domain and self._relation == other._relation

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return not self == other

    def __lt__(self, other: Relation[T]) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Relation[T]) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Relation[T]) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Relation[T]) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash((self._domain, self._relation))

    # ------------------------------------------------------------------ #
    # Algebra shorthand
    # ------------------------------------------------------------------ #
    def __or__(self, other: Relation[T]) -> Relation[T]:
        if not isinstance(other, Relation):
            return NotImplemented
        return overlay(self, other)

    def __rshift__(self, other: Relation[T]) -> Relation[T]:
        if not isinstance(other, Relation):
            return NotImplemented
        return connect(self, other)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return render(self)

    __str__ = __repr__


def _restore(domain: FrozenSet[T], relation: FrozenSet[Pair]) -> Relation[T]:
    # Unpickling reproduces the stored value exactly, consistent or not.
    return Relation(domain, relation, check=False)


def checked(result: Relation[T]) -> Relation[T]:
    """Return a freshly built relation, checking it first when debug checks are on."""
    if get_settings().algebra.check_consistency:
        check_consistent(result)
    return result


# ---------------------------------------------------------------------- #
# Constructors
# ---------------------------------------------------------------------- #
_EMPTY: Relation[Any] = Relation(check=False)


def empty() -> Relation[T]:
    """The empty graph. O(1)."""
    return _EMPTY


def vertex(x: T) -> Relation[T]:
    """A graph with the single isolated vertex ``x``. O(1)."""
    return Relation((x,), check=False)


def overlay(x: Relation[T], y: Relation[T]) -> Relation[T]:
    """
    Overlay two graphs: union of vertices and union of edges.

    Commutative, associative and idempotent, with ``empty()`` as identity.
    O((n + m) * log(n)) time, O(n + m) memory.
    """
    return checked(
        Relation(x.domain | y.domain, x.relation | y.relation, check=False)
    )


def connect(x: Relation[T], y: Relation[T]) -> Relation[T]:
    """
    Connect two graphs: overlay them and add an edge from every vertex of
    ``x`` to every vertex of ``y``.

    Associative with ``empty()`` as identity, distributes over ``overlay``
    and obeys the decomposition law

        connect(connect(x, y), z)
            == overlay(overlay(connect(x, y), connect(x, z)), connect(y, z))

    The number of edges in the result is quadratic in the number of vertices
    of the arguments: m = O(m1 + m2 + n1 * n2).
    """
    num_pairs = len(x.domain) * len(y.domain)
    threshold = get_settings().algebra.product_log_threshold
    if num_pairs > threshold:
        logger.debug(
            "connect() building %d vertex pairs (%d x %d), above threshold %d",
            num_pairs,
            len(x.domain),
            len(y.domain),
            threshold,
        )
    return checked(
        Relation(
            x.domain | y.domain,
            x.relation | y.relation | set_product(x.domain, y.domain),
            check=False,
        )
    )


def set_product(xs: AbstractSet[T], ys: AbstractSet[T]) -> FrozenSet[Pair]:
    """Cartesian product of two vertex sets."""
    return frozenset(product(xs, ys))


# ---------------------------------------------------------------------- #
# Consistency
# ---------------------------------------------------------------------- #
def referred_vertices(pairs: Iterable[Pair]) -> FrozenSet[T]:
    """The set of elements appearing on either side of any pair."""
    return frozenset(chain.from_iterable(pairs))


def is_consistent(r: Relation[T]) -> bool:
    """
    True iff every pair in ``r.relation`` refers to vertices of ``r.domain``.

    It should be impossible to build an inconsistent relation through the
    public constructors; this is meant for tests and debug assertions.
    """
    return referred_vertices(r.relation) <= r.domain


def check_consistent(r: Relation[T]) -> Relation[T]:
    """Return ``r`` unchanged, or raise InconsistentRelationError."""
    if not is_consistent(r):
        missing = referred_vertices(r.relation) - r.domain
        logger.error("Inconsistent relation: vertices %r missing from domain", missing)
        raise InconsistentRelationError(
            f"relation refers to vertices missing from the domain: {sorted(missing)!r}"
        )
    return r


# ---------------------------------------------------------------------- #
# Comparison and rendering
# ---------------------------------------------------------------------- #
def compare(x: Relation[T], y: Relation[T]) -> int:
    """
    Size-lexicographic comparison: -1 if x < y, 0 if equal, 1 if x > y.

    Compares vertex counts, then vertex sets, then edge counts, then edge
    sets; the first difference decides.
    """
    nx, ny = len(x.domain), len(y.domain)
    if nx != ny:
        return (nx > ny) - (nx < ny)
    kx = x._order_key()
    ky = y._order_key()
    return (kx > ky) - (kx < ky)


def _atom(x: Any) -> str:
    # Negative numbers are parenthesised when they stand alone as an argument.
    text = repr(x)
    if isinstance(x, Real) and not isinstance(x, bool) and x < 0:
        return f"({text})"
    return text


def _vertex_literal(xs: List[T]) -> str:
    if len(xs) == 1:
        return f"vertex {_atom(xs[0])}"
    return f"vertices {xs!r}"


def _edge_literal(pairs: List[Pair]) -> str:
    if len(pairs) == 1:
        (x, y), = pairs
        return f"edge {_atom(x)} {_atom(y)}"
    return f"edges {pairs!r}"


def render(r: Relation[T]) -> str:
    """
    Canonical text for a relation.

    - no vertices                     -> ``empty``
    - no edges                        -> ``vertex x`` / ``vertices [...]``
    - every vertex touches an edge    -> ``edge x y`` / ``edges [...]``
    - otherwise                       -> ``overlay (<isolated vertices>) (<edges>)``
    """
    if not r.domain:
        return "empty"
    if not r.relation:
        return _vertex_literal(sorted(r.domain))

    used = referred_vertices(r.relation)
    edges = sorted(r.relation)
    if r.domain == used:
        return _edge_literal(edges)
    return f"overlay ({_vertex_literal(sorted(r.domain - used))}) ({_edge_literal(edges)})"
