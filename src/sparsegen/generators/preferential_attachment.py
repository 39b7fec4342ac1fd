"""
Preferential Attachment Generators
==================================

Growth processes that attach new vertices to existing ones with
probability proportional to degree.

Both processes keep an arc list holding both directions of every edge.
Vertex v appears as the source of deg(v) arcs, so the source of a
uniformly drawn arc is a degree-proportional sample of the vertices.

Submodule functions
-------------------
preferential_attachment_graph, pa_graph
    Clique seed plus new vertices linking to k degree-sampled targets
preferential_attachment_edges, pa_edges
    Grow an existing arc list in place
generalized_preferential_attachment_graph, gpa_graph
    Three-event process of Avin, Lotker, Nahum and Peleg
generalized_preferential_attachment_edges, gpa_edges
    Run the three-event process on an existing arc list

References
----------
.. [1] Barabási, A.-L. & Albert, R. (1999). Emergence of scaling in
       random networks. Science.
.. [2] Avin, C., Lotker, Z., Nahum, Y. & Peleg, D. (2017). Improved degree
       bounds and full spectrum power laws in preferential attachment
       networks. KDD.
"""

import enum
import logging
from typing import List, Optional, Union

from ..config import (
    DEFAULT_GPA_EDGE_PROB,
    DEFAULT_GPA_NODE_PROB,
    DEFAULT_PA_CLIQUE_SIZE,
    DEFAULT_PA_EDGES_PER_NODE,
)
from ..errors import ArgumentError, DomainError
from ..network import MatrixNetwork
from ..rng import SeedLike, ensure_rng
from ._common import Arc, arcs_to_network, clique_arcs

logger = logging.getLogger(__name__)


class SelfLoops(str, enum.Enum):
    """Whether the edge event of the generalized process may join a vertex to itself."""

    FORBIDDEN = "forbidden"
    ALLOWED = "allowed"


class ComponentOverflow(str, enum.Enum):
    """What a component event does when only one vertex slot is left."""

    SKIP = "skip"
    NODE_EVENT = "node_event"


def _as_mode(mode_type, name: str, value):
    try:
        return mode_type(value)
    except ValueError:
        allowed = ", ".join(repr(m.value) for m in mode_type)
        raise DomainError(name, value, f"must be one of {allowed}") from None


def _check_sizes(n: int, k0: int) -> None:
    if k0 < 0:
        raise DomainError("k0", k0, "must be non-negative")
    if n < k0:
        raise ArgumentError(f"n={n} must be >= k0={k0}")


def _max_vertex(edges: List[Arc]) -> int:
    return max(max(u, v) for u, v in edges)


def preferential_attachment_graph(
    n: int,
    k: int = DEFAULT_PA_EDGES_PER_NODE,
    k0: int = DEFAULT_PA_CLIQUE_SIZE,
    seed: SeedLike = None,
) -> MatrixNetwork:
    """
    Generate a preferential attachment graph.

    Start from a ``k0``-vertex clique, then add ``n - k0`` vertices. Each
    new vertex draws ``k`` targets with probability proportional to their
    current degree (with repetition) and links to the distinct ones.

    Parameters
    ----------
    n : int
        Number of vertices in the final graph
    k : int, optional
        Targets drawn by each new vertex; its initial degree is between 1
        and k because repeated draws collapse (default: 2)
    k0 : int, optional
        Size of the seed clique (default: 3)
    seed : int, np.random.Generator or None
        Random source

    Returns
    -------
    MatrixNetwork
        Undirected graph with exactly ``n`` vertices

    Raises
    ------
    DomainError
        If ``k0 < 0`` or ``k < 1``.
    ArgumentError
        If ``n < k0``, or vertices must be added to a seed without edges
        (``k0 < 2``).

    Examples
    --------
    >>> A = preferential_attachment_graph(100, 5, 2, seed=42)
    >>> A.n
    100
    """
    _check_sizes(n, k0)
    logger.info(f"Generating preferential attachment graph: n={n}, k={k}, k0={k0}")

    edges = clique_arcs(k0)
    preferential_attachment_edges(n - k0, k, edges, k0, seed=seed)
    A = arcs_to_network(edges, n)

    logger.info(f"Generated preferential attachment graph with {A.nnz // 2} edges")
    return A


def preferential_attachment_edges(
    nnew: int,
    k: int,
    edges: List[Arc],
    n0: Optional[int] = None,
    seed: SeedLike = None,
) -> List[Arc]:
    """
    Grow an arc list by ``nnew`` preferentially attached vertices.

    The list is extended in place and also returned. New vertices are
    numbered ``n0, n0 + 1, ...``; when ``n0`` is omitted it is one past
    the largest index present in ``edges``.

    Parameters
    ----------
    nnew : int
        Number of vertices to add
    k : int
        Targets drawn by each new vertex
    edges : list of (int, int)
        Arc list containing both directions of every edge
    n0 : int, optional
        Index of the first new vertex
    seed : int, np.random.Generator or None
        Random source

    Returns
    -------
    list of (int, int)
        The same ``edges`` list, extended
    """
    if nnew < 0:
        raise DomainError("nnew", nnew, "must be non-negative")
    if n0 is None:
        if not edges:
            raise ArgumentError("the list of initial edges must be non-empty")
        n0 = _max_vertex(edges) + 1
    if nnew == 0:
        return edges
    if not edges:
        raise ArgumentError("the list of initial edges must be non-empty")
    if k < 1:
        raise DomainError("k", k, "must be at least 1")

    rng = ensure_rng(seed)
    for step in range(nnew):
        i = n0 + step
        picks = rng.integers(0, len(edges), size=k).tolist()
        # distinct targets in draw order
        targets = dict.fromkeys(edges[t][0] for t in picks)
        for v in targets:
            edges.append((i, v))
            edges.append((v, i))
    return edges


def _check_probabilities(p: float, r: float) -> None:
    if not 0 <= p <= 1:
        raise DomainError("p", p, "must be between 0 and 1")
    if not 0 <= r <= 1:
        raise DomainError("r", r, "must be between 0 and 1")
    if p + r > 1:
        raise DomainError("p+r", p + r, "must be <= 1")


def _has_two_distinct_nodes(edges: List[Arc]) -> bool:
    if not edges:
        raise ArgumentError("the starting graph requires at least one edge")
    first = edges[0][0]
    return any(u != first or v != first for u, v in edges)


def generalized_preferential_attachment_graph(
    n: int,
    p: float = DEFAULT_GPA_NODE_PROB,
    r: float = DEFAULT_GPA_EDGE_PROB,
    k0: int = DEFAULT_PA_CLIQUE_SIZE,
    self_loops: Union[SelfLoops, str] = SelfLoops.FORBIDDEN,
    overflow: Union[ComponentOverflow, str] = ComponentOverflow.SKIP,
    seed: SeedLike = None,
) -> MatrixNetwork:
    """
    Generate a generalized preferential attachment graph.

    Starting from a ``k0``-clique, each time step performs one of three
    events until the graph has ``n`` vertices:

    - with probability ``p``, a new vertex links to a degree-sampled
      existing vertex (node event);
    - with probability ``r``, an edge joins two degree-sampled existing
      vertices (edge event);
    - otherwise two new vertices are added joined by an edge (component
      event), if there is room for both.

    Parameters
    ----------
    n : int
        Number of vertices in the final graph
    p : float, optional
        Probability of a node event (default: 1/3)
    r : float, optional
        Probability of an edge event; ``p + r <= 1`` (default: 1/2)
    k0 : int, optional
        Size of the seed clique (default: 3)
    self_loops : SelfLoops or str, optional
        ``FORBIDDEN`` (default) redraws both endpoints of an edge event
        until they differ; ``ALLOWED`` keeps loops
    overflow : ComponentOverflow or str, optional
        ``SKIP`` (default) turns a component event that does not fit into
        a no-op; ``NODE_EVENT`` performs a node event instead
    seed : int, np.random.Generator or None
        Random source

    Returns
    -------
    MatrixNetwork
        Undirected graph with exactly ``n`` vertices. Edge events may
        repeat an existing edge; repeats are stored as separate entries.

    Raises
    ------
    DomainError
        If ``k0 < 0``, ``p`` or ``r`` lie outside [0, 1], ``p + r > 1``, or
        ``self_loops`` or ``overflow`` names no known mode.
    ArgumentError
        If ``n < k0``, the seed lacks the arcs the events need, or the
        parameters can never reach ``n`` vertices.

    Examples
    --------
    >>> A = generalized_preferential_attachment_graph(100, 1/3, 1/2, 2, seed=42)
    >>> A.n
    100
    """
    _check_sizes(n, k0)
    _check_probabilities(p, r)
    self_loops = _as_mode(SelfLoops, "self_loops", self_loops)
    overflow = _as_mode(ComponentOverflow, "overflow", overflow)
    logger.info(
        f"Generating generalized preferential attachment graph: n={n}, p={p}, "
        f"r={r}, k0={k0}, self_loops={self_loops.value}"
    )

    edges = clique_arcs(k0)
    generalized_preferential_attachment_edges(
        n, p, r, edges, k0, self_loops=self_loops, overflow=overflow, seed=seed
    )
    A = arcs_to_network(edges, n)

    logger.info(f"Generated generalized preferential attachment graph with {A.nnz} arcs")
    return A


def generalized_preferential_attachment_edges(
    n: int,
    p: float,
    r: float,
    edges: List[Arc],
    n0: int,
    self_loops: Union[SelfLoops, str] = SelfLoops.FORBIDDEN,
    overflow: Union[ComponentOverflow, str] = ComponentOverflow.SKIP,
    seed: SeedLike = None,
) -> List[Arc]:
    """
    Run the three-event process on ``edges`` until there are ``n`` vertices.

    ``n0`` is the current vertex count, so new vertices are numbered from
    ``n0``. The list is extended in place and returned.

    An edge event with self-loops forbidden resamples until the endpoints
    differ; with at least two distinct vertices present this ends with
    probability one but has no deterministic bound.
    """
    _check_probabilities(p, r)
    self_loops = _as_mode(SelfLoops, "self_loops", self_loops)
    overflow = _as_mode(ComponentOverflow, "overflow", overflow)

    i = n0
    if i >= n:
        return edges

    missing = n - i
    if p == 0 and r == 1:
        raise ArgumentError(
            f"p=0 and r=1 add no vertices; cannot grow from {i} to n={n}"
        )
    if p == 0 and overflow is ComponentOverflow.SKIP and missing % 2 == 1:
        raise ArgumentError(
            f"with p=0 only pairs of vertices are added; cannot grow from {i} "
            f"to n={n} by skipping component events"
        )
    needs_arcs = p > 0 or r > 0 or missing % 2 == 1
    if needs_arcs and not edges:
        raise ArgumentError("the list of initial edges must be non-empty")
    if self_loops is SelfLoops.FORBIDDEN and not _has_two_distinct_nodes(edges):
        raise ArgumentError("the starting graph must have at least two distinct nodes")

    rng = ensure_rng(seed)

    def sample_vertex() -> int:
        return edges[int(rng.integers(len(edges)))][0]

    while i < n:
        x = rng.random()
        if x < p:
            node_event = True
        elif x < p + r:
            node_event = False
            v1, v2 = sample_vertex(), sample_vertex()
            if self_loops is SelfLoops.FORBIDDEN:
                while v1 == v2:
                    v1, v2 = sample_vertex(), sample_vertex()
            edges.append((v1, v2))
            edges.append((v2, v1))
        elif i + 2 <= n:
            node_event = False
            edges.append((i, i + 1))
            edges.append((i + 1, i))
            i += 2
        else:
            node_event = overflow is ComponentOverflow.NODE_EVENT

        if node_event:
            v = sample_vertex()
            edges.append((i, v))
            edges.append((v, i))
            i += 1

    return edges


pa_graph = preferential_attachment_graph
pa_edges = preferential_attachment_edges
gpa_graph = generalized_preferential_attachment_graph
gpa_edges = generalized_preferential_attachment_edges
