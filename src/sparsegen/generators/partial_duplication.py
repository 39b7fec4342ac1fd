"""
Partial Duplication Generator
=============================

Random graph model based on the evolution of protein-protein interaction
networks. Each step picks an existing vertex uniformly at random, adds a
copy of it, and keeps each of the original's edges for the copy with a
given probability. Edge weights are copied verbatim, so weighted seed
graphs are supported.

New vertices tend to become isolated for p <= 0.567143 [1]_.

References
----------
.. [1] Hermann, F. & Pfaffelhuber, P. (2016). Large-scale behavior of the
       partial duplication random graph. ALEA. https://arxiv.org/abs/1408.0904
"""

import logging
from typing import List, Tuple

import numpy as np

from ..config import DEFAULT_RETENTION_PROB
from ..errors import ArgumentError, DomainError
from ..network import MatrixNetwork
from ..rng import SeedLike, ensure_rng

logger = logging.getLogger(__name__)


def partial_duplication(
    A: MatrixNetwork,
    steps: int,
    p: float = DEFAULT_RETENTION_PROB,
    seed: SeedLike = None,
) -> MatrixNetwork:
    """
    Grow ``A`` by ``steps`` rounds of partial vertex duplication.

    Parameters
    ----------
    A : MatrixNetwork
        Undirected seed graph, possibly weighted
    steps : int
        Number of vertices to add
    p : float, optional
        Probability that each edge of the duplicated vertex is copied
        (default: 0.6)
    seed : int, np.random.Generator or None
        Random source

    Returns
    -------
    MatrixNetwork
        Undirected graph with ``A.n + steps`` vertices; weights keep the
        dtype of ``A.vals``

    Raises
    ------
    ArgumentError
        If ``A`` is directed, or ``steps > 0`` and ``A`` has no vertices.
    DomainError
        If ``p`` is not in [0, 1] or ``steps < 0``.

    Examples
    --------
    >>> from sparsegen.generators import pa_graph
    >>> B = partial_duplication(pa_graph(20, 2, 3, seed=1), 10, 0.0, seed=1)
    >>> B.n
    30
    """
    if not A.is_undirected:
        raise ArgumentError("A must be undirected")
    if not 0 <= p <= 1:
        raise DomainError("p", p, "must be a probability")
    if steps < 0:
        raise DomainError("steps", steps, "must be non-negative")
    if steps > 0 and A.n == 0:
        raise ArgumentError("cannot duplicate vertices of an empty graph")

    logger.info(f"Running partial duplication: n={A.n}, steps={steps}, p={p}")
    rng = ensure_rng(seed)

    n = A.n
    # adjacency as (neighbor, weight) lists so rows can grow cheaply
    adjacency: List[List[Tuple[int, object]]] = []
    for i in range(n):
        neighbors, weights = A.row(i)
        adjacency.append(list(zip(neighbors.tolist(), weights.tolist())))
    adjacency.extend([] for _ in range(steps))

    for _ in range(steps):
        source = int(rng.integers(n))
        row = adjacency[source]
        if row:
            keep = rng.random(len(row)) < p
            copied = [edge for edge, kept in zip(row, keep) if kept]
            for neighbor, weight in copied:
                adjacency[n].append((neighbor, weight))
                adjacency[neighbor].append((n, weight))
        n += 1

    counts = [len(row) for row in adjacency]
    ei = np.repeat(np.arange(n, dtype=np.int64), counts)
    ej = np.fromiter(
        (neighbor for row in adjacency for neighbor, _ in row),
        dtype=np.int64,
        count=int(sum(counts)),
    )
    vals = np.array(
        [weight for row in adjacency for _, weight in row], dtype=A.vals.dtype
    )

    B = MatrixNetwork.from_edges(ei, ej, n, vals, undirected=True)
    logger.info(f"Partial duplication finished: n={B.n}, nnz={B.nnz}")
    return B
