"""
Degree-Weighted (Chung-Lu) Generator
====================================

Approximate Chung-Lu sampling by rejection. Vertex i appears d_i times in
a candidate pool; pairs are drawn uniformly from the pool and kept unless
they form a self-loop or repeat an accepted pair, until the requested
number of distinct edges is reached.

Discarding collisions rather than reweighting means realized degrees only
match ``d`` in expectation. Callers needing an exact degree sequence
should use :func:`~sparsegen.generators.havel_hakimi.havel_hakimi_graph`.

References
----------
.. [1] Chung, F. & Lu, L. (2002). Connected components in random graphs
       with given expected degree sequences. Annals of Combinatorics.
"""

import logging
from typing import List, Optional, Set, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import MIN_DRAW_BATCH, REJECTION_STREAK_LIMIT
from ..errors import ArgumentError
from ..network import MatrixNetwork
from ..rng import SeedLike, ensure_rng
from ._common import as_count, as_degree_sequence

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


def chung_lu_undirected(
    d: ArrayLike,
    nedges: Optional[int] = None,
    seed: SeedLike = None,
    max_rejection_streak: int = REJECTION_STREAK_LIMIT,
) -> MatrixNetwork:
    """
    Generate an approximate undirected Chung-Lu graph.

    Parameters
    ----------
    d : array_like of int
        Expected degree of each vertex; all entries must be non-negative
    nedges : int, optional
        Number of distinct edges to draw (default: floor(sum(d) / 2))
    seed : int, np.random.Generator or None
        Random source
    max_rejection_streak : int, optional
        Consecutive rejections after which the remaining edges are drawn
        from an explicit list of valid pairs (default: REJECTION_STREAK_LIMIT)

    Returns
    -------
    MatrixNetwork
        Simple undirected graph with exactly ``nedges`` edges

    Raises
    ------
    DomainError
        If some degree is negative or ``nedges`` is not an integer.
    ArgumentError
        If ``nedges`` is negative, exceeds n(n-1)/2, or exceeds the number
        of pairs among vertices with positive degree.

    Examples
    --------
    >>> A = chung_lu_undirected([3, 2, 2, 2, 1], seed=42)
    >>> A.nnz
    10

    Notes
    -----
    With edge weights concentrated on few vertices most draws collide; the
    enumeration fallback bounds the work in that regime.
    """
    d = as_degree_sequence(d)
    n = d.size
    if nedges is None:
        nedges = int(d.sum()) // 2
    nedges = as_count("nedges", nedges)

    max_edges = n * (n - 1) // 2
    if nedges < 0 or nedges > max_edges:
        raise ArgumentError(
            f"nedges {nedges} is out of range for a {n} node undirected graph "
            f"(0 <= nedges <= {max_edges})"
        )
    support = int(np.count_nonzero(d))
    if nedges > support * (support - 1) // 2:
        raise ArgumentError(
            f"nedges {nedges} cannot be drawn: only {support} vertices have "
            f"positive degree, giving {support * (support - 1) // 2} distinct pairs"
        )

    logger.info(
        f"Generating Chung-Lu graph: n={n}, degree_sum={int(d.sum())}, nedges={nedges}"
    )
    nodevec = np.repeat(np.arange(n, dtype=np.int64), d)
    ei, ej = unique_edge_sample_undirected(
        nodevec, nedges, seed=seed, max_rejection_streak=max_rejection_streak
    )
    return MatrixNetwork.from_edges(ei, ej, n, undirected=True)


def unique_edge_sample_undirected(
    nodevec: ArrayLike,
    nedges: int,
    seed: SeedLike = None,
    max_rejection_streak: int = REJECTION_STREAK_LIMIT,
) -> Tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Draw ``nedges`` distinct non-loop pairs from a weighted vertex pool.

    Parameters
    ----------
    nodevec : array_like of int
        Candidate pool; a vertex appearing k times is drawn with weight k
    nedges : int
        Number of distinct pairs to accept
    seed : int, np.random.Generator or None
        Random source
    max_rejection_streak : int, optional
        Consecutive rejections tolerated before switching to enumeration

    Returns
    -------
    Tuple[NDArray[np.int64], NDArray[np.int64]]
        ``(ei, ej)`` of length ``2 * nedges`` holding both directions of
        every accepted pair

    Raises
    ------
    ArgumentError
        If ``nedges`` is negative or the pool supports fewer distinct pairs.
    """
    nedges = as_count("nedges", nedges)
    if nedges < 0:
        raise ArgumentError(f"nedges {nedges} must be non-negative")
    rng = ensure_rng(seed)
    nodevec = np.asarray(nodevec, dtype=np.int64).ravel()

    accepted: List[Pair] = []
    seen: Set[Pair] = set()
    if nedges > 0 and nodevec.size == 0:
        raise ArgumentError(f"cannot draw {nedges} edges from an empty vertex pool")

    streak = 0
    while len(accepted) < nedges and streak < max_rejection_streak:
        batch = max(2 * (nedges - len(accepted)), MIN_DRAW_BATCH)
        draws = nodevec[rng.integers(0, nodevec.size, size=(batch, 2))]
        for src, dst in draws.tolist():
            if src == dst:
                streak += 1
            else:
                pair = (src, dst) if src < dst else (dst, src)
                if pair in seen:
                    streak += 1
                else:
                    seen.add(pair)
                    accepted.append(pair)
                    streak = 0
                    if len(accepted) == nedges:
                        break
            if streak >= max_rejection_streak:
                break

    if len(accepted) < nedges:
        logger.warning(
            f"{streak} consecutive rejections after {len(accepted)} of {nedges} "
            f"edges; enumerating remaining valid pairs"
        )
        accepted.extend(
            _sample_remaining_pairs(nodevec, seen, nedges - len(accepted), rng)
        )

    pairs = np.array(accepted, dtype=np.int64).reshape(-1, 2)
    ei = np.concatenate([pairs[:, 0], pairs[:, 1]])
    ej = np.concatenate([pairs[:, 1], pairs[:, 0]])
    return ei, ej


def _sample_remaining_pairs(
    nodevec: NDArray[np.int64],
    seen: Set[Pair],
    needed: int,
    rng: np.random.Generator,
) -> List[Pair]:
    """
    Draw ``needed`` unseen pairs without replacement, weighted by w_u * w_v.

    Successive weighted draws without replacement follow the same law as
    continued rejection sampling conditioned on acceptance.
    """
    weights = np.bincount(nodevec)
    support = np.flatnonzero(weights)
    iu, ju = np.triu_indices(support.size, k=1)
    u, v = support[iu], support[ju]

    valid = np.fromiter(
        ((a, b) not in seen for a, b in zip(u.tolist(), v.tolist())),
        dtype=bool,
        count=u.size,
    )
    u, v = u[valid], v[valid]
    if u.size < needed:
        raise ArgumentError(
            f"only {u.size} distinct vertex pairs remain but {needed} more edges are required"
        )

    w = (weights[u] * weights[v]).astype(np.float64)
    logger.debug(f"Enumerated {u.size} candidate pairs for {needed} remaining edges")
    pick = rng.choice(u.size, size=needed, replace=False, p=w / w.sum())
    return list(zip(u[pick].tolist(), v[pick].tolist()))
