"""
Havel-Hakimi Realizer
=====================

Graphicality test and constructive realization of degree sequences.

The realizer repeatedly removes the vertex with the largest residual
degree d and connects it to the d vertices with the next largest residual
degrees. The sequence is graphical exactly when this never runs out of
partners and never pairs with an exhausted vertex.

References
----------
.. [1] Havel, V. (1955). A remark on the existence of finite graphs.
.. [2] Hakimi, S. L. (1962). On realizability of a set of integers as
       degrees of the vertices of a linear graph.
"""

import logging
from typing import List, Tuple

import numpy as np
from numpy.typing import ArrayLike

from ..errors import ArgumentError
from ..heap import IndexedMaxHeap
from ..network import MatrixNetwork
from ._common import as_degree_sequence

logger = logging.getLogger(__name__)


def _havel_hakimi(d: ArrayLike, store: bool) -> Tuple[bool, List[int], List[int]]:
    """
    Run Havel-Hakimi on ``d``.

    Returns ``(graphical, ei, ej)``; the edge lists hold both directions of
    every pairing and are only filled when ``store`` is true.
    """
    degs = as_degree_sequence(d)
    n = degs.size
    ei: List[int] = []
    ej: List[int] = []

    if int(degs.sum()) % 2 != 0:
        return False, ei, ej
    if n > 0 and int(degs.max()) >= n:
        return False, ei, ej

    heap = IndexedMaxHeap(enumerate(degs.tolist()))
    while heap:
        v, dv = heap.pop()
        if dv == 0:
            break
        if len(heap) < dv:
            return False, ei, ej

        partners = [heap.pop() for _ in range(dv)]
        for u, r in partners:
            if r < 1:
                return False, ei, ej
            if store:
                ei.extend((v, u))
                ej.extend((u, v))
            if r > 1:
                heap.push(u, r - 1)

    return True, ei, ej


def is_graphical_sequence(d: ArrayLike) -> bool:
    """
    Check whether a degree sequence is graphical.

    A graphical sequence is the degree sequence of some simple undirected
    graph, not necessarily a connected one: ``[1, 1, 1, 1]`` is graphical
    (two disjoint edges).

    Parameters
    ----------
    d : array_like of int
        Degree of each vertex

    Returns
    -------
    bool

    Raises
    ------
    DomainError
        If some degree is negative.

    Examples
    --------
    >>> is_graphical_sequence([1, 1, 1, 1])
    True
    >>> is_graphical_sequence([3, 3, 1, 1])
    False
    """
    graphical, _, _ = _havel_hakimi(d, store=False)
    return graphical


def havel_hakimi_graph(d: ArrayLike) -> MatrixNetwork:
    """
    Build a simple undirected graph whose degree sequence is exactly ``d``.

    Parameters
    ----------
    d : array_like of int
        Degree of each vertex

    Returns
    -------
    MatrixNetwork
        Undirected graph with ``len(d)`` vertices and ``sum(d) / 2`` edges

    Raises
    ------
    DomainError
        If some degree is negative.
    ArgumentError
        If ``d`` is not graphical.
    """
    graphical, ei, ej = _havel_hakimi(d, store=True)
    if not graphical:
        raise ArgumentError(f"the degree sequence {np.asarray(d).tolist()} is not graphical")

    n = len(d)
    logger.info(f"Realized degree sequence: n={n}, edges={len(ei) // 2}")
    return MatrixNetwork.from_edges(ei, ej, n, undirected=True)
