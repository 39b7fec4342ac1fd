"""Helpers shared by several generators."""

import operator
from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..errors import ArgumentError, DomainError
from ..network import MatrixNetwork

Arc = Tuple[int, int]


def as_count(name: str, value) -> int:
    """Return an integral count as ``int``; integral floats such as 3.0 are accepted."""
    if isinstance(value, (float, np.floating)):
        if not float(value).is_integer():
            raise DomainError(name, value, "must be an integer")
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise DomainError(name, value, "must be an integer") from None


def as_degree_sequence(d: ArrayLike) -> NDArray[np.int64]:
    """Validate a degree sequence and return it as an int64 array."""
    d = np.asarray(d)
    if d.ndim != 1:
        raise ArgumentError(f"degree sequence must be one-dimensional, got shape {d.shape}")
    if d.size and not np.issubdtype(d.dtype, np.integer):
        if not np.issubdtype(d.dtype, np.number) or np.any(d != np.floor(d)):
            raise DomainError("d", d.tolist(), "must contain integer degrees")
    d = d.astype(np.int64)

    negative = np.flatnonzero(d < 0)
    if negative.size:
        i = int(negative[0])
        raise DomainError(f"d[{i}]", int(d[i]), "must be non-negative")
    return d


def clique_arcs(k0: int) -> List[Arc]:
    """Both directions of every edge of a k0-vertex clique on 0..k0-1."""
    arcs: List[Arc] = []
    for i in range(k0):
        for j in range(i):
            arcs.append((i, j))
            arcs.append((j, i))
    return arcs


def arcs_to_network(arcs: Sequence[Arc], n: int) -> MatrixNetwork:
    """Assemble an undirected arc list (both directions present) into a network."""
    pairs = np.array(arcs, dtype=np.int64).reshape(-1, 2)
    return MatrixNetwork.from_edges(pairs[:, 0], pairs[:, 1], n, undirected=True)
