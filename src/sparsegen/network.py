"""
Canonical Graph Module
======================

This module provides :class:`MatrixNetwork`, the compressed sparse row
(CSR) adjacency structure every generator hands its result to.

A network with ``n`` vertices stores a row pointer ``rp`` of length
``n + 1``, column indices ``ci`` and values ``vals``; the neighbors of
vertex ``i`` are ``ci[rp[i]:rp[i + 1]]``. Undirected graphs store both
directions of every edge. Repeated (i, j) entries are kept as separate
stored entries, so reading rows back reproduces the assembled edge
multiset exactly.
"""

import logging
from typing import Optional, Tuple

import networkx as nx
import numpy as np
import scipy.sparse
from numpy.typing import ArrayLike, NDArray

from .errors import ArgumentError

logger = logging.getLogger(__name__)


class MatrixNetwork:
    """
    Compressed-adjacency graph returned by all generators.

    Parameters
    ----------
    n : int
        Number of vertices
    rp : array_like
        Row pointer of length n + 1
    ci : array_like
        Column (neighbor) index of each stored entry
    vals : array_like
        Value (weight) of each stored entry
    undirected : bool, optional
        Direction tag. Generators set it explicitly; if omitted it is
        computed on first access from the symmetry of the matrix.

    Raises
    ------
    ArgumentError
        If the arrays do not describe a valid n x n CSR structure.

    Examples
    --------
    >>> A = MatrixNetwork.from_edges([0, 1], [1, 0], 3)
    >>> A.n, A.nnz, A.is_undirected
    (3, 2, True)
    >>> A.neighbors(1).tolist()
    [0]
    """

    def __init__(
        self,
        n: int,
        rp: ArrayLike,
        ci: ArrayLike,
        vals: ArrayLike,
        undirected: Optional[bool] = None,
    ):
        n = int(n)
        if n < 0:
            raise ArgumentError(f"n={n} must be non-negative")

        rp = np.asarray(rp, dtype=np.int64)
        ci = np.asarray(ci, dtype=np.int64)
        vals = np.asarray(vals)

        if rp.shape != (n + 1,):
            raise ArgumentError(
                f"row pointer has length {rp.size}, expected n+1={n + 1}"
            )
        if rp[0] != 0 or np.any(np.diff(rp) < 0):
            raise ArgumentError("row pointer must start at 0 and be non-decreasing")
        if ci.shape != (rp[-1],) or vals.shape != ci.shape:
            raise ArgumentError(
                f"row pointer ends at {rp[-1]} but {ci.size} indices and "
                f"{vals.size} values were given"
            )
        if ci.size and (ci.min() < 0 or ci.max() >= n):
            raise ArgumentError(f"column indices must lie in [0, {n})")

        self._n = n
        self._rp = rp
        self._ci = ci
        self._vals = vals
        self._undirected = undirected

    @classmethod
    def from_edges(
        cls,
        ei: ArrayLike,
        ej: ArrayLike,
        n: int,
        vals: Optional[ArrayLike] = None,
        undirected: Optional[bool] = None,
    ) -> "MatrixNetwork":
        """
        Assemble a network from parallel source/destination index lists.

        Parameters
        ----------
        ei, ej : array_like
            Source and destination vertex of each entry
        n : int
            Number of vertices
        vals : array_like, optional
            Value of each entry (default: 1.0 everywhere)
        undirected : bool, optional
            Direction tag passed through to the network

        Returns
        -------
        MatrixNetwork
            Network whose rows are sorted by column index. Repeated pairs
            remain separate entries.
        """
        ei = np.asarray(ei, dtype=np.int64).ravel()
        ej = np.asarray(ej, dtype=np.int64).ravel()
        if vals is None:
            vals = np.ones(ei.size, dtype=np.float64)
        else:
            vals = np.asarray(vals).ravel()

        if not (ei.size == ej.size == vals.size):
            raise ArgumentError(
                f"edge arrays differ in length: {ei.size}, {ej.size}, {vals.size}"
            )
        n = int(n)
        if n < 0:
            raise ArgumentError(f"n={n} must be non-negative")
        if ei.size and (min(ei.min(), ej.min()) < 0 or max(ei.max(), ej.max()) >= n):
            raise ArgumentError(f"edge endpoints must lie in [0, {n})")

        order = np.lexsort((ej, ei))
        rp = np.zeros(n + 1, dtype=np.int64)
        np.cumsum(np.bincount(ei, minlength=n), out=rp[1:])

        return cls(n, rp, ej[order], vals[order], undirected=undirected)

    @classmethod
    def from_scipy(cls, A, undirected: Optional[bool] = None) -> "MatrixNetwork":
        """Build a network from a square scipy sparse matrix."""
        A = scipy.sparse.csr_matrix(A, copy=True)
        if A.shape[0] != A.shape[1]:
            raise ArgumentError(f"matrix must be square, got shape {A.shape}")
        A.sort_indices()
        return cls(A.shape[0], A.indptr, A.indices, A.data, undirected=undirected)

    @classmethod
    def from_networkx(cls, G: nx.Graph, weight: str = "weight") -> "MatrixNetwork":
        """
        Build a network from a NetworkX graph.

        Nodes are relabelled 0..n-1 in ``G``'s node order; edges without a
        ``weight`` attribute get value 1.
        """
        A = nx.to_scipy_sparse_array(G, nodelist=list(G), weight=weight, format="csr")
        return cls.from_scipy(A, undirected=not G.is_directed())

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self._n

    @property
    def nnz(self) -> int:
        """Number of stored entries (twice the edge count when undirected)."""
        return int(self._ci.size)

    @property
    def rp(self) -> NDArray[np.int64]:
        return self._rp

    @property
    def ci(self) -> NDArray[np.int64]:
        return self._ci

    @property
    def vals(self) -> np.ndarray:
        return self._vals

    @property
    def is_undirected(self) -> bool:
        """Whether the network is undirected (value-symmetric)."""
        if self._undirected is None:
            A = self.to_scipy()
            self._undirected = bool((A != A.T).nnz == 0)
        return self._undirected

    def _check_vertex(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise ArgumentError(f"vertex {i} is not in [0, {self._n})")

    def neighbors(self, i: int) -> NDArray[np.int64]:
        """Neighbor indices of vertex ``i`` (one per stored entry)."""
        self._check_vertex(i)
        return self._ci[self._rp[i]:self._rp[i + 1]]

    def row(self, i: int) -> Tuple[NDArray[np.int64], np.ndarray]:
        """Neighbor indices and weights of vertex ``i``."""
        self._check_vertex(i)
        lo, hi = self._rp[i], self._rp[i + 1]
        return self._ci[lo:hi], self._vals[lo:hi]

    def degrees(self) -> NDArray[np.int64]:
        """Number of stored entries in each row."""
        return np.diff(self._rp)

    def edge_list(self) -> Tuple[NDArray[np.int64], NDArray[np.int64]]:
        """Return ``(ei, ej)`` with one pair per stored entry, in row order."""
        ei = np.repeat(np.arange(self._n, dtype=np.int64), self.degrees())
        return ei, self._ci.copy()

    def to_scipy(self) -> scipy.sparse.csr_matrix:
        """Canonical ``csr_matrix`` copy; repeated entries are summed."""
        A = scipy.sparse.csr_matrix(
            (self._vals, self._ci, self._rp), shape=(self._n, self._n), copy=True
        )
        A.sum_duplicates()
        return A

    def to_networkx(self) -> nx.Graph:
        """
        Export to NetworkX for downstream analysis.

        Returns an ``nx.Graph`` for undirected networks and an
        ``nx.DiGraph`` otherwise, with values stored in the ``weight``
        edge attribute. Repeated entries are summed.
        """
        create_using = nx.Graph if self.is_undirected else nx.DiGraph
        G = nx.from_scipy_sparse_array(self.to_scipy(), create_using=create_using)
        G.add_nodes_from(range(self._n))
        return G

    def __repr__(self) -> str:
        kind = "undirected" if self.is_undirected else "directed"
        return f"MatrixNetwork(n={self._n}, nnz={self.nnz}, {kind})"
