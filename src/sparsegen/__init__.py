"""
Sparse Graph Generators
=======================

Stochastic generators of synthetic sparse networks for algorithm testing
and benchmarking.

Every generator builds an edge collection from its parameters and an
explicit random source, checks the invariants of its model and assembles
the result into a :class:`MatrixNetwork` owned by the caller.

Modules
-------
generators
    Erdős-Rényi, Chung-Lu, Havel-Hakimi, preferential attachment and
    partial duplication generators
network
    The compressed-adjacency ``MatrixNetwork``
heap
    Indexed max-heap used by the degree-sequence realizer
data
    SMAT matrix file reader and writer
errors
    ``DomainError`` and ``ArgumentError``
"""

__version__ = "0.1.0"

from . import generators
from . import data
from .errors import ArgumentError, DomainError, GraphGenerationError, SMATFormatError
from .network import MatrixNetwork
from .rng import ensure_rng

__all__ = [
    "generators",
    "data",
    "MatrixNetwork",
    "ArgumentError",
    "DomainError",
    "GraphGenerationError",
    "SMATFormatError",
    "ensure_rng",
    "__version__",
]
