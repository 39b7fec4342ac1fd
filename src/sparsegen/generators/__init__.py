"""
Generators Module
=================

This module provides the stochastic generators. Every generator is a
function of its parameters and an explicit random source (``seed``) and
returns a :class:`~sparsegen.network.MatrixNetwork`.

Submodules
----------
erdos_renyi
    Bernoulli edge sampling (directed and undirected)
chung_lu
    Degree-weighted rejection sampling of distinct edges
havel_hakimi
    Graphicality test and exact degree-sequence realization
preferential_attachment
    Simple and generalized (three-event) attachment processes
partial_duplication
    Vertex duplication with per-edge retention
"""

from .erdos_renyi import (
    erdos_renyi_undirected,
    erdos_renyi_directed,
    erdos_renyi_undirected_degree,
    erdos_renyi_directed_degree,
    resolve_edge_probability,
)
from .chung_lu import chung_lu_undirected, unique_edge_sample_undirected
from .havel_hakimi import is_graphical_sequence, havel_hakimi_graph
from .preferential_attachment import (
    ComponentOverflow,
    SelfLoops,
    preferential_attachment_graph,
    preferential_attachment_edges,
    generalized_preferential_attachment_graph,
    generalized_preferential_attachment_edges,
    pa_graph,
    pa_edges,
    gpa_graph,
    gpa_edges,
)
from .partial_duplication import partial_duplication

# Generators addressable by name from configuration files
GENERATORS = {
    "erdos_renyi_undirected": erdos_renyi_undirected,
    "erdos_renyi_directed": erdos_renyi_directed,
    "erdos_renyi_undirected_degree": erdos_renyi_undirected_degree,
    "erdos_renyi_directed_degree": erdos_renyi_directed_degree,
    "chung_lu_undirected": chung_lu_undirected,
    "havel_hakimi_graph": havel_hakimi_graph,
    "preferential_attachment_graph": preferential_attachment_graph,
    "generalized_preferential_attachment_graph": generalized_preferential_attachment_graph,
    "partial_duplication": partial_duplication,
}

__all__ = [
    # Erdős-Rényi
    "erdos_renyi_undirected",
    "erdos_renyi_directed",
    "erdos_renyi_undirected_degree",
    "erdos_renyi_directed_degree",
    "resolve_edge_probability",
    # Chung-Lu
    "chung_lu_undirected",
    "unique_edge_sample_undirected",
    # Havel-Hakimi
    "is_graphical_sequence",
    "havel_hakimi_graph",
    # Preferential attachment
    "ComponentOverflow",
    "SelfLoops",
    "preferential_attachment_graph",
    "preferential_attachment_edges",
    "generalized_preferential_attachment_graph",
    "generalized_preferential_attachment_edges",
    "pa_graph",
    "pa_edges",
    "gpa_graph",
    "gpa_edges",
    # Partial duplication
    "partial_duplication",
    "GENERATORS",
]
