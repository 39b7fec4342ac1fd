"""
Configuration constants for the Sparse Graph Generators library.
================================================================

This module contains the constants shared by the generators and the
batch runner. Centralizing these keeps test sequences and benchmark
runs reproducible.
"""

# Random seed for all stochastic operations in tests and examples
RANDOM_SEED = 42

# Degree-weighted (Chung-Lu) sampler
# Consecutive rejected draws after which the sampler stops drawing from the
# weighted pool and enumerates the remaining valid pairs instead.
REJECTION_STREAK_LIMIT = 10_000

# Smallest batch of endpoint draws requested from the random source at once
MIN_DRAW_BATCH = 64

# Preferential attachment defaults
DEFAULT_PA_EDGES_PER_NODE = 2
DEFAULT_PA_CLIQUE_SIZE = 3

# Generalized preferential attachment defaults (Avin et al. example values)
DEFAULT_GPA_NODE_PROB = 1 / 3
DEFAULT_GPA_EDGE_PROB = 1 / 2

# Partial duplication default retention probability; new vertices tend to
# become isolated below roughly 0.567143 (Hermann & Pfaffelhuber)
DEFAULT_RETENTION_PROB = 0.6

# File paths
DEFAULT_OUTPUT_DIR = "data/generated"
SMAT_SUFFIX = ".smat"
