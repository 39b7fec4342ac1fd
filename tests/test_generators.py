"""
Tests for generators module.
"""

from collections import Counter

import pytest
import networkx as nx
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sparsegen.config import RANDOM_SEED
from sparsegen.errors import ArgumentError, DomainError
from sparsegen.network import MatrixNetwork
from sparsegen.generators import (
    ComponentOverflow,
    SelfLoops,
    chung_lu_undirected,
    erdos_renyi_directed,
    erdos_renyi_directed_degree,
    erdos_renyi_undirected,
    erdos_renyi_undirected_degree,
    generalized_preferential_attachment_edges,
    generalized_preferential_attachment_graph,
    havel_hakimi_graph,
    is_graphical_sequence,
    pa_edges,
    pa_graph,
    partial_duplication,
    preferential_attachment_graph,
    resolve_edge_probability,
    unique_edge_sample_undirected,
)
from sparsegen.generators._common import arcs_to_network


def _pairs(A: MatrixNetwork):
    ei, ej = A.edge_list()
    return list(zip(ei.tolist(), ej.tolist()))


def assert_simple_undirected(A: MatrixNetwork):
    """No self-loops, no repeated entries, every edge stored both ways."""
    pairs = _pairs(A)
    assert all(i != j for i, j in pairs)
    assert len(set(pairs)) == len(pairs)
    assert set(pairs) == {(j, i) for i, j in pairs}


def erdos_gallai(d) -> bool:
    """Reference graphicality test (Erdős-Gallai inequalities)."""
    d = sorted(d, reverse=True)
    if sum(d) % 2:
        return False
    n = len(d)
    for k in range(1, n + 1):
        if sum(d[:k]) > k * (k - 1) + sum(min(k, x) for x in d[k:]):
            return False
    return True


class TestErdosRenyi:
    """Tests for Bernoulli edge sampling."""

    @pytest.mark.parametrize("n", [0, 1, 10, 100])
    def test_zero_probability_gives_empty_graph(self, n):
        """p = 0 never includes an edge."""
        A = erdos_renyi_undirected(n, 0.0, seed=RANDOM_SEED)
        assert A.n == n
        assert A.nnz == 0

        B = erdos_renyi_directed(n, 0.0, seed=RANDOM_SEED)
        assert B.n == n
        assert B.nnz == 0

    def test_probability_one_is_average_degree(self):
        """p = 1.0 on n = 10 means average degree 1, not certainty."""
        assert resolve_edge_probability(10, 1.0) == pytest.approx(0.1)
        assert resolve_edge_probability(10, 0.25) == 0.25
        assert resolve_edge_probability(10, 10.0) == pytest.approx(1.0)

    def test_average_degree_rescaling_statistics(self):
        """Rescaled p gives about n(n-1)/2 * p/n edges."""
        n = 2000
        A = erdos_renyi_undirected(n, 1.0, seed=RANDOM_SEED)
        edges = A.nnz // 2
        # expected 999.5, standard deviation about 32
        assert 800 < edges < 1200

    def test_edge_count_statistics(self):
        """Edge count concentrates around n(n-1)/2 * p."""
        A = erdos_renyi_undirected(400, 0.05, seed=RANDOM_SEED)
        # expected 3990, standard deviation about 62
        assert 3500 < A.nnz // 2 < 4500

    def test_undirected_is_simple(self):
        """Undirected samples are simple and symmetric."""
        A = erdos_renyi_undirected(200, 0.1, seed=RANDOM_SEED)
        assert A.is_undirected
        assert A.nnz > 0
        assert_simple_undirected(A)

    def test_directed_excludes_diagonal(self):
        """Directed samples contain no self-loops or repeated arcs."""
        A = erdos_renyi_directed(100, 0.3, seed=RANDOM_SEED)
        pairs = _pairs(A)
        assert not A.is_undirected
        assert all(i != j for i, j in pairs)
        assert len(set(pairs)) == len(pairs)

    def test_full_probability_gives_complete_graph(self):
        """p = n rescales to probability 1."""
        A = erdos_renyi_undirected(6, 6.0, seed=RANDOM_SEED)
        assert A.nnz == 30
        B = erdos_renyi_directed(6, 6.0, seed=RANDOM_SEED)
        assert B.nnz == 30
        assert set(_pairs(A)) == set(_pairs(B))

    @pytest.mark.parametrize("p", [-0.1, 11.0, float("nan")])
    def test_invalid_probability(self, p):
        """Probabilities outside [0, n] are domain errors."""
        with pytest.raises(DomainError):
            erdos_renyi_undirected(10, p)
        with pytest.raises(DomainError):
            erdos_renyi_directed(10, p)

    @pytest.mark.parametrize("p", [1e-18, 1e-30])
    def test_tiny_probability_gives_empty_graph(self, p):
        """Very long geometric skips run past the end instead of wrapping around."""
        assert erdos_renyi_undirected(100, p, seed=1).nnz == 0
        assert erdos_renyi_directed(100, p, seed=1).nnz == 0

    def test_degree_forms(self):
        """Average-degree variants use d / n directly."""
        assert erdos_renyi_undirected_degree(0, 0, seed=RANDOM_SEED).n == 0
        assert erdos_renyi_undirected_degree(10, 10, seed=RANDOM_SEED).nnz == 90
        assert erdos_renyi_directed_degree(10, 10, seed=RANDOM_SEED).nnz == 90
        assert erdos_renyi_directed_degree(10, 0, seed=RANDOM_SEED).nnz == 0

        with pytest.raises(DomainError):
            erdos_renyi_undirected_degree(10, 11)
        with pytest.raises(DomainError):
            erdos_renyi_directed_degree(10, -1)

    def test_reproducibility(self):
        """Same seed, same graph."""
        A = erdos_renyi_undirected(300, 0.02, seed=7)
        B = erdos_renyi_undirected(300, 0.02, seed=7)
        assert np.array_equal(A.rp, B.rp)
        assert np.array_equal(A.ci, B.ci)


class TestChungLu:
    """Tests for the degree-weighted rejection sampler."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_exact_edge_count_and_simple(self, seed):
        """Output has exactly nedges distinct edges."""
        rng = np.random.default_rng(seed)
        d = rng.integers(0, 10, size=60)
        nedges = int(d.sum()) // 3
        A = chung_lu_undirected(d, nedges, seed=seed)

        assert A.n == 60
        assert A.nnz == 2 * nedges
        assert_simple_undirected(A)

    def test_default_edge_count(self):
        """nedges defaults to floor(sum(d) / 2)."""
        assert chung_lu_undirected([3, 2, 2, 2, 1], seed=RANDOM_SEED).nnz == 10
        # sum 7 -> 3 edges, the only 3 pairs available
        A = chung_lu_undirected([3, 2, 2], seed=RANDOM_SEED)
        assert set(_pairs(A)) == {(0, 1), (1, 0), (0, 2), (2, 0), (1, 2), (2, 1)}

    def test_zero_edges(self):
        """nedges = 0 gives the empty graph."""
        A = chung_lu_undirected([2, 2, 2], 0, seed=RANDOM_SEED)
        assert A.n == 3
        assert A.nnz == 0

    def test_isolated_vertices_stay_isolated(self):
        """Zero-degree vertices are never drawn."""
        A = chung_lu_undirected([4, 0, 4, 4, 0, 4], 5, seed=RANDOM_SEED)
        degrees = A.degrees()
        assert degrees[1] == 0
        assert degrees[4] == 0

    def test_negative_degree(self):
        """Negative degrees are domain errors."""
        with pytest.raises(DomainError):
            chung_lu_undirected([2, -1, 1])

    def test_non_integer_degree(self):
        """Fractional degrees are domain errors; integral floats are accepted."""
        with pytest.raises(DomainError):
            chung_lu_undirected([1.5, 0.5])
        assert chung_lu_undirected([1.0, 1.0], seed=RANDOM_SEED).nnz == 2

    @pytest.mark.parametrize("nedges", [-1, 7])
    def test_edge_count_out_of_range(self, nedges):
        """nedges must lie in [0, n(n-1)/2]."""
        with pytest.raises(ArgumentError):
            chung_lu_undirected([3, 3, 3, 3], nedges)

    def test_integral_float_edge_count(self):
        """Counts such as 3.0 read from YAML are accepted; fractional ones are not."""
        A = chung_lu_undirected([3, 3, 3, 3], 3.0, seed=RANDOM_SEED)
        assert A.nnz == 6
        ei, ej = unique_edge_sample_undirected([0, 1, 2, 3], 2.0, seed=RANDOM_SEED)
        assert ei.size == 4

        with pytest.raises(DomainError) as excinfo:
            chung_lu_undirected([3, 3, 3, 3], 2.5)
        assert excinfo.value.name == "nedges"
        with pytest.raises(DomainError):
            unique_edge_sample_undirected([0, 1, 2], "2")

    def test_edge_count_exceeds_support(self):
        """Only pairs among positive-degree vertices can be drawn."""
        with pytest.raises(ArgumentError):
            chung_lu_undirected([2, 2, 0, 0], 3)

    def test_concentrated_weights_terminate(self):
        """Heavy vertices force the enumeration fallback, which still completes."""
        A = chung_lu_undirected(
            [200, 200, 1, 1, 1], 10, seed=RANDOM_SEED, max_rejection_streak=50
        )
        # all 10 pairs of 5 vertices are required
        assert A.nnz == 20
        assert_simple_undirected(A)

    def test_unique_edge_sample_single_vertex_pool(self):
        """A pool with one distinct vertex cannot yield an edge."""
        with pytest.raises(ArgumentError):
            unique_edge_sample_undirected([3, 3, 3], 1, seed=RANDOM_SEED, max_rejection_streak=10)

    def test_unique_edge_sample_empty_pool(self):
        """Empty pools only support zero edges."""
        ei, ej = unique_edge_sample_undirected([], 0, seed=RANDOM_SEED)
        assert ei.size == 0 and ej.size == 0
        with pytest.raises(ArgumentError):
            unique_edge_sample_undirected([], 1, seed=RANDOM_SEED)

    def test_unique_edge_sample_both_directions(self):
        """Every accepted pair is returned in both directions."""
        ei, ej = unique_edge_sample_undirected([0, 0, 1, 1, 2, 2, 3], 4, seed=RANDOM_SEED)
        assert ei.size == 8
        arcs = Counter(zip(ei.tolist(), ej.tolist()))
        assert all(arcs[(j, i)] == 1 for i, j in arcs)


class TestHavelHakimi:
    """Tests for the degree-sequence realizer."""

    def test_odd_sum_is_not_graphical(self):
        """Odd degree sums are never graphical."""
        assert not is_graphical_sequence([1, 1, 1])

    def test_perfect_matching(self):
        """[1, 1, 1, 1] realizes as two disjoint edges."""
        assert is_graphical_sequence([1, 1, 1, 1])
        A = havel_hakimi_graph([1, 1, 1, 1])
        assert A.n == 4
        assert A.nnz == 4
        assert A.degrees().tolist() == [1, 1, 1, 1]
        assert_simple_undirected(A)

    def test_star(self):
        """[3, 1, 1, 1] is the star on four vertices."""
        assert is_graphical_sequence([3, 1, 1, 1])
        A = havel_hakimi_graph([3, 1, 1, 1])
        assert sorted(A.neighbors(0).tolist()) == [1, 2, 3]

    def test_even_sum_non_graphical(self):
        """[3, 3, 1, 1] has an even sum but no realization."""
        assert not is_graphical_sequence([3, 3, 1, 1])
        with pytest.raises(ArgumentError):
            havel_hakimi_graph([3, 3, 1, 1])

    def test_degree_too_large(self):
        """A degree of n or more is rejected."""
        assert not is_graphical_sequence([4, 2, 1, 1])
        with pytest.raises(ArgumentError):
            havel_hakimi_graph([4, 2, 1, 1])

    def test_trivial_sequences(self):
        """Empty and all-zero sequences are graphical."""
        assert is_graphical_sequence([])
        assert havel_hakimi_graph([]).n == 0
        A = havel_hakimi_graph([0, 0, 0])
        assert A.n == 3
        assert A.nnz == 0

    def test_negative_degree(self):
        """Negative degrees are domain errors."""
        with pytest.raises(DomainError):
            is_graphical_sequence([1, -1])
        with pytest.raises(DomainError):
            havel_hakimi_graph([2, 2, -2])

    def test_agrees_with_erdos_gallai(self):
        """Graphical iff construction succeeds, and the realization is exact."""
        rng = np.random.default_rng(RANDOM_SEED)
        checked = 0
        for _ in range(300):
            n = int(rng.integers(1, 12))
            d = rng.integers(0, n, size=n).tolist()
            if sum(d) % 2:
                continue
            checked += 1

            graphical = is_graphical_sequence(d)
            assert graphical == erdos_gallai(d), d
            if graphical:
                A = havel_hakimi_graph(d)
                assert A.degrees().tolist() == d
                assert A.nnz == sum(d)
                assert_simple_undirected(A)
            else:
                with pytest.raises(ArgumentError):
                    havel_hakimi_graph(d)
        assert checked > 50

    def test_regular_sequence(self):
        """A 3-regular sequence on 10 vertices is realized exactly."""
        A = havel_hakimi_graph([3] * 10)
        assert A.degrees().tolist() == [3] * 10
        assert nx.is_regular(A.to_networkx())


class TestPreferentialAttachment:
    """Tests for the simple attachment process."""

    @pytest.mark.parametrize("n,k,k0", [(100, 5, 2), (200, 1, 3), (50, 3, 5)])
    def test_vertex_and_arc_counts(self, n, k, k0):
        """k0(k0-1) seed arcs plus between 2(n-k0) and 2k(n-k0) new arcs."""
        A = preferential_attachment_graph(n, k, k0, seed=RANDOM_SEED)
        seed_arcs = k0 * (k0 - 1)

        assert A.n == n
        assert seed_arcs + 2 * (n - k0) <= A.nnz <= seed_arcs + 2 * k * (n - k0)
        assert_simple_undirected(A)

    def test_seed_clique_present(self):
        """The first k0 vertices form a clique."""
        A = pa_graph(30, 2, 4, seed=RANDOM_SEED)
        for i in range(4):
            assert set(range(4)) - {i} <= set(A.neighbors(i).tolist())

    def test_new_vertex_degree_between_one_and_k(self):
        """Each new vertex links to 1..k distinct earlier vertices."""
        k = 4
        edges = pa_edges(200, k, [(0, 1), (1, 0)], seed=RANDOM_SEED)
        earlier = Counter(i for i, j in edges if j < i)
        for i in range(2, 202):
            assert 1 <= earlier[i] <= k

    def test_n0_inferred_from_edges(self):
        """New vertices are numbered after the largest index."""
        edges = pa_edges(3, 2, [(0, 5), (5, 0)], seed=RANDOM_SEED)
        assert max(max(e) for e in edges) == 8

    def test_edges_extended_in_place(self):
        """The arc list is grown in place."""
        edges = [(0, 1), (1, 0)]
        result = pa_edges(5, 2, edges, 2, seed=RANDOM_SEED)
        assert result is edges
        assert len(edges) > 2

    def test_clique_only(self):
        """n == k0 returns the seed clique."""
        A = pa_graph(4, 3, 4, seed=RANDOM_SEED)
        assert A.nnz == 12

    def test_default_parameters(self):
        """Defaults are k = 2 on a triangle seed."""
        A = pa_graph(50, seed=RANDOM_SEED)
        assert A.n == 50
        assert 6 + 2 * 47 <= A.nnz <= 6 + 4 * 47

    def test_invalid_parameters(self):
        """Parameter violations raise the matching error."""
        with pytest.raises(DomainError):
            pa_graph(10, 2, -1)
        with pytest.raises(ArgumentError):
            pa_graph(3, 2, 4)
        with pytest.raises(ArgumentError):
            pa_graph(10, 2, 1)
        with pytest.raises(DomainError):
            pa_graph(10, 0, 3)
        with pytest.raises(ArgumentError):
            pa_edges(3, 2, [])

    def test_reproducibility(self):
        """Same seed, same graph."""
        A = pa_graph(300, 3, 3, seed=11)
        B = pa_graph(300, 3, 3, seed=11)
        assert _pairs(A) == _pairs(B)


class TestGeneralizedPreferentialAttachment:
    """Tests for the three-event attachment process."""

    @pytest.mark.parametrize(
        "p,r,overflow",
        [
            (1 / 3, 1 / 2, ComponentOverflow.SKIP),
            (0.5, 0.0, ComponentOverflow.SKIP),
            (0.2, 0.2, ComponentOverflow.NODE_EVENT),
            (0.0, 0.5, ComponentOverflow.NODE_EVENT),
        ],
    )
    def test_exact_vertex_count(self, p, r, overflow):
        """The process stops exactly at n vertices."""
        A = generalized_preferential_attachment_graph(
            101, p, r, 3, overflow=overflow, seed=RANDOM_SEED
        )
        assert A.n == 101
        assert A.degrees().min() >= 1
        assert A.to_scipy().shape == (101, 101)

    def test_no_self_loops_when_forbidden(self):
        """Forbidden self-loops never appear."""
        A = generalized_preferential_attachment_graph(
            300, 0.2, 0.7, 2, self_loops=SelfLoops.FORBIDDEN, seed=RANDOM_SEED
        )
        assert all(i != j for i, j in _pairs(A))
        assert A.is_undirected

    def test_self_loops_allowed_as_string(self):
        """Modes may be given by value."""
        A = generalized_preferential_attachment_graph(
            200, 0.3, 0.6, 2, self_loops="allowed", overflow="node_event", seed=RANDOM_SEED
        )
        assert A.n == 200
        assert (A.to_scipy() != A.to_scipy().T).nnz == 0

    def test_node_events_only(self):
        """p = 1 adds exactly one edge per new vertex."""
        A = generalized_preferential_attachment_graph(50, 1.0, 0.0, 3, seed=RANDOM_SEED)
        assert A.nnz == 3 * 2 + 2 * 47

    def test_component_events_only(self):
        """p = r = 0 adds disjoint new edges."""
        A = generalized_preferential_attachment_graph(10, 0.0, 0.0, 2, seed=RANDOM_SEED)
        assert A.nnz == 2 + 8
        for i in range(2, 10, 2):
            assert A.neighbors(i).tolist() == [i + 1]
            assert A.neighbors(i + 1).tolist() == [i]

    def test_clique_only(self):
        """n == k0 returns the seed clique."""
        A = generalized_preferential_attachment_graph(3, 0.5, 0.5, 3, seed=RANDOM_SEED)
        assert A.nnz == 6

    @pytest.mark.parametrize("p,r", [(1.5, 0.0), (0.5, -0.1), (0.6, 0.6)])
    def test_invalid_probabilities(self, p, r):
        """Probabilities must lie in [0, 1] with p + r <= 1."""
        with pytest.raises(DomainError):
            generalized_preferential_attachment_graph(10, p, r, 2)

    def test_unreachable_vertex_count(self):
        """Parameters that can never reach n vertices are rejected."""
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_graph(10, 0.0, 1.0, 2)
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_graph(
                11, 0.0, 0.5, 2, overflow=ComponentOverflow.SKIP
            )
        A = generalized_preferential_attachment_graph(
            11, 0.0, 0.5, 2, overflow=ComponentOverflow.NODE_EVENT, seed=RANDOM_SEED
        )
        assert A.n == 11

    def test_seed_needs_two_distinct_vertices(self):
        """Without self-loops the seed must reference two vertices."""
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_graph(10, 0.5, 0.3, 1)
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_edges(10, 0.5, 0.3, [(0, 0), (0, 0)], 1)

    def test_two_distinct_vertices_needed_without_edge_events(self):
        """The distinct-vertex check applies even when r = 0."""
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_edges(5, 1.0, 0.0, [(0, 0), (0, 0)], 1)

        edges = generalized_preferential_attachment_edges(
            5, 1.0, 0.0, [(0, 0), (0, 0)], 1, self_loops=SelfLoops.ALLOWED, seed=RANDOM_SEED
        )
        assert len(edges) == 2 + 2 * 4

    @pytest.mark.parametrize("field", ["self_loops", "overflow"])
    def test_unknown_mode(self, field):
        """Unknown mode names are domain errors naming the parameter."""
        with pytest.raises(DomainError) as excinfo:
            generalized_preferential_attachment_graph(10, 0.5, 0.3, 2, **{field: "sometimes"})
        assert excinfo.value.name == field
        with pytest.raises(DomainError):
            generalized_preferential_attachment_edges(
                10, 0.5, 0.3, [(0, 1), (1, 0)], 2, **{field: "sometimes"}
            )

    def test_n_smaller_than_k0(self):
        with pytest.raises(ArgumentError):
            generalized_preferential_attachment_graph(2, 0.5, 0.3, 3)

    def test_edges_start_numbering_at_n0(self):
        """New vertices are numbered from n0."""
        edges = generalized_preferential_attachment_edges(
            6, 1.0, 0.0, [(0, 1), (1, 0)], 2, seed=RANDOM_SEED
        )
        assert len(edges) == 2 + 2 * 4
        assert {u for u, _ in edges} == set(range(6))


class TestPartialDuplication:
    """Tests for the partial duplication process."""

    @pytest.fixture
    def seed_graph(self):
        """Small preferential attachment seed graph."""
        return pa_graph(30, 2, 3, seed=RANDOM_SEED)

    @pytest.mark.parametrize("steps", [0, 1, 25])
    def test_zero_retention_adds_isolated_vertices(self, seed_graph, steps):
        """p = 0 adds vertices but never edges."""
        B = partial_duplication(seed_graph, steps, 0.0, seed=RANDOM_SEED)
        assert B.n == seed_graph.n + steps
        assert B.nnz == seed_graph.nnz
        assert np.all(B.degrees()[seed_graph.n:] == 0)

    def test_full_retention_copies_neighborhoods(self, seed_graph):
        """p = 1 gives every new vertex the full neighborhood of its source."""
        B = partial_duplication(seed_graph, 10, 1.0, seed=RANDOM_SEED)
        assert B.n == 40
        assert B.nnz > seed_graph.nnz
        assert B.is_undirected
        assert (B.to_scipy() != B.to_scipy().T).nnz == 0
        assert np.all(B.degrees()[30:] >= 1)

    def test_weights_preserved(self):
        """Copied edges keep their weights and dtype."""
        ei = [0, 1, 1, 2]
        ej = [1, 0, 2, 1]
        vals = np.array([7, 7, 3, 3], dtype=np.int64)
        A = MatrixNetwork.from_edges(ei, ej, 3, vals, undirected=True)

        B = partial_duplication(A, 20, 1.0, seed=RANDOM_SEED)
        assert B.vals.dtype == np.int64
        assert set(B.vals.tolist()) <= {3, 7}

    def test_networkx_seed(self):
        """Seed graphs can come from NetworkX."""
        A = MatrixNetwork.from_networkx(nx.karate_club_graph())
        B = partial_duplication(A, 10, 0.5, seed=RANDOM_SEED)
        assert B.n == 44
        assert B.nnz >= A.nnz

    def test_directed_seed(self):
        """Directed seeds are argument errors."""
        A = MatrixNetwork.from_edges([0], [1], 2)
        with pytest.raises(ArgumentError):
            partial_duplication(A, 5, 0.5)

    def test_invalid_parameters(self, seed_graph):
        """Probability and step count are range-checked."""
        with pytest.raises(DomainError):
            partial_duplication(seed_graph, 5, 1.5)
        with pytest.raises(DomainError):
            partial_duplication(seed_graph, -1, 0.5)
        empty = MatrixNetwork.from_edges([], [], 0, undirected=True)
        with pytest.raises(ArgumentError):
            partial_duplication(empty, 3, 0.5)
        assert partial_duplication(empty, 0, 0.5).n == 0


class TestAssemblyRoundTrip:
    """Assembling an edge list and reading rows back reproduces it."""

    def test_attachment_arcs(self):
        edges = pa_edges(100, 3, [(0, 1), (1, 0)], 2, seed=RANDOM_SEED)
        A = arcs_to_network(edges, 102)
        assert Counter(_pairs(A)) == Counter(edges)

    def test_generalized_attachment_arcs_with_repeats(self):
        """Repeated edges from edge events survive assembly."""
        edges = generalized_preferential_attachment_edges(
            60, 0.1, 0.8, [(0, 1), (1, 0)], 2, self_loops=SelfLoops.ALLOWED, seed=RANDOM_SEED
        )
        A = arcs_to_network(edges, 60)
        assert Counter(_pairs(A)) == Counter(edges)

    def test_rejection_sampler_edges(self):
        ei, ej = unique_edge_sample_undirected(
            np.repeat(np.arange(20), 3), 15, seed=RANDOM_SEED
        )
        A = MatrixNetwork.from_edges(ei, ej, 20)
        assert Counter(_pairs(A)) == Counter(zip(ei.tolist(), ej.tolist()))
        assert A.is_undirected
