"""Tests for mutation graph construction."""

import pytest
from hypothesis import given, strategies as st

from genepath.cost import hamming_distance
from genepath.graph import MutationGraph, is_single_mutation

gene_lists = st.lists(st.text(alphabet="ACGT", min_size=1, max_size=4), max_size=25)


def test_word_ladder_edges(ladder_dictionary) -> None:
    graph = MutationGraph.build(ladder_dictionary)
    assert graph.edges() == [("CAT", "COT"), ("COG", "COT"), ("COG", "DOG")]
    assert graph.neighbors("COT") == {"CAT", "COG"}
    assert graph.edge_count == 3


def test_unknown_gene_has_no_neighbors(ladder_dictionary) -> None:
    graph = MutationGraph.build(ladder_dictionary)
    assert graph.neighbors("GGG") == frozenset()
    assert "GGG" not in graph


def test_isolated_genes_are_nodes() -> None:
    graph = MutationGraph.build(["AAA", "TTT"])
    assert len(graph) == 2
    assert graph.edges() == []
    assert graph.degree("AAA") == 0


def test_substitution_only() -> None:
    graph = MutationGraph.build(["ACG", "AC", "ACGT", "TCG"])
    assert graph.neighbors("ACG") == {"TCG"}
    assert graph.neighbors("AC") == frozenset()


def test_duplicates_do_not_double_count() -> None:
    graph = MutationGraph.build(["AAA", "AAT", "AAA"])
    assert graph.edge_count == 1
    assert graph.edges() == [("AAA", "AAT")]


def test_unknown_strategy_rejected() -> None:
    with pytest.raises(ValueError):
        MutationGraph.build(["AAA"], strategy="magic")


def test_components() -> None:
    graph = MutationGraph.build(["AAA", "AAT", "ATT", "GGG", "GGC"])
    labels = graph.component_labels()
    assert labels["AAA"] == labels["ATT"]
    assert labels["GGG"] == labels["GGC"]
    assert labels["AAA"] != labels["GGG"]
    assert graph.same_component("AAA", "ATT")
    assert not graph.same_component("AAA", "GGC")
    assert not graph.same_component("AAA", "CCC")


def test_empty_graph_components() -> None:
    graph = MutationGraph.build([])
    assert graph.component_labels() == {}
    assert len(graph) == 0


def test_is_single_mutation() -> None:
    assert is_single_mutation("CAT", "COT")
    assert not is_single_mutation("CAT", "CAT")
    assert not is_single_mutation("CAT", "DOG")
    assert not is_single_mutation("CAT", "CATS")


@given(gene_lists)
def test_symmetry_and_hamming_correctness(genes) -> None:
    graph = MutationGraph.build(genes)
    unique = set(genes)
    for a in unique:
        for b in unique:
            linked = b in graph.neighbors(a)
            assert linked == (a in graph.neighbors(b))
            expected = len(a) == len(b) and hamming_distance(a, b) == 1
            assert linked == expected


@given(gene_lists)
def test_bucket_matches_pairwise(genes) -> None:
    bucket = MutationGraph.build(genes, strategy="bucket")
    pairwise = MutationGraph.build(genes, strategy="pairwise")
    assert bucket.edges() == pairwise.edges()
    assert sorted(bucket.genes) == sorted(pairwise.genes)
