"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from wikiwalker.graph import LinkGraph


@pytest.fixture
def empty_graph() -> LinkGraph:
    """Return a graph with no articles."""
    return LinkGraph()


@pytest.fixture
def chain_graph() -> LinkGraph:
    """Return A -> {B, C}, B -> {C}, C -> {}."""
    graph = LinkGraph()
    graph.add_article("A", ["B", "C"])
    graph.add_article("B", ["C"])
    graph.add_article("C", [])
    return graph


@pytest.fixture
def sample_site_map() -> dict[str, list[str]]:
    """Return a small site map with a cycle and a terminal link."""
    return {
        "Cat": ["Dog", "Mammal", "Cat"],
        "Dog": ["Cat", "Mammal"],
        "Mammal": ["Animal"],
    }


@pytest.fixture
def sample_trajectories() -> list[list[str]]:
    """Return trajectories valid against sample_site_map."""
    return [
        ["Cat", "Dog", "Mammal", "Animal"],
        ["Cat", "Dog", "Cat"],
        ["Dog", "Mammal"],
    ]
