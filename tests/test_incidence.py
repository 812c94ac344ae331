"""
Generalized degrees and the 1-skeleton on the closed language complex.
"""

import networkx as nx
import pytest

from hyperclosure.closure import close_complex
from hyperclosure.incidence import (
    compute_degrees,
    generalized_degree,
    get_cofaces,
    one_skeleton,
    weighted_degree,
)


@pytest.fixture
def closed(languages):
    return close_complex(languages)


def test_danish_incident_edges_and_triangles(closed):
    """Danish is incident to 3 edges and 2 triangles."""
    assert generalized_degree(closed, ("Danish",), 1) == 3
    assert generalized_degree(closed, ("Danish",), 2) == 2


def test_cofaces_default_to_one_dimension_up(closed):
    cofaces = get_cofaces(closed, ("German", "Danish"))
    assert sorted(cofaces) == [
        (("Danish", "Dutch", "German"), 2.0),
        (("Danish", "English", "German"), 1.0),
    ]
    assert get_cofaces(closed, ("Spanish",)) == []


def test_weighted_degree(closed):
    assert weighted_degree(closed, ("Danish",), 2) == 3.0
    assert weighted_degree(closed, ("English",), 1) == 5.0


def test_compute_degrees(closed):
    degrees = compute_degrees(closed, 1)
    assert degrees[("Danish",)] == 3
    assert degrees[("German",)] == 3
    assert degrees[("French",)] == 1
    assert degrees[("Spanish",)] == 0

    edge_degrees = compute_degrees(closed, 2, of_dim=1)
    assert edge_degrees[("Danish", "German")] == 2
    assert edge_degrees[("English", "French")] == 0


def test_one_skeleton(closed):
    G = one_skeleton(closed)
    assert G.number_of_nodes() == 6
    assert G.number_of_edges() == 6
    assert G.nodes["Spanish"]["weight"] == 1.0
    assert G["German"]["Danish"]["weight"] == 3.0
    components = sorted(sorted(c) for c in nx.connected_components(G))
    assert components == [["Danish", "Dutch", "English", "French", "German"], ["Spanish"]]
