"""
Pytest configuration: puts the repository root on sys.path so the
hyperclosure package imports without installation, and provides the small
language complex used across the suite.
"""

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from hyperclosure.simplicial_complex import SimplicialComplex  # noqa: E402


# two observed triangles, one observed edge, one isolated language
LANGUAGE_ROWS = {
    2: [(("Danish", "Dutch", "German"), 2.0),
        (("German", "English", "Danish"), 1.0)],
    1: [(("French", "English"), 3.0)],
    0: [(("Spanish",), 1.0)],
}


@pytest.fixture
def language_rows():
    return {dim: list(rows) for dim, rows in LANGUAGE_ROWS.items()}


@pytest.fixture
def languages(language_rows):
    return SimplicialComplex.from_rows(language_rows)
