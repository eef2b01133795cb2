# tests/conftest.py
import pytest
from core.models import Identity, RepoNode
from repository_adapters.memory_repository import MemorySessionProvider


def sample_tree() -> RepoNode:
    """/ -> {a, jcr:system}; a -> {b}; jcr:system holds a small node type subtree."""
    return RepoNode(name="", primary_type="rep:root", children=[
        RepoNode(name="a", primary_type="nt:folder", children=[
            RepoNode(name="b", primary_type="nt:file"),
        ]),
        RepoNode(name="jcr:system", primary_type="rep:system", children=[
            RepoNode(name="jcr:nodeTypes", primary_type="rep:nodeTypes", children=[
                RepoNode(name="nt:base", primary_type="nt:nodeType"),
            ]),
        ]),
    ])


@pytest.fixture
def provider():
    return MemorySessionProvider(sample_tree())


@pytest.fixture
def session(provider):
    s = provider.open(Identity("admin"))
    yield s
    if s.is_live():
        s.logout()
