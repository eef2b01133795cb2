# tests/lister_test.py
import pytest
from core.errors import RepositoryAccessError
from core.lister import list_descendants
from core.models import Identity, NodeRecord, RepoNode
from repository_adapters.memory_repository import MemorySessionProvider


class FakeNode:
    def __init__(self, path, primary_type="nt:unstructured", children=(), fail_children=False):
        self._path = path
        self._type = primary_type
        self._children = list(children)
        self._fail = fail_children

    @property
    def path(self):
        return self._path

    @property
    def primary_type(self):
        return self._type

    def has_children(self):
        return bool(self._children) or self._fail

    def children(self):
        if self._fail:
            raise RuntimeError("disk gone")
        return self._children


class FakeSession:
    def __init__(self, root):
        self.root = root

    def root_node(self):
        return self.root

    def get_node(self, path):
        raise RepositoryAccessError(path)

    def is_live(self):
        return True

    def logout(self):
        pass


def _open(root: RepoNode):
    return MemorySessionProvider(root).open(Identity("admin"))


def test_root_with_system_subtree(session):
    assert list_descendants(session, "") == [
        NodeRecord("/a/b", "nt:file"),
        NodeRecord("/a", "nt:folder"),
    ]


def test_records_render_wire_shape(session):
    rows = [r.to_dict() for r in list_descendants(session, "")]
    assert rows[0] == {"path": "/a/b", "primaryNodeType": "nt:file"}


def test_node_without_children_gives_empty_list(session):
    assert list_descendants(session, "/a/b") == []


def test_empty_repository_gives_empty_list():
    s = _open(RepoNode(name=""))
    assert list_descendants(s, "") == []


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_start_is_root(session, blank):
    assert list_descendants(session, blank) == list_descendants(session, "/")


def test_start_node_itself_is_not_listed(session):
    assert list_descendants(session, "/a") == [NodeRecord("/a/b", "nt:file")]


def test_children_follow_their_descendants_in_native_order():
    root = RepoNode(name="", children=[
        RepoNode(name="x", children=[RepoNode(name="x1"), RepoNode(name="x2")]),
        RepoNode(name="y"),
    ])
    paths = [r.path for r in list_descendants(_open(root), "")]
    assert paths == ["/x/x1", "/x/x2", "/x", "/y"]


def test_no_system_paths_and_all_below_start():
    root = RepoNode(name="", children=[
        RepoNode(name="content", children=[
            RepoNode(name="p1", children=[RepoNode(name="c1"), RepoNode(name="c2")]),
            RepoNode(name="p2"),
        ]),
        RepoNode(name="jcr:system", children=[RepoNode(name="jcr:versionStorage", children=[RepoNode(name="v1")])]),
    ])
    records = list_descendants(_open(root), "")
    assert len(records) == 5
    for r in records:
        assert not r.path.startswith("/jcr:system")
        assert r.path.startswith("/content")


def test_prefix_match_is_literal():
    # 只做前缀匹配，/jcr:systemBackup 同样被跳过
    root = RepoNode(name="", children=[RepoNode(name="jcr:systemBackup"), RepoNode(name="jcr:content")])
    assert [r.path for r in list_descendants(_open(root), "")] == ["/jcr:content"]


def test_custom_system_prefix(session):
    records = list_descendants(session, "", system_prefix="/a")
    assert [r.path for r in records] == ["/jcr:system/jcr:nodeTypes/nt:base",
                                         "/jcr:system/jcr:nodeTypes",
                                         "/jcr:system"]


def test_start_path_is_not_normalized(session):
    with pytest.raises(RepositoryAccessError):
        list_descendants(session, "a")


def test_missing_start_path(session):
    with pytest.raises(RepositoryAccessError):
        list_descendants(session, "/nope")


def test_read_failure_aborts_whole_listing():
    root = FakeNode("/", children=[
        FakeNode("/ok"),
        FakeNode("/broken", fail_children=True),
    ])
    with pytest.raises(RepositoryAccessError) as ei:
        list_descendants(FakeSession(root), "")
    assert isinstance(ei.value.__cause__, RuntimeError)


def test_system_subtree_is_still_walked_by_default():
    root = FakeNode("/", children=[
        FakeNode("/a", "nt:folder"),
        FakeNode("/jcr:system", children=[FakeNode("/jcr:system/broken", fail_children=True)]),
    ])
    with pytest.raises(RepositoryAccessError):
        list_descendants(FakeSession(root), "")


def test_prune_skips_walking_system_subtree():
    root = FakeNode("/", children=[
        FakeNode("/a", "nt:folder"),
        FakeNode("/jcr:system", children=[FakeNode("/jcr:system/broken", fail_children=True)]),
    ])
    records = list_descendants(FakeSession(root), "", prune_system_subtree=True)
    assert records == [NodeRecord("/a", "nt:folder")]


def test_prune_gives_same_records_for_qualified_paths(session):
    assert list_descendants(session, "", prune_system_subtree=True) == list_descendants(session, "")


def test_closed_session_cannot_list(session):
    session.logout()
    with pytest.raises(RepositoryAccessError):
        list_descendants(session, "")
