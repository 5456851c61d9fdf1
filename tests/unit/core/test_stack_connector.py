"""Tests for stack connections and the stack graph."""

from jjstacks.core.commit_graph import build_commit_graph
from jjstacks.core.stack_connector import build_stack_graph, connect_stacks
from jjstacks.core.stack_partitioner import partition_stacks
from jjstacks.core.stack_types import StackConnection
from tests.test_utils.commits import cid, make_commit, stack_of


def test_linear_history_has_no_connections() -> None:
    """Scenario: a -> b -> c is a single stack."""
    commits = [make_commit("a"), make_commit("b", ["a"]), make_commit("c", ["b"])]

    graph = build_stack_graph(commits)

    assert len(graph.stacks) == 1
    assert graph.connections == []
    stack = graph.stacks["stack-0"]
    assert stack.commits == [cid("a"), cid("b"), cid("c")]
    assert stack.parent_stacks == []
    assert stack.child_stacks == []
    assert graph.root_stacks == ["stack-0"]
    assert graph.leaf_stacks == ["stack-0"]


def test_simple_branch_creates_branch_connections() -> None:
    """Scenario: b and c both branch off a."""
    commits = [make_commit("a"), make_commit("b", ["a"]), make_commit("c", ["a"])]

    graph = build_stack_graph(commits)

    assert len(graph.stacks) == 3
    assert graph.connections == [
        StackConnection(from_stack=stack_of(graph, "a"), to_stack=stack_of(graph, "b"), type="branch"),
        StackConnection(from_stack=stack_of(graph, "a"), to_stack=stack_of(graph, "c"), type="branch"),
    ]
    assert graph.root_stacks == [stack_of(graph, "a")]
    assert graph.leaf_stacks == [stack_of(graph, "b"), stack_of(graph, "c")]


def test_merge_creates_merge_connections() -> None:
    """Scenario: d merges b and c, which branch off a."""
    commits = [
        make_commit("a"),
        make_commit("b", ["a"]),
        make_commit("c", ["a"]),
        make_commit("d", ["b", "c"]),
    ]

    graph = build_stack_graph(commits)

    assert len(graph.stacks) == 4
    types = {
        (c.from_stack, c.to_stack): c.type for c in graph.connections
    }
    a, b, c, d = (stack_of(graph, name) for name in "abcd")
    assert types == {
        (a, b): "branch",
        (a, c): "branch",
        (b, d): "merge",
        (c, d): "merge",
    }
    assert graph.stacks[d].parent_stacks == [b, c]
    assert graph.root_stacks == [a]
    assert graph.leaf_stacks == [d]


def test_merge_followed_by_chain_is_linear() -> None:
    """Test that the edge out of a single-child merge commit is linear."""
    commits = [
        make_commit("a"),
        make_commit("b", ["a"]),
        make_commit("c", ["a"]),
        make_commit("d", ["b", "c"]),
        make_commit("e", ["d"]),
        make_commit("f", ["e"]),
    ]

    graph = build_stack_graph(commits)

    connection = graph.connection_between(stack_of(graph, "d"), stack_of(graph, "e"))
    assert connection is not None
    assert connection.type == "linear"
    assert graph.stacks[stack_of(graph, "e")].commits == [cid("e"), cid("f")]


def test_skewed_timestamps_produce_linear_connection() -> None:
    """Test that a child older than its parent still connects parent -> child."""
    commits = [make_commit("a", minutes=10), make_commit("b", ["a"], minutes=1)]

    graph = build_stack_graph(commits)

    assert graph.connections == [
        StackConnection(from_stack=stack_of(graph, "a"), to_stack=stack_of(graph, "b"), type="linear")
    ]
    assert graph.root_stacks == [stack_of(graph, "a")]
    assert graph.leaf_stacks == [stack_of(graph, "b")]


def test_missing_parent_makes_root_stack() -> None:
    """Scenario: a commit whose only parent is outside the window is a root."""
    commits = [make_commit("b", ["a"])]

    graph = build_stack_graph(commits)

    assert graph.root_stacks == ["stack-0"]
    assert graph.connections == []


def test_merge_with_parent_outside_window() -> None:
    """Test that a merge keeps its merge boundary even when one parent is hidden."""
    commits = [make_commit("a"), make_commit("b", ["a", "x"])]

    graph = build_stack_graph(commits)

    assert len(graph.stacks) == 2
    assert graph.connections == [
        StackConnection(from_stack=stack_of(graph, "a"), to_stack=stack_of(graph, "b"), type="merge")
    ]


def test_disconnected_histories_have_separate_roots() -> None:
    commits = [
        make_commit("a"),
        make_commit("b", ["a"]),
        make_commit("x"),
        make_commit("y", ["x"]),
    ]

    graph = build_stack_graph(commits)

    assert len(graph.stacks) == 2
    assert graph.root_stacks == graph.leaf_stacks == ["stack-0", "stack-1"]


def test_octopus_merge_connects_each_parent_once() -> None:
    """Test that a three-parent merge yields one merge connection per parent stack."""
    commits = [
        make_commit("a"),
        make_commit("b", ["a"]),
        make_commit("c", ["a"]),
        make_commit("d", ["a"]),
        make_commit("m", ["b", "c", "d"]),
    ]

    graph = build_stack_graph(commits)

    m = stack_of(graph, "m")
    merges = [c for c in graph.connections if c.to_stack == m]
    assert [c.type for c in merges] == ["merge", "merge", "merge"]
    assert len(graph.stacks[m].parent_stacks) == 3
    pairs = [(c.from_stack, c.to_stack) for c in graph.connections]
    assert len(pairs) == len(set(pairs))


def test_connect_stacks_accepts_precomputed_partition() -> None:
    commit_graph = build_commit_graph([make_commit("a"), make_commit("b", ["a"])])
    partition = partition_stacks(commit_graph)

    graph = connect_stacks(partition, commit_graph)

    assert graph.stacks["stack-0"].commits == partition.chains["stack-0"]


def test_empty_input_gives_empty_graph() -> None:
    graph = build_stack_graph([])

    assert graph.stacks == {}
    assert graph.connections == []
    assert graph.root_stacks == []
    assert graph.leaf_stacks == []
