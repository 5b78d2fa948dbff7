"""Tests for the builders: scoping, defaults and the single-writer lease"""

import logging

import pytest

from graphwiz import (
    ROOT,
    Builder,
    BuilderCheckedOutError,
    BuilderFinalizedError,
    Graph,
    Kind,
    RootBuilder,
    SubgraphBuilder,
)


class Boom(Exception):
    pass


def test_both_builders_share_one_interface():
    root = Graph.new_builder()
    child = root.new_subgraph()

    assert isinstance(root, RootBuilder)
    assert isinstance(child, SubgraphBuilder)
    assert isinstance(root, Builder) and isinstance(child, Builder)
    child.build()


def test_ids_increase_across_builders():
    root = Graph.new_builder()
    issued = [root.new_node("a")]
    with root.new_cluster("c") as cluster:
        issued.append(cluster.entity)
        issued.append(cluster.new_node("b"))
        with cluster.new_subgraph() as inner:
            issued.append(inner.entity)
            issued.append(inner.new_node("c"))
            issued.append(inner.new_edge(issued[2], issued[4]))
    issued.append(root.new_node("d"))
    issued.append(root.new_edge(issued[0], issued[-1]))
    graph = root.build()

    ids = [e.id for e in issued]
    assert ids == list(range(1, len(issued) + 1))
    assert graph.latest == len(issued)


def test_membership_follows_scope():
    root = Graph.new_builder()
    a = root.new_node("a")
    with root.new_cluster("box") as box:
        c = box.new_node("c")
        ca = box.new_edge(c, a)
    ab = root.new_edge(a, c)
    graph = root.build()

    assert graph.root.nodes == [a]
    assert graph.root.edges == [ab]
    assert graph.root.subgraphs == [box.entity]
    assert graph.subgraph(box.entity).nodes == [c]
    assert graph.subgraph(box.entity).edges == [ca]


def test_cluster_label_and_kind():
    root = Graph.new_builder()
    with root.new_cluster("front end") as front:
        pass
    with root.new_subgraph() as plain:
        pass

    assert front.entity.kind is Kind.CLUSTER
    assert plain.entity.kind is Kind.SUBGRAPH
    assert root.attributes(front.entity)["label"] == "front end"
    assert "label" not in root.attributes(plain.entity)


def test_with_variants_override_defaults():
    root = Graph.new_builder()
    root.defaults_mut(Kind.NODE)["color"] = "blue"
    root.defaults_mut(Kind.EDGE)["style"] = "solid"
    root.defaults_mut(Kind.CLUSTER)["style"] = "filled"

    a = root.new_node_with("a", {"color": "red"})
    b = root.new_node_with("b", {"penwidth": 2})
    ab = root.new_edge_with(a, b, {"style": "dotted", "label": "parsing"})
    with root.new_cluster_with("box", {"style": "rounded", "label": "renamed"}) as box:
        pass
    with root.new_subgraph_with({"rank": "same"}) as same:
        pass

    assert root.attributes(a)["color"] == "red"
    assert dict(root.attributes(b)) == {"color": "blue", "label": "b", "penwidth": "2"}
    assert dict(root.attributes(ab)) == {"style": "dotted", "label": "parsing"}
    assert dict(root.attributes(box.entity)) == {"style": "rounded", "label": "renamed"}
    assert dict(root.attributes(same.entity)) == {"rank": "same"}


def test_labels_are_strings():
    root = Graph.new_builder()
    n = root.new_node(42)

    assert root.attributes(n)["label"] == "42"


def test_defaults_accessors():
    root = Graph.new_builder()

    assert root.defaults(Kind.NODE) is None
    root.defaults_mut(Kind.NODE)["shape"] = "box"
    assert dict(root.defaults(Kind.NODE)) == {"shape": "box"}
    assert root.defaults_mut(Kind.NODE) is root.defaults_mut(Kind.NODE)
    with pytest.raises(TypeError):
        root.defaults(Kind.NODE)["shape"] = "circle"


def test_child_defaults_do_not_leak_to_parent():
    root = Graph.new_builder()
    root.defaults_mut(Kind.NODE)["color"] = "blue"

    with root.new_cluster("c") as child:
        assert child.defaults(Kind.NODE)["color"] == "blue"
        child.defaults_mut(Kind.NODE)["color"] = "red"
        child.defaults_mut(Kind.EDGE)["style"] = "dashed"
        x = child.new_node("x")

    y = root.new_node("y")

    assert root.defaults(Kind.NODE)["color"] == "blue"
    assert root.defaults(Kind.EDGE) is None
    assert root.attributes(x)["color"] == "red"
    assert root.attributes(y)["color"] == "blue"


def test_parent_defaults_do_not_reach_spawned_child():
    root = Graph.new_builder()
    node_defaults = root.defaults_mut(Kind.NODE)
    node_defaults["color"] = "blue"

    with root.new_subgraph() as child:
        node_defaults["color"] = "green"
        x = child.new_node("x")

    root.defaults_mut(Kind.NODE)["color"] = "yellow"

    assert root.attributes(x)["color"] == "blue"


def test_attributes_are_unscoped():
    root = Graph.new_builder()
    a = root.new_node("a")
    with root.new_cluster("box") as box:
        box.attributes_mut(a)["color"] = "red"
        box.attributes_mut(ROOT)["rankdir"] = "LR"
    root.attributes_mut(box.entity)["style"] = "filled"

    assert root.attributes(a)["color"] == "red"
    assert root.attributes(ROOT)["rankdir"] == "LR"
    assert root.attributes(box.entity)["style"] == "filled"


def test_parent_is_locked_while_child_is_open():
    root = Graph.new_builder()
    a = root.new_node("a")
    child = root.new_subgraph()

    with pytest.raises(BuilderCheckedOutError):
        root.new_node("b")
    with pytest.raises(BuilderCheckedOutError):
        root.attributes_mut(a)
    with pytest.raises(BuilderCheckedOutError):
        root.defaults_mut(Kind.NODE)
    with pytest.raises(BuilderCheckedOutError):
        root.new_cluster("c")

    assert child.build() == child.entity
    root.new_node("b")


def test_child_cannot_close_over_open_grandchild():
    root = Graph.new_builder()
    child = root.new_cluster("child")
    grandchild = child.new_subgraph()

    with pytest.raises(BuilderCheckedOutError):
        child.build()

    grandchild.build()
    child.build()
    assert root.build().subgraph(child.entity).subgraphs == [grandchild.entity]


def test_builder_is_unusable_after_build():
    root = Graph.new_builder()
    child = root.new_subgraph()
    entity = child.build()

    assert child.finalized
    assert child.build() == entity
    with pytest.raises(BuilderFinalizedError):
        child.new_node("late")

    graph = root.build()
    assert root.build() is graph
    with pytest.raises(BuilderFinalizedError):
        root.new_node("late")


def test_with_block_finalizes_on_exception():
    root = Graph.new_builder()

    with pytest.raises(Boom):
        with root.new_cluster("box") as box:
            box.new_node("n")
            raise Boom()

    assert box.finalized
    root.new_node("after")
    graph = root.build()
    assert graph.subgraph(box.entity).sealed


def test_with_block_closes_forgotten_children(caplog):
    root = Graph.new_builder()

    with caplog.at_level(logging.WARNING, logger="graphwiz"):
        with root.new_cluster("outer") as outer:
            inner = outer.new_subgraph()
            inner.new_node("n")

    assert inner.finalized and outer.finalized
    assert "never built" in caplog.text
    root.build()


def test_root_build_finalizes_open_builders(caplog):
    root = Graph.new_builder()
    child = root.new_cluster("left open")
    grandchild = child.new_subgraph()
    grandchild.new_node("n")

    with caplog.at_level(logging.WARNING, logger="graphwiz"):
        graph = root.build()

    assert child.finalized and grandchild.finalized
    assert graph.subgraph(child.entity).sealed
    assert graph.subgraph(grandchild.entity).sealed
    assert graph.root.sealed
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2
