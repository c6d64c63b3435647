from dotgraph.ast import (
    AttrList,
    AttrStmt,
    AttrTarget,
    EdgeOp,
    EdgeRhs,
    EdgeStmt,
    GraphDecl,
    GraphType,
    NodeId,
    NodeStmt,
)
from dotgraph.config import InterpreterConfig
from dotgraph.graph import Edge, Graph, Node
from dotgraph.interpreter import interpret
from dotgraph.validation import validate_graph


def test_interpreted_graph_is_valid():
    decl = GraphDecl(
        GraphType.DIGRAPH,
        statements=(
            AttrStmt(AttrTarget.GRAPH, (AttrList.from_pairs({"layout": "dot"}),)),
            EdgeStmt(NodeId("a"), (EdgeRhs(EdgeOp.DIRECTED, NodeId("b")),)),
            NodeStmt(NodeId("lonely")),
        ),
    )
    (graph,) = interpret([decl])

    result = validate_graph(graph)

    assert result.ok
    assert result.warnings == ["isolated node: lonely"]


def test_validation_reports_structural_errors():
    a, b = Node("a"), Node("b")
    stranger = Node("stranger")
    graph = Graph(
        attrs={"_type": "graph", "layout": "bogus"},
        nodes=[a, b, Node("a")],
        edges=[Edge(a, b, "->"), Edge(a, stranger, "--")],
    )

    result = validate_graph(graph)

    assert not result.ok
    assert "duplicate node: a" in result.errors
    assert "edge target is not a node of the graph: stranger" in result.errors
    assert "edge operator '->' not allowed in a graph: a->b" in result.errors
    assert "unknown layout: bogus" in result.errors


def test_validation_honours_configured_layouts():
    graph = Graph(attrs={"_type": "digraph", "layout": "elk"})

    assert not validate_graph(graph).ok
    assert validate_graph(graph, InterpreterConfig(layouts=frozenset({"elk"}))).ok


def test_graph_interpreted_with_env_layouts_validates_with_same_config():
    config = InterpreterConfig.from_env(environ={"DOTGRAPH_EXTRA_LAYOUTS": "elk"})
    decl = GraphDecl(
        GraphType.DIGRAPH,
        statements=(AttrStmt(AttrTarget.GRAPH, (AttrList.from_pairs({"layout": "ELK"}),)),),
    )
    (graph,) = interpret([decl], config)

    assert validate_graph(graph, config).ok
