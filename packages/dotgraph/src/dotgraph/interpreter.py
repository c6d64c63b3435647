"""Interpret DOT ASTs into `Graph` instances.

One pre-order walk per graph declaration. All state of a walk lives in a
`_TraversalContext` created for that declaration, so an `Interpreter` holds
nothing but its configuration and can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dotgraph.ast import (
    Attribute,
    AttrList,
    AttrStmt,
    AttrTarget,
    EdgeOp,
    EdgeStmt,
    Endpoint,
    GraphDecl,
    NodeId,
    NodeStmt,
    Statement,
    Subgraph,
)
from dotgraph.attributes import (
    EDGE_ATTRIBUTES,
    LAYOUT,
    META_ATTRIBUTES,
    NAME,
    NODE_ATTRIBUTES,
    TYPE,
    unescape,
)
from dotgraph.config import InterpreterConfig
from dotgraph.errors import MalformedAstError, UnknownLayoutError
from dotgraph.graph import Edge, Graph, Node

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _TraversalContext:
    index: int
    layouts: frozenset[str]
    graph: Graph = field(default_factory=Graph)
    nodes: dict[str, Node] = field(default_factory=dict)
    node_defaults: dict[str, str] = field(default_factory=dict)
    edge_defaults: dict[str, str] = field(default_factory=dict)
    # node name -> attribute keys set explicitly by some node statement
    explicit_keys: dict[str, set[str]] = field(default_factory=dict)
    # one entry per subgraph currently being visited, collecting its nodes
    members: list[dict[str, Node]] = field(default_factory=list)

    def node(self, name: str) -> Node:
        node = self.nodes.get(name)
        if node is None:
            node = Node(name)
            self.nodes[name] = node
            self.graph.nodes.append(node)
        for collected in self.members:
            collected.setdefault(name, node)
        return node


class Interpreter:
    def __init__(self, config: InterpreterConfig | None = None):
        self._config = config or InterpreterConfig()

    def interpret(self, asts: Iterable[GraphDecl | None]) -> list[Graph]:
        """Interpret each graph declaration, in order.

        ``None`` entries yield no graph and are left out of the result. An
        `InterpretationError` aborts the whole batch.
        """
        graphs: list[Graph] = []
        for index, decl in enumerate(asts):
            if decl is None:
                logger.debug("No graph declaration at index %d, skipping", index)
                continue
            if not isinstance(decl, GraphDecl):
                raise MalformedAstError(f"Expected GraphDecl at index {index}, got {decl!r}")
            graphs.append(self._interpret_graph(index, decl))
        return graphs

    def _interpret_graph(self, index: int, decl: GraphDecl) -> Graph:
        context = _TraversalContext(index=index, layouts=self._config.layouts)
        if decl.name is not None:
            context.graph.attrs[NAME] = unescape(decl.name)
        context.graph.attrs[TYPE] = decl.type.value
        logger.debug("Interpreting %s %r (index %d)", decl.type.value, decl.name, index)

        _visit_statements(context, decl.statements)

        logger.debug(
            "Interpreted graph %r: %d nodes, %d edges",
            context.graph.name,
            len(context.graph.nodes),
            len(context.graph.edges),
        )
        return context.graph


def interpret(
    asts: Iterable[GraphDecl | None], config: InterpreterConfig | None = None
) -> list[Graph]:
    return Interpreter(config).interpret(asts)


def _visit_statements(context: _TraversalContext, statements: Iterable[Statement]) -> None:
    for statement in statements:
        _visit(context, statement)


def _visit(context: _TraversalContext, statement: Statement) -> None:
    match statement:
        case Attribute(name=name, value=value):
            _set_graph_attribute(context, unescape(name), unescape(value))
        case AttrStmt(target=AttrTarget.GRAPH, attr_lists=attr_lists):
            for name, value in _attribute_pairs(attr_lists):
                _set_graph_attribute(context, name, value)
        case AttrStmt(target=AttrTarget.NODE, attr_lists=attr_lists):
            context.node_defaults.update(_attribute_values(attr_lists))
        case AttrStmt(target=AttrTarget.EDGE, attr_lists=attr_lists):
            context.edge_defaults.update(_attribute_values(attr_lists))
        case NodeStmt():
            _visit_node_stmt(context, statement)
        case EdgeStmt():
            _visit_edge_stmt(context, statement)
        case Subgraph():
            _visit_subgraph(context, statement)
        case _:
            raise MalformedAstError(f"Unsupported statement: {statement!r}")


def _set_graph_attribute(context: _TraversalContext, name: str, value: str) -> None:
    if name in META_ATTRIBUTES:
        logger.debug("Ignoring meta attribute %s=%r in attribute list", name, value)
        return
    if name == LAYOUT:
        value = value.lower()
        if value not in context.layouts:
            raise UnknownLayoutError(
                value, graph_index=context.index, graph_name=context.graph.name
            )
    context.graph.attrs[name] = value


def _visit_node_stmt(context: _TraversalContext, stmt: NodeStmt) -> None:
    node = context.node(unescape(stmt.node.name))
    explicit = _attribute_values(stmt.attr_lists)
    explicit_keys = context.explicit_keys.setdefault(node.name, set())

    for key in NODE_ATTRIBUTES:
        if key in explicit:
            node.attrs[key] = explicit[key]
            explicit_keys.add(key)
        elif key in context.node_defaults and key not in explicit_keys:
            node.attrs[key] = context.node_defaults[key]


def _visit_edge_stmt(context: _TraversalContext, stmt: EdgeStmt) -> None:
    # Taken before the endpoints are visited; shared by every edge of the chain.
    explicit = _attribute_values(stmt.attr_lists)

    sources = _resolve_endpoint(context, stmt.source)
    for rhs in stmt.edges:
        targets = _resolve_endpoint(context, rhs.target)
        for source in sources:
            for target in targets:
                context.graph.edges.append(
                    _create_edge(context, source, rhs.op, target, explicit)
                )
        sources = targets


def _resolve_endpoint(context: _TraversalContext, endpoint: Endpoint) -> list[Node]:
    match endpoint:
        case NodeId(name=name):
            return [context.node(unescape(name))]
        case Subgraph():
            return _visit_subgraph(context, endpoint)
        case _:
            raise MalformedAstError(f"Unsupported edge endpoint: {endpoint!r}")


def _visit_subgraph(context: _TraversalContext, subgraph: Subgraph) -> list[Node]:
    collected: dict[str, Node] = {}
    context.members.append(collected)
    try:
        _visit_statements(context, subgraph.statements)
    finally:
        context.members.pop()
    return list(collected.values())


def _create_edge(
    context: _TraversalContext,
    source: Node,
    op: EdgeOp,
    target: Node,
    explicit: dict[str, str],
) -> Edge:
    edge = Edge(source, target, op.value)
    for key in EDGE_ATTRIBUTES:
        if key in explicit:
            edge.attrs[key] = explicit[key]
        elif key in context.edge_defaults:
            edge.attrs[key] = context.edge_defaults[key]
    return edge


def _attribute_pairs(attr_lists: Iterable[AttrList]) -> Iterator[tuple[str, str]]:
    for attr_list in attr_lists:
        for attribute in attr_list.attributes:
            yield unescape(attribute.name), unescape(attribute.value)


def _attribute_values(attr_lists: Iterable[AttrList]) -> dict[str, str]:
    return dict(_attribute_pairs(attr_lists))
