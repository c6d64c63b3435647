from dataclasses import dataclass, field

from dotgraph.ast import EdgeOp, GraphType
from dotgraph.attributes import LAYOUT
from dotgraph.config import InterpreterConfig
from dotgraph.graph import Graph


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_graph(graph: Graph, config: InterpreterConfig | None = None) -> ValidationResult:
    layouts = (config or InterpreterConfig()).layouts
    result = ValidationResult()

    seen: dict[str, int] = {}
    for node in graph.nodes:
        seen[node.name] = seen.get(node.name, 0) + 1
    for name, count in seen.items():
        if count > 1:
            result.errors.append(f"duplicate node: {name}")

    expected_op = EdgeOp.DIRECTED if graph.type is GraphType.DIGRAPH else EdgeOp.UNDIRECTED
    members = {id(node) for node in graph.nodes}
    connected: set[str] = set()

    for edge in graph.edges:
        if id(edge.source) not in members:
            result.errors.append(f"edge source is not a node of the graph: {edge.source.name}")
        if id(edge.target) not in members:
            result.errors.append(f"edge target is not a node of the graph: {edge.target.name}")
        if edge.op != expected_op.value:
            result.errors.append(
                f"edge operator {edge.op!r} not allowed in a {graph.type.value}: {edge.name}"
            )
        connected.add(edge.source.name)
        connected.add(edge.target.name)

    layout = graph.attrs.get(LAYOUT)
    if layout is not None and layout not in layouts:
        result.errors.append(f"unknown layout: {layout}")

    for node in graph.nodes:
        if node.name not in connected:
            result.warnings.append(f"isolated node: {node.name}")

    return result
