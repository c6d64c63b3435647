"""Immutable DOT abstract syntax tree, as handed over by a DOT parser.

The variants form a closed union: `Statement` lists everything that may appear
in a graph or subgraph body, `Endpoint` everything that may appear on either
side of an edge operator. Shapes are checked on construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from dotgraph.errors import MalformedAstError


class GraphType(str, Enum):
    GRAPH = "graph"
    DIGRAPH = "digraph"


class AttrTarget(str, Enum):
    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"


class EdgeOp(str, Enum):
    DIRECTED = "->"
    UNDIRECTED = "--"


@dataclass(slots=True, frozen=True)
class Attribute:
    name: str
    value: str

    def __post_init__(self) -> None:
        _require_str(self.name, "attribute name")
        _require_str(self.value, f"value of attribute {self.name!r}")


@dataclass(slots=True, frozen=True)
class AttrList:
    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        _set_tuple(self, "attributes", Attribute, "attribute list entry")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]] | dict[str, str]) -> AttrList:
        items = pairs.items() if isinstance(pairs, dict) else pairs
        return cls(tuple(Attribute(name, value) for name, value in items))


@dataclass(slots=True, frozen=True)
class AttrStmt:
    target: AttrTarget
    attr_lists: tuple[AttrList, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.target, AttrTarget):
            raise MalformedAstError(
                f"Attribute statement target must be graph, node or edge, got {self.target!r}"
            )
        _set_tuple(self, "attr_lists", AttrList, "attribute list")


@dataclass(slots=True, frozen=True)
class NodeId:
    name: str

    def __post_init__(self) -> None:
        _require_str(self.name, "node id")


@dataclass(slots=True, frozen=True)
class NodeStmt:
    node: NodeId
    attr_lists: tuple[AttrList, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.node, NodeId):
            raise MalformedAstError(f"Node statement requires a NodeId, got {self.node!r}")
        _set_tuple(self, "attr_lists", AttrList, "attribute list")


@dataclass(slots=True, frozen=True)
class Subgraph:
    name: str | None = None
    statements: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        if self.name is not None:
            _require_str(self.name, "subgraph name")
        _set_tuple(self, "statements", STATEMENT_TYPES, "statement")


@dataclass(slots=True, frozen=True)
class EdgeRhs:
    op: EdgeOp
    target: Endpoint

    def __post_init__(self) -> None:
        if not isinstance(self.op, EdgeOp):
            raise MalformedAstError(f"Edge operator must be '->' or '--', got {self.op!r}")
        _require_endpoint(self.target)


@dataclass(slots=True, frozen=True)
class EdgeStmt:
    """An edge chain such as ``a -> b -> c [attrs]``."""

    source: Endpoint
    edges: tuple[EdgeRhs, ...]
    attr_lists: tuple[AttrList, ...] = ()

    def __post_init__(self) -> None:
        _require_endpoint(self.source)
        _set_tuple(self, "edges", EdgeRhs, "edge right-hand side")
        if not self.edges:
            raise MalformedAstError("Edge statement requires at least one edge operator")
        _set_tuple(self, "attr_lists", AttrList, "attribute list")

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        return (self.source, *(rhs.target for rhs in self.edges))


@dataclass(slots=True, frozen=True)
class GraphDecl:
    """One top-level ``graph { ... }`` or ``digraph { ... }`` declaration."""

    type: GraphType
    name: str | None = None
    statements: tuple[Statement, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.type, GraphType):
            raise MalformedAstError(f"Graph type must be graph or digraph, got {self.type!r}")
        if self.name is not None:
            _require_str(self.name, "graph name")
        _set_tuple(self, "statements", STATEMENT_TYPES, "statement")

    @property
    def directed(self) -> bool:
        return self.type is GraphType.DIGRAPH


Statement = Union[Attribute, AttrStmt, NodeStmt, EdgeStmt, Subgraph]
Endpoint = Union[NodeId, Subgraph]

STATEMENT_TYPES = (Attribute, AttrStmt, NodeStmt, EdgeStmt, Subgraph)
ENDPOINT_TYPES = (NodeId, Subgraph)


def _require_str(value: object, what: str) -> None:
    if not isinstance(value, str):
        raise MalformedAstError(f"Expected string for {what}, got {value!r}")


def _require_endpoint(value: object) -> None:
    if not isinstance(value, ENDPOINT_TYPES):
        raise MalformedAstError(f"Edge endpoint must be a NodeId or Subgraph, got {value!r}")


def _set_tuple(instance: object, name: str, kinds: type | tuple[type, ...], what: str) -> None:
    items = tuple(getattr(instance, name))
    for item in items:
        if not isinstance(item, kinds):
            raise MalformedAstError(f"Invalid {what}: {item!r}")
    object.__setattr__(instance, name, items)
