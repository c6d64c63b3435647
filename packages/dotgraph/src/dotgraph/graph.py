"""Semantic graph model produced by the interpreter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dotgraph.attributes import NAME, TYPE
from dotgraph.ast import GraphType


@dataclass(slots=True, eq=False)
class Node:
    name: str
    attrs: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attrs.setdefault(NAME, self.name)

    def __repr__(self) -> str:
        return f"Node({self.name!r}, {self.attrs!r})"


@dataclass(slots=True, eq=False)
class Edge:
    source: Node
    target: Node
    op: str
    attrs: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.attrs.setdefault(NAME, f"{self.source.name}{self.op}{self.target.name}")

    @property
    def name(self) -> str:
        return self.attrs[NAME]

    def __repr__(self) -> str:
        return f"Edge({self.name!r}, {self.attrs!r})"


@dataclass(slots=True)
class Graph:
    attrs: dict[str, str] = field(default_factory=dict)
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        return self.attrs.get(NAME)

    @property
    def type(self) -> GraphType:
        return GraphType(self.attrs.get(TYPE, GraphType.GRAPH.value))

    @property
    def directed(self) -> bool:
        return self.type is GraphType.DIGRAPH

    def get_node(self, name: str) -> Node | None:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "attrs": dict(self.attrs),
            "nodes": [dict(node.attrs) for node in self.nodes],
            "edges": [
                {
                    "source": edge.source.name,
                    "target": edge.target.name,
                    "attrs": dict(edge.attrs),
                }
                for edge in self.edges
            ],
        }
