from dotgraph.ast import (
    Attribute,
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
    Subgraph,
)
from dotgraph.attributes import unescape
from dotgraph.config import InterpreterConfig
from dotgraph.errors import (
    ConfigurationError,
    DotGraphError,
    InterpretationError,
    MalformedAstError,
    UnknownLayoutError,
)
from dotgraph.graph import Edge, Graph, Node
from dotgraph.interpreter import Interpreter, interpret
from dotgraph.validation import ValidationResult, validate_graph

__all__ = [
    "AttrList",
    "AttrStmt",
    "AttrTarget",
    "Attribute",
    "ConfigurationError",
    "DotGraphError",
    "Edge",
    "EdgeOp",
    "EdgeRhs",
    "EdgeStmt",
    "Graph",
    "GraphDecl",
    "GraphType",
    "InterpretationError",
    "Interpreter",
    "InterpreterConfig",
    "MalformedAstError",
    "Node",
    "NodeId",
    "NodeStmt",
    "Subgraph",
    "UnknownLayoutError",
    "ValidationResult",
    "interpret",
    "unescape",
    "validate_graph",
]
