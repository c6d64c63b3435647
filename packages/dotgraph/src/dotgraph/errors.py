"""Error hierarchy for the DOT interpreter."""

from __future__ import annotations


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class MalformedAstError(DotGraphError):
    """An AST node was constructed with an invalid shape."""


class ConfigurationError(DotGraphError):
    """Interpreter misconfiguration."""


# --- Interpretation errors ---


class InterpretationError(DotGraphError):
    """Interpreting one graph declaration failed."""

    def __init__(
        self,
        message: str,
        *,
        graph_index: int,
        graph_name: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.graph_index = graph_index
        self.graph_name = graph_name


class UnknownLayoutError(InterpretationError):
    """The `layout` graph attribute names no known layout algorithm."""

    def __init__(
        self,
        layout: str,
        *,
        graph_index: int,
        graph_name: str | None = None,
    ):
        super().__init__(
            f"Unknown layout algorithm <{layout}>.",
            graph_index=graph_index,
            graph_name=graph_name,
        )
        self.layout = layout
