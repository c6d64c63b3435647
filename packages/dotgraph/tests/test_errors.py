from dotgraph.errors import (
    ConfigurationError,
    DotGraphError,
    InterpretationError,
    MalformedAstError,
    UnknownLayoutError,
)


class TestDotGraphError:
    def test_basic(self):
        err = DotGraphError("something broke")
        assert str(err) == "something broke"
        assert err.cause is None

    def test_with_cause(self):
        cause = ValueError("bad value")
        err = DotGraphError("wrapper", cause=cause)
        assert err.cause is cause

    def test_subclasses(self):
        assert isinstance(MalformedAstError("x"), DotGraphError)
        assert isinstance(ConfigurationError("x"), DotGraphError)


class TestInterpretationError:
    def test_carries_graph_location(self):
        err = InterpretationError("failed", graph_index=2, graph_name="G")
        assert err.graph_index == 2
        assert err.graph_name == "G"

    def test_unknown_layout(self):
        err = UnknownLayoutError("bogus", graph_index=0)
        assert isinstance(err, InterpretationError)
        assert err.layout == "bogus"
        assert err.graph_name is None
        assert str(err) == "Unknown layout algorithm <bogus>."
