"""DOT attribute names understood by the interpreter."""

from __future__ import annotations

# Meta attributes, derived from the grammar rather than from attribute lists.
NAME = "_name"
TYPE = "_type"

# Graph
LAYOUT = "layout"

# Shared by nodes and edges
ID = "id"
LABEL = "label"
XLABEL = "xlabel"
XLP = "xlp"
POS = "pos"

# Node only
WIDTH = "width"
HEIGHT = "height"

# Edge only
LP = "lp"
HEADLABEL = "headlabel"
HEAD_LP = "head_lp"
TAILLABEL = "taillabel"
TAIL_LP = "tail_lp"
ARROWHEAD = "arrowhead"
ARROWTAIL = "arrowtail"
ARROWSIZE = "arrowsize"
DIR = "dir"
STYLE = "style"

META_ATTRIBUTES = (NAME, TYPE)

NODE_ATTRIBUTES = (ID, LABEL, XLABEL, XLP, POS, WIDTH, HEIGHT)

EDGE_ATTRIBUTES = (
    ID,
    LABEL,
    XLABEL,
    XLP,
    POS,
    LP,
    HEADLABEL,
    HEAD_LP,
    TAILLABEL,
    TAIL_LP,
    ARROWHEAD,
    ARROWTAIL,
    ARROWSIZE,
    DIR,
    STYLE,
)

LAYOUT_VALUES = frozenset({"circo", "dot", "fdp", "grid", "neato", "osage", "sfdp", "twopi"})


def unescape(value: str) -> str:
    """Strip one pair of surrounding quotes, then resolve escaped quotes.

    In DOT an ID can be quoted, and a quoted ID may contain ``\\"``.
    """
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    return value.replace('\\"', '"')
