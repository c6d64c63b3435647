"""Interpreter configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotgraph.attributes import LAYOUT_VALUES
from dotgraph.errors import ConfigurationError

EXTRA_LAYOUTS_ENV = "DOTGRAPH_EXTRA_LAYOUTS"


@dataclass(slots=True, frozen=True)
class InterpreterConfig:
    layouts: frozenset[str] = LAYOUT_VALUES

    def __post_init__(self) -> None:
        layouts = frozenset(self.layouts)
        if not layouts:
            raise ConfigurationError("At least one layout algorithm must be allowed")
        if not all(isinstance(layout, str) for layout in layouts):
            raise ConfigurationError(f"Layout names must be strings: {layouts!r}")
        if any(layout != layout.lower() for layout in layouts):
            raise ConfigurationError(f"Layout names must be lower case: {sorted(layouts)}")
        object.__setattr__(self, "layouts", layouts)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> InterpreterConfig:
        """Build a config, extending the layout allow-list from the environment."""
        env = os.environ if environ is None else environ
        raw = env.get(EXTRA_LAYOUTS_ENV, "").strip()
        if not raw:
            return cls()

        extra: set[str] = set()
        for item in raw.split(","):
            layout = item.strip().lower()
            if not layout:
                raise ConfigurationError(f"Empty layout name in {EXTRA_LAYOUTS_ENV}={raw!r}")
            extra.add(layout)
        return cls(layouts=LAYOUT_VALUES | extra)
