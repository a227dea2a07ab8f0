"""Output vocabulary for generated tests.

Defaults target xUnit + bUnit + FluentAssertions. Each field can be
overridden through a LITMUS_* environment variable; see Settings.from_env().
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

_ENV_PREFIX = "LITMUS_"


@dataclass(frozen=True)
class Settings:
    """Names and markers used when rendering test scenarios."""

    fact_marker: str = "[Fact]"
    rendered_prefix: str = "this.rendered"
    initial_prefix: str = "initial"
    unknown_component: str = "UnknownComponent"
    indent: str = "    "

    def rendered_name(self, component: str) -> str:
        return f"{self.rendered_prefix}{component}"

    def initial_name(self, component: str) -> str:
        return f"{self.initial_prefix}{component}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings, overriding defaults from LITMUS_* variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests).

        Example: LITMUS_FACT_MARKER="[Test]" switches the marker to NUnit's.
        """
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            value = env.get(_ENV_PREFIX + f.name.upper())
            if value:
                overrides[f.name] = value
        return cls(**overrides)
