"""litmus: bUnit test scaffolding for Blazor components.

Reads a component's class definition and Razor template and writes three
xUnit test methods: default values, non-null after render, and ref-bound
attribute values matching the markup.

Usage:
    python -m litmus generate                           # Auto-discover in cwd
    python -m litmus generate Counter.cs Counter.razor  # Explicit files
    python -m litmus inspect                            # Show extracted facts
"""

from litmus.composer import generate

__all__ = ["generate"]
