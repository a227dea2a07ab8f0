"""Input file resolution for the litmus CLI.

Either both paths are given explicitly, or neither is and the working
directory must hold exactly one ``*.cs`` and one ``*.razor`` file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

USAGE = "litmus generate <ComponentClass.cs> <ComponentRazor.razor>"


class InputError(Exception):
    """Raised when the input files cannot be resolved or read."""


@dataclass
class InputPair:
    """Resolved paths of the class and markup files for one component."""

    class_path: Path
    razor_path: Path
    discovered: bool = False

    def read(self) -> tuple[str, str]:
        """Return (class_text, markup_text)."""
        try:
            return (
                self.class_path.read_text(encoding="utf-8"),
                self.razor_path.read_text(encoding="utf-8"),
            )
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Could not read input: {e}") from e


def discover_inputs(directory: Path) -> InputPair:
    """Pick the single .cs and single .razor file in *directory*."""
    cs_files = sorted(p for p in directory.glob("*.cs") if p.is_file())
    razor_files = sorted(p for p in directory.glob("*.razor") if p.is_file())
    if len(cs_files) != 1 or len(razor_files) != 1:
        raise InputError(
            "Could not automatically find exactly one .cs and one .razor file "
            f"in {directory}.\nPlease specify the file paths like this:\n  {USAGE}"
        )
    return InputPair(class_path=cs_files[0], razor_path=razor_files[0], discovered=True)


def resolve_inputs(
    class_file: Optional[Path],
    razor_file: Optional[Path],
    cwd: Optional[Path] = None,
) -> InputPair:
    """Resolve CLI arguments to an existing pair of input files.

    Args:
        class_file: Path to the component class, or None to auto-discover.
        razor_file: Path to the Razor template, or None to auto-discover.
        cwd: Directory searched when both paths are omitted.

    Raises:
        InputError: On a partial argument list, failed discovery, or a
            missing file.
    """
    if class_file is None and razor_file is None:
        pair = discover_inputs(cwd or Path.cwd())
    elif class_file is None or razor_file is None:
        raise InputError(f"Usage: {USAGE}")
    else:
        pair = InputPair(class_path=class_file, razor_path=razor_file)

    if not pair.class_path.is_file():
        raise InputError(f"Class file not found: {pair.class_path}")
    if not pair.razor_path.is_file():
        raise InputError(f"Razor file not found: {pair.razor_path}")
    return pair
