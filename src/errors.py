"""Fatal build errors for the SkyCMS Tailwind distribution builder."""

from __future__ import annotations

from pathlib import Path

# Process exit code for a failed build
EXIT_FAILURE = 1


class BuildError(RuntimeError):
    """Base class for failures that abort the whole build."""


class MissingSourceError(BuildError, FileNotFoundError):
    """A required source file does not exist at its configured path."""

    def __init__(self, name: str, path: Path):
        super().__init__(f"{name} not found!")
        self.name = name
        self.path = path


class MinificationError(BuildError):
    """The minifier could not parse or process a script."""


TransformError = MinificationError
