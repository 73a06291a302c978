"""Error types raised by the scaffolding steps.

Every step raises one of these instead of exiting; ``dh_create.pipeline.main``
is the single place that turns them into a process exit status.
"""

from __future__ import annotations

from pathlib import Path


class DhCreateError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ToolNotFoundError(DhCreateError):
    """The package manager binary could not be executed."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"`{tool}` not found")


class EmptySelectionError(DhCreateError):
    """The user did not pick any class at the prompt."""

    def __init__(self) -> None:
        super().__init__("No classes selected. Project will not be generated")


class MaterializeError(DhCreateError):
    """A filesystem step of project generation failed."""

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class InstallError(DhCreateError):
    """The package manager's install command exited non-zero."""

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__("Error while installing dependencies")
