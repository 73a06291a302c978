"""Package manager probing and dependency installation."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TextIO

from .config import Config
from .errors import DhCreateError, InstallError, ToolNotFoundError
from .utils import run_command, run_command_passthrough


class DependencyInstaller:
    """Runs the configured package manager for a generated project."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def tool(self) -> str:
        return self.config.package_manager

    async def check_available(self) -> str:
        """Probe ``<tool> --version`` and return the reported version.

        Raises:
            ToolNotFoundError: If the tool cannot be run or the probe fails.
        """
        try:
            returncode, stdout, _ = await run_command([self.tool, "--version"])
        except OSError as exc:
            raise ToolNotFoundError(self.tool) from exc
        if returncode != 0:
            raise ToolNotFoundError(self.tool)
        return stdout

    async def install(
        self,
        dest: str | Path,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> int:
        """Install dependencies in *dest*, streaming the tool's output live.

        Raises:
            DhCreateError: If *dest* is not an existing directory.
            ToolNotFoundError: If the tool disappeared since the probe.
            InstallError: If the install command exits non-zero.
        """
        if not await asyncio.to_thread(Path(dest).is_dir):
            raise DhCreateError(f"Project directory not found: {dest}")

        cmd = [self.tool, *self.config.install_args]
        try:
            returncode = await run_command_passthrough(
                cmd, cwd=dest, stdout=stdout, stderr=stderr
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(self.tool) from exc
        if returncode != 0:
            raise InstallError(returncode)
        return returncode

    def next_steps(self, project_name: str) -> str:
        """Commands to suggest after a successful install (Rich markup)."""
        tool = self.tool
        return (
            "Inside that directory, you can run several commands:\n"
            "\n"
            f"  [cyan]{tool} run dev[/cyan]\n"
            "    Start the development server.\n"
            "\n"
            f"  [cyan]{tool} run build[/cyan]\n"
            "    Bundle the app into static files for production.\n"
            "\n"
            f"  [cyan]{tool} run preview[/cyan]\n"
            "    Preview the production build locally.\n"
            "\n"
            "Get started now by running:\n"
            "\n"
            f"  cd {project_name}\n"
            f"  {tool} run dev\n"
        )
