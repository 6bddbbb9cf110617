"""CommandRunner: runs external tools synchronously, inheriting the terminal."""

import shutil
import subprocess
from dataclasses import dataclass
from typing import List

import click

from rnscaffold.errors import ToolNotFound


@dataclass
class CommandResult:
    """Exit status of one external command."""
    returncode: int


def format_command(cmd: List[str]) -> str:
    return " ".join(cmd)


class CommandRunner:
    """Runs commands with subprocess and probes PATH with shutil.which."""

    def which(self, tool: str) -> bool:
        return shutil.which(tool) is not None

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        """Run *cmd* in *cwd* and return its exit status.

        Raises:
            ToolNotFound: The executable could not be started.
        """
        click.echo(f"Running: {format_command(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except OSError as exc:
            raise ToolNotFound(cmd[0], f"Could not start {cmd[0]}: {exc.strerror or exc}") from exc
        return CommandResult(returncode=result.returncode)


class DryRunCommandRunner(CommandRunner):
    """Prints each command instead of running it.

    PATH probes are still real so the printed plan matches what a real
    run would do on this machine.
    """

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        click.echo(f"Would run: {format_command(cmd)}  (in {cwd})")
        return CommandResult(returncode=0)
