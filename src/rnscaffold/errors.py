"""Errors raised while collecting answers and running the scaffold pipeline."""

from typing import List


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class ValidationError(ScaffoldError, ValueError):
    """An answer or flag value does not have the required format."""


class ToolNotFound(ScaffoldError):
    """A required executable is not on PATH."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool


class ExternalCommandFailed(ScaffoldError):
    """An external command exited with a non-zero status."""

    def __init__(self, cmd: List[str], returncode: int, message: str):
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode
