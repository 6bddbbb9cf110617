"""Scaffold pipeline: initialize the app, install dependencies, rename the bundle.

Stages run strictly in order. Initializer and renamer failures end the run;
a dependency-install failure is reported and the run continues.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from rnscaffold.commands import (
    GENERATOR,
    RENAME_TOOL,
    build_init_command,
    build_link_command,
    build_rename_command,
    dependency_packages,
)
from rnscaffold.errors import ExternalCommandFailed, ScaffoldError, ToolNotFound
from rnscaffold.package_manager import detect_package_manager
from rnscaffold.report import report_error, report_step, report_success, report_warning
from rnscaffold.request import ScaffoldRequest


class PipelineState(Enum):
    COLLECTING = "collecting"
    INITIALIZING = "initializing"
    DEPENDENCY_INSTALLING = "dependency_installing"
    RENAMING = "renaming"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    project_path: str
    states: List[PipelineState] = field(default_factory=list)
    error: Optional[ScaffoldError] = None
    warnings: List[ScaffoldError] = field(default_factory=list)

    @property
    def state(self) -> PipelineState:
        return self.states[-1]

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.DONE


def _run_checked(runner, cmd, cwd, failure_message):
    result = runner.run(cmd, cwd=cwd)
    if result.returncode != 0:
        raise ExternalCommandFailed(cmd, result.returncode, failure_message)


def _require_package_manager(runner):
    manager = detect_package_manager(runner)
    if manager is None:
        raise ToolNotFound("yarn/npm", "No package manager found (yarn or npm).")
    return manager


class ProjectInitializer:
    """Creates the React Native app with the generator."""

    def __init__(self, runner):
        self._runner = runner

    def initialize(self, request: ScaffoldRequest, base_directory: str):
        if not self._runner.which(GENERATOR):
            raise ToolNotFound(GENERATOR, "React Native CLI not found.")
        _run_checked(
            self._runner, build_init_command(request.name), base_directory,
            "React Native app cannot be created.",
        )
        report_success("React Native app successfully created")


class DependencyInstaller:
    """Adds the selected packages to the new project and links them."""

    def __init__(self, runner):
        self._runner = runner

    def install(self, request: ScaffoldRequest, project_path: str):
        packages = dependency_packages(request)
        if not packages:
            report_success("No dependency packages selected, nothing to install")
            return

        manager = _require_package_manager(self._runner)
        _run_checked(
            self._runner, manager.build_add_command(packages), project_path,
            "Dependency packages not installed.",
        )

        link_result = self._runner.run(build_link_command(), cwd=project_path)
        if link_result.returncode != 0:
            report_warning("react-native link failed; link native modules manually.")
        report_success("Dependency packages added")


class BundleRenamer:
    """Rewrites the generated app's bundle identifier."""

    def __init__(self, runner):
        self._runner = runner

    def rename(self, request: ScaffoldRequest, project_path: str):
        failure = "React Native bundle identifier cannot be changed."
        if self._runner.which(RENAME_TOOL):
            cmd = build_rename_command(request)
        else:
            manager = _require_package_manager(self._runner)
            _run_checked(
                self._runner, manager.build_global_install_command(RENAME_TOOL),
                project_path, failure,
            )
            cmd = build_rename_command(request, with_name=True)

        _run_checked(self._runner, cmd, project_path, failure)
        report_success("React Native bundle identifier changed")


class ScaffoldPipeline:
    """Runs Initializing -> DependencyInstalling (optional) -> Renaming."""

    def __init__(self, runner):
        self._initializer = ProjectInitializer(runner)
        self._installer = DependencyInstaller(runner)
        self._renamer = BundleRenamer(runner)

    def run(self, request: ScaffoldRequest, base_directory: str) -> PipelineResult:
        base_directory = os.path.abspath(base_directory)
        result = PipelineResult(
            project_path=request.project_path(base_directory),
            states=[PipelineState.COLLECTING],
        )

        try:
            result.states.append(PipelineState.INITIALIZING)
            report_step(f"Creating React Native app {request.name}")
            self._initializer.initialize(request, base_directory)

            if request.wants_dependencies:
                result.states.append(PipelineState.DEPENDENCY_INSTALLING)
                report_step("Installing dependency packages")
                try:
                    self._installer.install(request, result.project_path)
                except ScaffoldError as exc:
                    report_warning(str(exc))
                    result.warnings.append(exc)

            result.states.append(PipelineState.RENAMING)
            report_step(f"Changing bundle identifier to {request.bundle_id}")
            self._renamer.rename(request, result.project_path)
        except ScaffoldError as exc:
            report_error(str(exc))
            result.error = exc
            result.states.append(PipelineState.FAILED)
            return result

        result.states.append(PipelineState.DONE)
        return result
