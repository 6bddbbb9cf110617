"""Click command for the rnscaffold CLI."""

import os
import sys

import click

from rnscaffold import __version__
from rnscaffold.answers import NO_THEME_ALIAS, YES_NO, collect_request
from rnscaffold.command_runner import CommandRunner, DryRunCommandRunner
from rnscaffold.errors import ValidationError
from rnscaffold.pipeline import ScaffoldPipeline
from rnscaffold.request import (
    THEME_LIBRARIES,
    validate_bundle_identifier,
    validate_project_name,
)
from rnscaffold.scaffold_opts import ScaffoldOpts

YES_NO_CHOICE = click.Choice(YES_NO, case_sensitive=False)


def _validated(validator):
    """Turn a ValidationError from *validator* into a click usage error."""

    def callback(_ctx, _param, value):
        if value is None:
            return None
        try:
            return validator(value)
        except ValidationError as exc:
            raise click.BadParameter(str(exc))

    return callback


def _print_banner(opts):
    click.echo("================================================")
    click.echo("  React Native Project Scaffolder")
    click.echo("================================================")
    if opts.dry_run:
        click.echo("Dry run: commands are printed, not executed.")
    click.echo("")


def _print_summary(request, result):
    click.echo("")
    click.echo(f"Project: {request.name}")
    click.echo(f"Bundle identifier: {request.bundle_id}")
    click.echo(f"Location: {result.project_path}")


@click.command("rnscaffold")
@click.option("--name", callback=_validated(validate_project_name),
              help="Project name (letters, numbers, underscores and hyphens).")
@click.option("--bundle", callback=_validated(validate_bundle_identifier),
              help="Bundle identifier, e.g. com.example.app.")
@click.option("--navigation", type=YES_NO_CHOICE, help="Install react-navigation.")
@click.option("--drawer", type=YES_NO_CHOICE, help="Add the react-navigation drawer.")
@click.option("--tab", type=YES_NO_CHOICE, help="Add react-navigation tabs.")
@click.option("--icon", type=YES_NO_CHOICE, help="Install react-native-vector-icons.")
@click.option("--theme", type=YES_NO_CHOICE, help="Install a UI library.")
@click.option("--themeList", "theme_list",
              type=click.Choice(THEME_LIBRARIES + [NO_THEME_ALIAS], case_sensitive=False),
              help="UI library to install when --theme is Yes.")
@click.option("--directory", default=".", show_default=True,
              type=click.Path(exists=True, file_okay=False),
              help="Directory in which the project is created.")
@click.option("--dry-run", is_flag=True, help="Print the commands without running them.")
@click.version_option(__version__, prog_name="rnscaffold")
def main(directory, dry_run, **flag_values):
    """Create a React Native app, add packages and set its bundle identifier."""
    opts = ScaffoldOpts(directory=os.path.abspath(directory), dry_run=dry_run, **flag_values)

    _print_banner(opts)
    request = collect_request(opts.flags())

    runner = DryRunCommandRunner() if opts.dry_run else CommandRunner()
    result = ScaffoldPipeline(runner).run(request, opts.directory)

    _print_summary(request, result)
    if not result.succeeded:
        click.secho("Scaffolding failed.", fg="red", err=True)
        sys.exit(1)
    click.secho("Scaffolding complete.", fg="green")
