"""Coloured status lines for pipeline steps."""

import click


def report_step(message):
    click.echo("")
    click.secho(f"==> {message}", bold=True)


def report_success(message):
    click.secho(message, fg="green")


def report_warning(message):
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def report_error(message):
    click.secho(f"Error: {message}", fg="red", err=True)
