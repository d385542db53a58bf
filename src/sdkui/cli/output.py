"""Output routing for CLI commands.

user_output: messages for humans (status, errors), written to stderr.
machine_output: command results, written to stdout so they can be piped.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)
