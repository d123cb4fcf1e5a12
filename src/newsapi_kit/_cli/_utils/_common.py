import functools
from typing import Callable

import click

from ...models.errors import NewsKitError


def output_options(function):
    function = click.option(
        "--format",
        "fmt",
        type=click.Choice(["table", "json"]),
        default="table",
        show_default=True,
        help="Output format",
    )(function)
    function = click.option(
        "--no-color", is_flag=True, default=False, help="Disable colored output"
    )(function)
    return function


def handle_cli_errors(function: Callable) -> Callable:
    """Print a clean message for package and validation errors and abort."""

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except (NewsKitError, ValueError) as e:
            click.echo(f"❌ {e}", err=True)
            raise click.Abort() from e

    return wrapper
