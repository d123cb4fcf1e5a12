import click

from .cli_news import headlines, search, sources


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.version_option(package_name="newsapi-kit")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    r"""newskit - read the news from the command line.

    \b
    Examples:
        newskit headlines --category business
        newskit search "climate" --sort-by publishedAt
        newskit sources --language en
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(headlines)
cli.add_command(search)
cli.add_command(sources)
