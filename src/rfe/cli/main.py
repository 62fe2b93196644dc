"""rfe CLI - rfe command."""

import click

from rfe.cli.init import init_command
from rfe.config.loader import load_config
from rfe.core.errors import ConfigError
from rfe.core.logging import configure_logging

VERSION = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="rfe")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """rfe - scaffold devenv projects from a directory, a repository or built-in templates."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        click.echo(f"rfe {VERSION}")


cli.add_command(init_command, name="init")


if __name__ == "__main__":
    cli()
