"""
formstore CLI - Command line interface for formstore.

Usage:
    formstore list                          # List enabled forms
    formstore show contact                  # Print a form definition
    formstore save contact contact.yaml     # Save a form definition
    formstore serve --port 8080             # Serve forms over HTTP
"""

import logging

import click

from .forms import exists_command, list_command, save_command, show_command
from .serve import serve_command


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Settings file (default: $FORMSTORE_CONFIG)")
@click.option("--log-level", default="warning",
              type=click.Choice(["debug", "info", "warning", "error"]),
              help="Log level (default: warning)")
@click.pass_context
def cli(ctx, config_path, log_level):
    """formstore - YAML file persistence for form definitions."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["log_level"] = log_level

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add subcommands
cli.add_command(list_command, name="list")
cli.add_command(show_command, name="show")
cli.add_command(save_command, name="save")
cli.add_command(exists_command, name="exists")
cli.add_command(serve_command, name="serve")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
