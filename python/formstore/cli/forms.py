"""
formstore form commands - list, show, save and check form definitions.

Usage:
    formstore list
    formstore show contact
    formstore save contact contact.yaml
    formstore exists contact
"""

import json

import click
import yaml

from .common import get_store, store_errors


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the listing as JSON")
@click.pass_context
def list_command(ctx, as_json):
    """List all enabled forms."""
    store = get_store(ctx)
    with store_errors():
        forms = store.list_forms()

    if as_json:
        click.echo(json.dumps([form.to_dict() for form in forms], indent=2, ensure_ascii=False))
        return

    if not forms:
        click.echo("No forms found.")
        return

    for form in forms:
        click.echo(f"{form.persistence_identifier}\t{form.identifier}\t{form.name}")


@click.command()
@click.argument("persistence_identifier")
@click.pass_context
def show_command(ctx, persistence_identifier):
    """Print a form definition as YAML."""
    store = get_store(ctx)
    with store_errors():
        definition = store.load(persistence_identifier)
    click.echo(yaml.safe_dump(definition, default_flow_style=False, sort_keys=False, allow_unicode=True), nl=False)


@click.command()
@click.argument("persistence_identifier")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def save_command(ctx, persistence_identifier, source):
    """Save a form definition read from SOURCE (a YAML file, or - for stdin).

    Example:
        formstore save contact ./contact.yaml
    """
    try:
        definition = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise click.BadParameter(f"not valid YAML: {e}", param_hint="SOURCE")

    if not isinstance(definition, dict) or not definition.get("identifier"):
        raise click.BadParameter("the form definition needs an identifier", param_hint="SOURCE")

    store = get_store(ctx)
    with store_errors():
        store.save(persistence_identifier, definition)
    click.echo(f"Saved {definition['identifier']} as {persistence_identifier}")


@click.command()
@click.argument("persistence_identifier")
@click.pass_context
def exists_command(ctx, persistence_identifier):
    """Check whether a form exists (exit status 0 if it does, 1 if not)."""
    store = get_store(ctx)
    with store_errors():
        found = store.exists(persistence_identifier)
    click.echo("yes" if found else "no")
    if not found:
        ctx.exit(1)
