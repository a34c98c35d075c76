"""
formstore serve command - Serve form definitions over HTTP.

Usage:
    formstore serve
    formstore --config settings.yaml serve --host 0.0.0.0 --port 8080
"""

import click

from .common import get_store


@click.command()
@click.option("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
@click.option("--port", type=int, default=8080, help="Bind port (default: 8080)")
@click.pass_context
def serve_command(ctx, host, port):
    """Start the formstore HTTP API.

    Example:
        formstore --config settings.yaml serve --port 8080
    """
    import uvicorn
    from ..api_server import create_app

    store = get_store(ctx)
    app = create_app(store)

    click.echo("Starting formstore API:")
    for save_path, enabled in store.save_paths.items():
        click.echo(f"  Save path: {save_path} ({'enabled' if enabled else 'disabled'})")
    click.echo(f"  Listening: {host}:{port}")
    click.echo()

    uvicorn.run(app, host=host, port=port, log_level=ctx.obj.get("log_level", "info"))
