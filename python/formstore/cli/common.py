"""
Shared helpers for formstore commands.
"""

import contextlib

import click

from ..config import load_config
from ..errors import PersistenceManagerError
from ..store import FormStore


@contextlib.contextmanager
def store_errors():
    """Report store errors as click errors (message and code, exit status 1)."""
    try:
        yield
    except PersistenceManagerError as e:
        raise click.ClickException(f"{e.message} (code {e.code})") from e


def get_store(ctx: click.Context) -> FormStore:
    """Build the FormStore once per invocation and keep it on the context."""
    obj = ctx.ensure_object(dict)
    if obj.get("store") is None:
        with store_errors():
            obj["store"] = FormStore(load_config(obj.get("config_path")))
    return obj["store"]
