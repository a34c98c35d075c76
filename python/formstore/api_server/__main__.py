#!/usr/bin/env python3
"""
formstore API Server - Entry Point

Usage:
    python -m formstore.api_server --config /etc/formstore/settings.yaml --port 8080
"""

import argparse
import logging

import uvicorn

from ..config import load_config
from ..store import FormStore
from .router import create_app


def main():
    parser = argparse.ArgumentParser(
        description="formstore API Server - YAML form definitions over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m formstore.api_server
  python -m formstore.api_server --config settings.yaml --port 8080
  FORMSTORE_DEFAULT_SAVE_PATH=./forms python -m formstore.api_server
        """
    )
    parser.add_argument("--config", default=None, help="Settings file (default: $FORMSTORE_CONFIG)")
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    # One store for the whole process
    store = FormStore(load_config(args.config))
    app = create_app(store)

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
