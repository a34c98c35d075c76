"""
formstore CLI module.

This module provides the command-line interface for formstore.
"""

from .main import cli, main

__all__ = ["cli", "main"]
