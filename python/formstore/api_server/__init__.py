"""
formstore API Server

This module provides a small HTTP API for listing, reading and writing
form definitions held in a FormStore.
"""

from .router import create_app

__all__ = [
    "create_app",
]
