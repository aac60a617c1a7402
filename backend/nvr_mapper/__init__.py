"""Resolve build content sets from the container catalog and cache them on disk."""

from .app import create_app

__all__ = ["create_app"]
