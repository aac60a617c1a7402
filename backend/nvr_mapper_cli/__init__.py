"""Typer command line interface for the NVR mapper."""

from .app import app

__all__ = ["app"]
