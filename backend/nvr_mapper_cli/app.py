"""Command line interface for resolving build content sets."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from backend.nvr_mapper.services import CatalogClientError
from backend.nvr_mapper.stores.mapping_store import StoreError

from .client import create_state


app = typer.Typer(help="Resolve build content sets from the container catalog.")
mapping_app = typer.Typer(help="Inspect the cached NVR mapping.")
app.add_typer(mapping_app, name="mapping")


def _base_url_option() -> typer.Option:
    return typer.Option(
        None,
        "--base-url",
        help="Override the catalog NVR lookup endpoint.",
    )


def _mapping_path_option() -> typer.Option:
    return typer.Option(
        None,
        "--mapping-path",
        help="Path of the persisted mapping file.",
    )


def _timeout_option() -> typer.Option:
    return typer.Option(
        None,
        "--timeout",
        help="Catalog request timeout in seconds.",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _read_pairs(path: Path) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        stripped = line.split("#", 1)[0].strip()
        if not stripped:
            continue
        parts = stripped.split()
        if len(parts) != 2:
            raise typer.BadParameter(f"line {lineno}: expected 'NVR ARCH', got {line!r}")
        pairs.append((parts[0], parts[1]))
    return pairs


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose/--quiet",
        help="Emit debug logging for catalog requests and store merges.",
    ),
) -> None:
    """Configure logging for every command."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def resolve(
    nvr: str = typer.Argument(..., help="Name-version-release of the build."),
    arch: str = typer.Argument(..., help="Architecture label, e.g. x86_64."),
    base_url: Optional[str] = _base_url_option(),
    mapping_path: Optional[str] = _mapping_path_option(),
    timeout: Optional[float] = _timeout_option(),
) -> None:
    """Resolve and cache the content sets of one build."""

    state = create_state(base_url=base_url, mapping_path=mapping_path, timeout=timeout)
    try:
        content_sets = state.resolver.resolve(nvr, arch)
    except (CatalogClientError, StoreError, ValueError) as exc:
        typer.echo(f"Failed to resolve {nvr} ({arch}): {exc}", err=True)
        raise typer.Exit(code=1) from exc

    _echo_json(content_sets)


@app.command("resolve-many")
def resolve_many(
    pairs_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File with one 'NVR ARCH' pair per line.",
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", min=1, help="Number of parallel catalog lookups."
    ),
    base_url: Optional[str] = _base_url_option(),
    mapping_path: Optional[str] = _mapping_path_option(),
    timeout: Optional[float] = _timeout_option(),
) -> None:
    """Resolve and cache many builds in parallel."""

    pairs = _read_pairs(pairs_file)
    state = create_state(base_url=base_url, mapping_path=mapping_path, timeout=timeout)
    results = state.resolver.resolve_many(
        pairs, max_workers=workers or state.settings.max_workers
    )

    _echo_json(
        [
            {
                "nvr": result.nvr,
                "arch": result.arch,
                "content_sets": result.content_sets,
                "error": result.error,
            }
            for result in results
        ]
    )
    failed = [result for result in results if not result.ok]
    if failed:
        typer.echo(f"{len(failed)} of {len(results)} lookups failed", err=True)
        raise typer.Exit(code=1)


@mapping_app.command("show")
def show_mapping(mapping_path: Optional[str] = _mapping_path_option()) -> None:
    """Print the whole cached mapping."""

    state = create_state(mapping_path=mapping_path)
    try:
        mapping = state.mapping_store.read()
    except StoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    _echo_json({key: mapping[key].model_dump() for key in sorted(mapping)})


@mapping_app.command("get")
def get_mapping_entry(
    nvr: str = typer.Argument(..., help="Name-version-release of the build."),
    arch: str = typer.Argument(..., help="Architecture label."),
    mapping_path: Optional[str] = _mapping_path_option(),
) -> None:
    """Print the cached entry of one build."""

    state = create_state(mapping_path=mapping_path)
    try:
        entry = state.mapping_store.get(nvr, arch)
    except StoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    if entry is None:
        typer.echo("Entry not found", err=True)
        raise typer.Exit(code=1)
    _echo_json(entry.model_dump())
