"""Helpers shared by the CLI commands."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from recengclient.adapters.gravity_client import GravityClient
from recengclient.core.config import ClientSettings
from recengclient.core.exceptions import RecEngClientError

console = Console()


def build_gravity_client() -> GravityClient:
    """Client configured from the environment / `.env` files."""

    return GravityClient(ClientSettings())


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print library and transport errors in red and exit with status 1."""

    try:
        yield
    except RecEngClientError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        console.print(f"[red]Connection error:[/red] {exc.__class__.__name__}: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
