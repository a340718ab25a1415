"""Doctor command for configuration and connectivity diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.markup import escape
from rich.table import Table

from recengclient.adapters.error_translator import http_error_code
from recengclient.adapters.gravity_client import GravityClient
from recengclient.cli import common
from recengclient.cli.ui_components import print_banner
from recengclient.core.config import write_user_env_vars
from recengclient.core.exceptions import GravityRecEngError, RecEngClientError

app = typer.Typer(no_args_is_help=True, help="Configuration and connectivity checks.")


def _check_ping(client: GravityClient) -> tuple[bool, str]:
    try:
        answer = client.test("doctor")
        return True, escape(answer)
    except (RecEngClientError, httpx.HTTPError) as exc:
        return False, escape(str(exc))


def _check_error_decoding(client: GravityClient) -> tuple[str, str]:
    """The engine must answer `testException` with a structured error payload."""

    try:
        client.test_exception()
    except GravityRecEngError as exc:
        if exc.status_code is not None and exc.error_code == http_error_code(exc.status_code):
            return "FAIL", f"Unstructured error body (HTTP {exc.status_code})"
        return "OK", escape(str(exc))
    except httpx.HTTPError as exc:
        return "FAIL", escape(str(exc))
    return "WARN", "testException did not raise"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show what needs fixing."""

    client = common.build_gravity_client()
    settings = client.settings

    print_banner(common.console)

    table = Table(title="Gravity RecEng Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    missing = settings.missing_fields()
    table.add_row("Endpoint", "MISSING" if "endpoint_url" in missing else "OK", settings.endpoint_url or "")
    table.add_row("Username", "MISSING" if "username" in missing else "OK", settings.username or "")
    table.add_row("Password", "MISSING" if "password" in missing else "OK", "")
    table.add_row("Timeout", "OK", f"{settings.read_timeout_millis} ms")

    failed = bool(missing)
    if missing:
        table.add_row("Ping", "SKIPPED", "Configure endpoint and credentials first")
    else:
        ok_ping, detail_ping = _check_ping(client)
        table.add_row("Ping", "OK" if ok_ping else "FAIL", detail_ping)
        failed = failed or not ok_ping
        if ok_ping:
            status, detail = _check_error_decoding(client)
            table.add_row("Error decoding", status, detail)
            failed = failed or status == "FAIL"

    common.console.print(table)

    if missing:
        common.console.print(
            "\n[yellow]Note:[/yellow] run `recengclient doctor configure` or set GRAVITY_* environment variables."
        )
    if failed:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive setup; values are stored in the per-user `.env`."""

    endpoint_url = typer.prompt("Endpoint URL").strip()
    username = typer.prompt("Username").strip()
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()
    timeout = typer.prompt("Read timeout (ms)", default=3000, type=int)

    if not endpoint_url or not username or not password:
        raise typer.BadParameter("endpoint URL, username and password are required")

    env_path = write_user_env_vars(
        {
            "GRAVITY_ENDPOINT_URL": endpoint_url.rstrip("/"),
            "GRAVITY_USERNAME": username,
            "GRAVITY_PASSWORD": password,
            "GRAVITY_READ_TIMEOUT_MILLIS": str(timeout),
        }
    )

    common.console.print(f"[green]Saved client config to:[/green] {env_path}")
