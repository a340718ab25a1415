"""`recengclient` command line."""

from __future__ import annotations

from typing import List, Optional

import typer

from recengclient.cli import common
from recengclient.cli.doctor import app as doctor_app
from recengclient.cli.ui_components import build_recommendation_table, build_scenarios_table
from recengclient.core.logging_config import setup_logging
from recengclient.core.services.context_builder import RecommendationContextBuilder

app = typer.Typer(no_args_is_help=True, help="Talk to the Gravity recommendation engine.")
app.add_typer(doctor_app, name="doctor")


def _parse_name_values(raw: List[str]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for entry in raw:
        if "=" not in entry:
            raise typer.BadParameter(f"expected name=value, got {entry!r}", param_hint="--name-value")
        name, value = entry.split("=", 1)
        pairs.append((name.strip(), value))
    return pairs


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines."),
) -> None:
    setup_logging(log_level, json_format=json_logs)


@app.command()
def ping(name: str = typer.Argument("ping", help="Text echoed back by the engine.")) -> None:
    """Check that the engine is alive (no side effects)."""

    client = common.build_gravity_client()
    with common.handle_errors():
        answer = client.test(name)
    common.console.print(answer)


@app.command()
def scenarios() -> None:
    """List the scenarios configured on the engine."""

    client = common.build_gravity_client()
    with common.handle_errors():
        result = client.get_scenario_information()
    common.console.print(build_scenarios_table(result))


@app.command()
def recommend(
    scenario_id: str = typer.Argument(..., help="Scenario id, e.g. ITEM_PAGE."),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Number of items."),
    user_id: Optional[str] = typer.Option(None, "--user-id"),
    cookie_id: Optional[str] = typer.Option(None, "--cookie-id"),
    name_value: Optional[List[str]] = typer.Option(None, "--name-value", help="Context name=value (repeatable)."),
    result_name_value: Optional[List[str]] = typer.Option(
        None, "--result-name-value", help="Item attribute to return (repeatable)."
    ),
) -> None:
    """Request recommendations for one scenario."""

    pairs = _parse_name_values(name_value or [])
    client = common.build_gravity_client()
    with common.handle_errors():
        context = (
            RecommendationContextBuilder(scenario_id, limit)
            .add_name_value_pairs(pairs)
            .add_result_name_values(result_name_value or [])
            .build()
        )
        recommendation = client.get_item_recommendation(user_id, cookie_id, context)
    common.console.print(build_recommendation_table(recommendation))


def run() -> None:
    app()
