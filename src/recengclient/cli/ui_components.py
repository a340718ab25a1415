"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets several commands reuse the same tables and panels.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from recengclient.core.domain.models import ItemRecommendation, Scenario


def print_banner(console: Console) -> None:
    title = Text("Gravity RecEng client", style="bold cyan")
    subtitle = Text("Items • Users • Events • Recommendations", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_scenarios_table(scenarios: Sequence[Scenario]) -> Table:
    table = Table(title="Scenarios")
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")
    for scenario in scenarios:
        table.add_row(scenario.scenario_id, scenario.name or "", scenario.description or "")
    return table


def build_recommendation_table(recommendation: ItemRecommendation) -> Table:
    """One row per recommended item; titles appear when item details came back."""

    titles: dict[str, str] = {}
    for item in recommendation.items or []:
        if item.title:
            titles[item.item_id] = item.title

    caption = None
    if recommendation.recommendation_id:
        caption = f"recommendationId: {recommendation.recommendation_id}"

    table = Table(title="Recommended items", caption=caption)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Score", style="green", justify="right")
    table.add_column("Title", style="white")

    predictions = recommendation.prediction_values or []
    for rank, item_id in enumerate(recommendation.item_ids, start=1):
        score = f"{predictions[rank - 1]:.4f}" if rank <= len(predictions) else ""
        table.add_row(str(rank), item_id, score, titles.get(item_id, ""))
    return table
