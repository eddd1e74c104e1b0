import locale
import logging
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.live import Live

from cardusage.card import Card
from cardusage.render import render_details, render_summary
from cardusage.settings import Settings, get_settings
from cardusage.ui_loop import UiLoop
from cardusage.viewmodels import LOADING, SummaryViewModel, UsageListViewModel

app = typer.Typer(
    name="cardusage",
    help="Show this month's card usage total and itemized transactions.",
)
console = Console()
logger = logging.getLogger("cardusage")


def show_summary(settings: Settings) -> SummaryViewModel:
    card = Card.from_settings(settings)
    with UiLoop() as loop:
        vm = SummaryViewModel(card, loop)
        with Live(render_summary(vm), console=console) as live:
            vm.subscribe(lambda source, field: live.update(render_summary(vm)))
            vm.fetch()
            loop.run_until(
                lambda: vm.fee != LOADING, timeout=settings.fetch_wait_seconds
            )
    card.close()
    return vm


def show_details(settings: Settings) -> UsageListViewModel:
    card = Card.from_settings(settings)
    with UiLoop() as loop:
        vm = UsageListViewModel(card, loop)
        with Live(render_details(vm), console=console) as live:
            vm.subscribe(lambda source, field: live.update(render_details(vm)))
            vm.fetch()
            loop.run_until(
                lambda: not vm.is_loading, timeout=settings.fetch_wait_seconds
            )
    card.close()
    return vm


def use_system_locale() -> None:
    # Month names follow LANG / LC_TIME rather than the C locale.
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Unable to apply system locale: {e}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    base_url: Annotated[
        Optional[str], typer.Option(help="API base URL (CARDUSAGE_BASE_URL)")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option(help="Log level (CARDUSAGE_LOG_LEVEL)")
    ] = None,
) -> None:
    updates = {}
    if base_url is not None:
        updates["base_url"] = base_url
    if log_level is not None:
        updates["log_level"] = log_level
    try:
        settings = Settings(**updates) if updates else get_settings()
    except ValidationError as e:
        for error in e.errors(include_url=False, include_input=False):
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]Invalid setting {field}:[/red] {error['msg']}")
        raise typer.Exit(2)

    logging.basicConfig(level=settings.log_level)
    use_system_locale()
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        show_summary(settings)


@app.command()
def summary(ctx: typer.Context) -> None:
    """Total card usage for the current month."""
    show_summary(ctx.obj)


@app.command()
def details(ctx: typer.Context) -> None:
    """Itemized card usages for the current month."""
    show_details(ctx.obj)


if __name__ == "__main__":
    app()
