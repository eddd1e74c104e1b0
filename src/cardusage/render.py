from datetime import datetime

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from cardusage.formatting import WON, current_month_name, details_title
from cardusage.models.usage import UsageRecord
from cardusage.viewmodels import SummaryViewModel, UsageListViewModel

TOTAL_CAPTION = "총 사용금액"
DETAILS_LINK = "상세내역보기"

BADGE_STYLE = "white on black"
BADGE_CANCELLED_STYLE = "white on red"
FEE_STYLE = "bold"
FEE_CANCELLED_STYLE = "bold strike"


def render_summary(vm: SummaryViewModel, now: datetime | None = None) -> Group:
    return Group(
        Text(current_month_name(now), style="bold", justify="center"),
        Text(TOTAL_CAPTION, style="grey50", justify="center"),
        Text(vm.fee, justify="center"),
        Text(f" {DETAILS_LINK} ", style="bold white on black", justify="center"),
    )


def badge_text(usage: UsageRecord) -> Text:
    style = BADGE_CANCELLED_STYLE if usage.is_cancelled else BADGE_STYLE
    return Text(f" {usage.confirmType} ", style=style)


def fee_text(usage: UsageRecord) -> Text:
    # Raw integer, no grouping, as on the original details rows.
    style = FEE_CANCELLED_STYLE if usage.is_cancelled else FEE_STYLE
    return Text(f"{WON}{usage.fee}", style=style)


def usage_table(usages: tuple[UsageRecord, ...] | list[UsageRecord]) -> Table:
    table = Table.grid(padding=(0, 1), expand=True)
    table.add_column(ratio=1)
    table.add_column(justify="right", no_wrap=True)
    for usage in usages:
        when = Text.assemble(
            (usage.date, "grey50"), " ", (usage.time, "grey50"), " ", badge_text(usage)
        )
        table.add_row(
            Group(Text(usage.place, style="bold"), when),
            fee_text(usage),
        )
    return table


def render_details(vm: UsageListViewModel, now: datetime | None = None) -> Group:
    parts: list[RenderableType] = [Text(details_title(now), justify="center")]
    if vm.is_loading:
        parts.append(Padding(Spinner("dots", text="Loading..."), (1, 0)))
    else:
        if vm.error_message:
            parts.append(Text(vm.error_message, style="red"))
        parts.append(usage_table(vm.usages))
    return Group(*parts)
