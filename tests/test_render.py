from datetime import datetime

from rich.console import Console

from cardusage.models.usage import UsageRecord
from cardusage.render import (
    BADGE_CANCELLED_STYLE,
    BADGE_STYLE,
    badge_text,
    fee_text,
    render_details,
    render_summary,
    usage_table,
)
from cardusage.viewmodels import SummaryViewModel, UsageListViewModel

NOW = datetime(2024, 8, 9)


def usage(**overrides) -> UsageRecord:
    record = {
        "id": 1,
        "confirmType": "승인",
        "date": "2024.08.01",
        "time": "12:30",
        "fee": 4500,
        "place": "스타벅스",
    }
    record.update(overrides)
    return UsageRecord.model_validate(record)


def to_text(renderable) -> str:
    console = Console(record=True, width=80, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_cancelled_fee_is_struck_through():
    assert "strike" in str(fee_text(usage(confirmType="취소")).style)
    assert "strike" not in str(fee_text(usage()).style)


def test_cancelled_badge_has_distinct_style():
    cancelled = badge_text(usage(confirmType="취소"))
    approved = badge_text(usage())
    assert cancelled.style == BADGE_CANCELLED_STYLE
    assert approved.style == BADGE_STYLE
    assert cancelled.style != approved.style


def test_empty_list_has_no_rows():
    assert usage_table(()).row_count == 0


def test_row_per_usage():
    table = usage_table([usage(id=1), usage(id=2, place="GS25")])
    assert table.row_count == 2
    text = to_text(table)
    assert "스타벅스" in text
    assert "GS25" in text
    assert "₩4500" in text


def test_summary_screen(loop, make_card):
    card, _ = make_card({})
    vm = SummaryViewModel(card, loop)
    text = to_text(render_summary(vm, NOW))
    assert "총 사용금액" in text
    assert "Loading" in text
    assert "상세내역보기" in text


def test_details_screen_loading(loop, make_card):
    card, _ = make_card({})
    vm = UsageListViewModel(card, loop)
    vm.is_loading = True
    text = to_text(render_details(vm, NOW))
    assert "8월 이용내역 상세" in text
    assert "Loading..." in text


def test_details_screen_error_keeps_rows(loop, make_card):
    card, _ = make_card({})
    vm = UsageListViewModel(card, loop)
    vm.usages = (usage(),)
    vm.error_message = "페칭 실패"
    text = to_text(render_details(vm, NOW))
    assert "페칭 실패" in text
    assert "스타벅스" in text
