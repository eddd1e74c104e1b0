from datetime import datetime

WON = "₩"


def format_won(value: int) -> str:
    return f"{WON}{value:,}"


def current_month_name(now: datetime | None = None) -> str:
    # Month name follows the process locale (%B).
    now = now or datetime.now()
    return now.strftime("%B").upper()


def details_title(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"{now.month}월 이용내역 상세"
