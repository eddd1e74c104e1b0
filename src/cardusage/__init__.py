from cardusage.card import Card, InvalidURLError, NetworkError
from cardusage.models.card import CardResponse
from cardusage.models.summary import SummaryResponse
from cardusage.models.usage import UsageRecord, parse_usages

__all__ = [
    "Card",
    "CardResponse",
    "InvalidURLError",
    "NetworkError",
    "SummaryResponse",
    "UsageRecord",
    "parse_usages",
]
