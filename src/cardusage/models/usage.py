from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter

CANCELLED = "취소"


class UsageRecord(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    confirmType: str
    date: str
    time: str
    fee: int
    place: str

    @property
    def is_cancelled(self) -> bool:
        return self.confirmType == CANCELLED


_usage_list = TypeAdapter(list[UsageRecord])


def parse_usages(payload: Any) -> list[UsageRecord]:
    """Decode a JSON value as a list of usage records.

    Any element that fails validation fails the whole list.
    """
    return _usage_list.validate_python(payload)
