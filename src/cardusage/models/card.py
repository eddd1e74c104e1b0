from typing import Any


class CardResponse:
    def __init__(self, status: str, message: str | list[Any], data: Any = "") -> None:
        self.status = status
        self.message = message
        self.data = data

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def __repr__(self) -> str:
        return f"<CardResponse status={self.status} message={self.message}>"
