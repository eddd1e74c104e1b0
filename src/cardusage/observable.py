from typing import Any, Callable

from cardusage.ui_loop import UiLoop

Subscriber = Callable[["Observable", str], Any]


class Observable:
    """Explicit state holder that notifies subscribers on field changes.

    Fields are written through ``_set`` which refuses to run off the UI thread.
    """

    def __init__(self, loop: UiLoop) -> None:
        self._loop = loop
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set(self, name: str, value: Any) -> None:
        if not self._loop.is_ui_thread():
            raise RuntimeError(f"{name} must be set on the UI thread")
        if getattr(self, name, None) == value:
            return
        setattr(self, name, value)
        for callback in list(self._subscribers):
            callback(self, name)
