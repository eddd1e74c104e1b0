import logging
from concurrent.futures import Future

from cardusage.card import Card, InvalidURLError, NetworkError
from cardusage.formatting import format_won
from cardusage.models.card import CardResponse
from cardusage.models.usage import UsageRecord
from cardusage.observable import Observable
from cardusage.ui_loop import UiLoop

LOADING = "Loading"
INVALID_URL_MESSAGE = "잘못된 URL"
FETCH_FAILED_MESSAGE = "페칭 실패"
INVALID_RESPONSE_MESSAGE = "Invalid response from server"

logger = logging.getLogger("cardusage")


class SummaryViewModel(Observable):
    def __init__(self, card: Card, loop: UiLoop) -> None:
        super().__init__(loop)
        self._card = card
        self.fee = LOADING

    def fetch(self) -> None:
        try:
            self._card.url_for(self._card.summary_path)
        except InvalidURLError:
            self._set("fee", INVALID_URL_MESSAGE)
            return
        self._loop.run_in_background(self._card.monthly_total, self._on_total)

    def _on_total(self, future: "Future[CardResponse]") -> None:
        try:
            response = future.result()
        except NetworkError as e:
            self._set("fee", f"Error: {e}")
            return
        except Exception as e:
            logger.exception("Monthly total fetch failed")
            self._set("fee", f"Error: {e!r}")
            return

        if response.ok:
            self._set("fee", format_won(response.data.data))
        elif isinstance(response.message, str) and response.message:
            self._set("fee", response.message)
        else:
            self._set("fee", INVALID_RESPONSE_MESSAGE)


class UsageListViewModel(Observable):
    def __init__(self, card: Card, loop: UiLoop) -> None:
        super().__init__(loop)
        self._card = card
        self.usages: tuple[UsageRecord, ...] = ()
        self.is_loading = False
        self.error_message: str | None = None

    def fetch(self) -> bool:
        if self.is_loading:
            logger.debug("Usage fetch already in flight; ignoring trigger")
            return False
        try:
            self._card.url_for(self._card.usages_path)
        except InvalidURLError:
            self._set("error_message", INVALID_URL_MESSAGE)
            return False

        self._set("is_loading", True)
        self._loop.run_in_background(self._card.usages, self._on_usages)
        return True

    def _on_usages(self, future: "Future[CardResponse]") -> None:
        try:
            response = future.result()
        except NetworkError:
            self._set("error_message", FETCH_FAILED_MESSAGE)
        except Exception:
            logger.exception("Usage list fetch failed")
            self._set("error_message", FETCH_FAILED_MESSAGE)
        else:
            if response.ok:
                self._set("usages", tuple(response.data))
                self._set("error_message", None)
            else:
                self._set("error_message", FETCH_FAILED_MESSAGE)
        finally:
            self._set("is_loading", False)
