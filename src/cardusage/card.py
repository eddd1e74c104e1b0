import logging
from typing import Any, Callable
from urllib.parse import urljoin, urlparse

import requests
from pydantic import ValidationError

from cardusage.card_api import CardAPI
from cardusage.models.card import CardResponse
from cardusage.models.summary import SummaryResponse
from cardusage.models.usage import parse_usages
from cardusage.settings import Settings

SERVER_RESPONSE_VALIDATION_ERROR = {"reason": "Invalid response from server"}
NO_DATA_MESSAGE = "No data"

logger = logging.getLogger("cardusage")


class NetworkError(Exception):
    pass


class InvalidURLError(ValueError):
    pass


class Card(CardAPI):
    def __init__(self, session: requests.Session | None = None, **kwargs: Any):
        super().__init__(**kwargs)
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(
        cls, settings: Settings, session: requests.Session | None = None
    ) -> "Card":
        return cls(
            session=session,
            base_url=settings.base_url,
            summary_path=settings.summary_path,
            usages_path=settings.usages_path,
        )

    def url_for(self, endpoint: str) -> str:
        url = urljoin(self.base_url, endpoint)
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logger.error(f"Invalid URL: {url!r}")
            raise InvalidURLError(f"Invalid URL: {url!r}")
        return url

    def get_request(self, endpoint: str) -> requests.Response:
        url = self.url_for(endpoint)
        try:
            return self._session.get(url=url, headers=self.headers)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise NetworkError(f"Error in network request: {e}")

    def monthly_total(self) -> CardResponse:
        res = self.get_request(self.summary_path)
        response = self._handle_response(
            res, SummaryResponse.model_validate, "Monthly total retrieved"
        )
        if (
            not response.ok
            and isinstance(response.data, dict)
            and "data" not in response.data
        ):
            return CardResponse(
                status="error", message=NO_DATA_MESSAGE, data=response.data
            )
        return response

    def usages(self) -> CardResponse:
        res = self.get_request(self.usages_path)
        return self._handle_response(res, parse_usages, "Usages retrieved")

    def close(self) -> None:
        self._session.close()

    def _handle_response(
        self,
        res: requests.Response,
        parse: Callable[[Any], Any],
        success_message: str,
    ) -> CardResponse:
        if not res.ok:
            logger.error(f"Error from server: {res.text}")
            return CardResponse(
                status="error", message="Request failed", data=res.text
            )

        if not res.content:
            logger.error("Empty response body")
            return CardResponse(status="error", message=NO_DATA_MESSAGE)

        try:
            data = res.json()
        except (ValueError, RecursionError) as e:
            logger.error(f"JSON parsing error: {e}")
            return CardResponse(status="error", message=str(e), data=res.text)
        logger.debug(f"response : {data}")

        try:
            response_data = parse(data)
        except ValidationError as e:
            logger.error(f"Validation error: {e.errors()}")

            errors = e.errors(include_url=False, include_input=False)
            errors.insert(0, SERVER_RESPONSE_VALIDATION_ERROR)
            return CardResponse(status="error", message=errors, data=data)

        return CardResponse(
            status="success",
            message=success_message,
            data=response_data,
        )
