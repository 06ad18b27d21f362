"""wttr.in forecast client: one request, classified outcome."""

import logging
from dataclasses import dataclass
from http import HTTPStatus
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

WTTR_BASE_URL = "https://wttr.in"
DEFAULT_USER_AGENT = "skypanel/0.1.0"
JSON_FORMAT = "j1"
# wttr.in answers 200 with this text when it cannot resolve a location
UNKNOWN_LOCATION_SENTINEL = "Unknown location; please try"


class InvalidLocationError(ValueError):
    """The location cannot be turned into a request URL."""


@dataclass(frozen=True)
class WttrResponse:
    """Body of a successful response, or the status classifying a failure."""

    status: HTTPStatus
    body: str | None = None

    @property
    def ok(self) -> bool:
        return self.body is not None


class WttrClient:
    def __init__(
        self,
        base_url: str = WTTR_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def build_url(self, location: str) -> httpx.URL:
        location = location.strip() if isinstance(location, str) else ""
        if not location or any(ord(ch) < 32 for ch in location):
            raise InvalidLocationError(f"Unusable location: {location!r}")
        path = quote(location, safe="~@,+")
        try:
            return httpx.URL(f"{self.base_url}/{path}", params={"format": JSON_FORMAT})
        except httpx.InvalidURL as e:
            raise InvalidLocationError(f"Unusable location: {location!r}") from e

    def get_forecast(self, location: str) -> WttrResponse:
        """Fetch the j1 forecast for a location. Never raises for HTTP trouble.

        No retries: the caller falls back to its cached snapshot instead.
        """
        try:
            url = self.build_url(location)
        except InvalidLocationError:
            logger.warning("Cannot build forecast URL for location %r", location)
            return WttrResponse(HTTPStatus.NOT_FOUND)

        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.warning("wttr.in request error for %s: %s", url, e)
            return WttrResponse(HTTPStatus.GATEWAY_TIMEOUT)

        if resp.status_code != HTTPStatus.OK:
            logger.warning("wttr.in %s returned %d", url, resp.status_code)
            return WttrResponse(_classify_status(resp.status_code))

        body = resp.text
        if UNKNOWN_LOCATION_SENTINEL in body:
            logger.warning("wttr.in could not resolve location %r", location)
            return WttrResponse(HTTPStatus.TOO_MANY_REQUESTS)

        return WttrResponse(HTTPStatus.OK, body)


def _classify_status(status_code: int) -> HTTPStatus:
    try:
        return HTTPStatus(status_code)
    except ValueError:
        # Non-standard codes still mean the upstream failed us
        return HTTPStatus.BAD_GATEWAY
