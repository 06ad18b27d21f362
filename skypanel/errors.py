"""Error taxonomy for the fetch/fallback/normalize pipeline."""

from http import HTTPStatus


class WeatherError(Exception):
    """Base class for every failure the pipeline reports."""


class RequestFailure(WeatherError):
    """The network path failed and no cached snapshot could stand in.

    ``status`` classifies the failure: a real upstream status, NOT_FOUND for
    an unusable location, GATEWAY_TIMEOUT for transport errors and
    TOO_MANY_REQUESTS when the provider answered 200 with an error page.
    """

    def __init__(self, status: HTTPStatus):
        super().__init__(status.phrase)
        self.status = status

    @property
    def status_code(self) -> int:
        return int(self.status)


class CacheMiss(WeatherError):
    """No usable snapshot exists in the cache slot."""


class ParseFailure(WeatherError):
    """Malformed JSON, date or hour label."""


class DerivationFailure(WeatherError):
    """A record lacks the sub-fields needed to derive display values."""
