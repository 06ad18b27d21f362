"""Weather pipeline: fetch, fall back to the snapshot cache, normalize."""

import dataclasses
import logging
from pathlib import Path

from skypanel.config.schema import AppConfig
from skypanel.errors import CacheMiss, RequestFailure
from skypanel.ingest.forecast_fetcher import ForecastFetcher
from skypanel.ingest.wttr_client import WttrClient
from skypanel.models.outcome import FallbackNeeded
from skypanel.models.weather import WeatherModel
from skypanel.normalize.normalizer import DEFAULT_ICON_DIR, normalize
from skypanel.storage.snapshot_cache import SnapshotCache

logger = logging.getLogger(__name__)


class WeatherPipeline:
    def __init__(
        self,
        fetcher: ForecastFetcher,
        cache: SnapshotCache,
        icon_dir: str | Path = DEFAULT_ICON_DIR,
    ):
        self.fetcher = fetcher
        self.cache = cache
        self.icon_dir = icon_dir

    @classmethod
    def from_config(cls, config: AppConfig) -> "WeatherPipeline":
        cache = SnapshotCache(config.paths.cache_file)
        client = WttrClient(
            base_url=config.provider.base_url,
            user_agent=config.provider.user_agent,
            timeout=config.provider.timeout_seconds,
        )
        return cls(ForecastFetcher(client, cache), cache, config.paths.icon_dir)

    def get_weather(self, location: str, hour_12: bool) -> WeatherModel:
        """Run one fetch/fallback/normalize pass.

        Makes exactly one recovery attempt: a failed fetch is answered from
        the cached snapshot. If that is missing too, RequestFailure carries
        the fetch's classification, not the cache miss. ParseFailure and
        DerivationFailure from normalization propagate unchanged.
        """
        outcome = self.fetcher.fetch(location)

        if isinstance(outcome, FallbackNeeded):
            logger.info(
                "Fetch for %r failed (%d %s), falling back to cached snapshot",
                location, outcome.reason, outcome.reason.phrase,
            )
            try:
                snapshot = self.cache.load()
            except CacheMiss as e:
                logger.warning("No cached snapshot to fall back on: %s", e)
                raise RequestFailure(outcome.reason) from e
            model = normalize(
                snapshot.raw,
                snapshot.captured_time,
                snapshot.captured_date,
                hour_12,
                self.icon_dir,
            )
            return dataclasses.replace(
                model, from_cache=True, fallback_reason=outcome.reason
            )

        snapshot = outcome.snapshot
        return normalize(
            snapshot.raw,
            snapshot.captured_time,
            snapshot.captured_date,
            hour_12,
            self.icon_dir,
        )
