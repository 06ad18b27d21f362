"""Forecast fetcher: classified fetch with write-through to the snapshot cache."""

import logging
from collections.abc import Callable
from datetime import datetime

from skypanel.ingest.wttr_client import WttrClient
from skypanel.models.common import format_capture_date, format_capture_time, local_now
from skypanel.models.outcome import FallbackNeeded, FetchOutcome, FreshPayload
from skypanel.models.weather import RawSnapshot
from skypanel.storage.snapshot_cache import SnapshotCache

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(
        self,
        wttr_client: WttrClient,
        cache: SnapshotCache,
        clock: Callable[[], datetime] = local_now,
    ):
        self.wttr = wttr_client
        self.cache = cache
        self.clock = clock

    def fetch(self, location: str) -> FetchOutcome:
        """Fetch a fresh forecast for a location.

        A successful body is stamped with the current time and written
        through to the cache. Any failure comes back as FallbackNeeded for
        the caller to resolve against the cache.
        """
        response = self.wttr.get_forecast(location)
        if not response.ok:
            return FallbackNeeded(reason=response.status)

        now = self.clock()
        snapshot = RawSnapshot(
            raw=response.body,
            captured_time=format_capture_time(now),
            captured_date=format_capture_date(now),
        )
        try:
            self.cache.save(snapshot.raw)
        except OSError:
            logger.exception("Failed to write snapshot to %s", self.cache.path)
        return FreshPayload(snapshot=snapshot)
