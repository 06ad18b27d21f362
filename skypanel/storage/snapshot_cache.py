"""Single-slot file cache for the last successfully fetched payload."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from skypanel.errors import CacheMiss
from skypanel.models.common import format_capture_date, format_capture_time
from skypanel.models.weather import RawSnapshot

logger = logging.getLogger(__name__)

DEFAULT_CACHE_FILE = "data/last_weather.json"

# mkstemp creates 0600 files; saved snapshots follow the process umask instead
_UMASK = os.umask(0)
os.umask(_UMASK)
SNAPSHOT_MODE = 0o666 & ~_UMASK


class SnapshotCache:
    """Holds one raw wttr.in body verbatim; its mtime is the capture time."""

    def __init__(self, path: str | Path = DEFAULT_CACHE_FILE):
        self.path = Path(path)

    def save(self, raw: str) -> None:
        """Atomically replace the stored snapshot.

        The body goes to a temp file in the same directory and is renamed
        over the slot, so a concurrent load sees either the old or the new
        snapshot. Raises OSError on I/O failure.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(raw)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, SNAPSHOT_MODE)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %d byte snapshot to %s", len(raw.encode("utf-8")), self.path)

    def load(self) -> RawSnapshot:
        """Return the stored snapshot.

        Raises CacheMiss if the slot is absent, empty, unreadable or not
        valid UTF-8.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
            modified = self.path.stat().st_mtime
        except FileNotFoundError as e:
            raise CacheMiss(f"No saved snapshot at {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CacheMiss(f"Cannot read saved snapshot at {self.path}: {e}") from e

        if not raw:
            raise CacheMiss(f"Saved snapshot at {self.path} is empty")

        captured = datetime.fromtimestamp(modified).astimezone()
        return RawSnapshot(
            raw=raw,
            captured_time=format_capture_time(captured),
            captured_date=format_capture_date(captured),
        )

    # Two-method cache interface
    put = save
    get = load
