"""Modification times of the sources an output was generated from."""

from __future__ import annotations

import logging
from pathlib import Path
import time

logger = logging.getLogger(__name__)


class TimestampRegistry:
    """Remembers source mtimes so a caller can tell whether its output is stale."""

    def __init__(self) -> None:
        self._timestamps: dict[Path, float] = {}

    def __len__(self) -> int:
        return len(self._timestamps)

    def __contains__(self, path: str | Path) -> bool:
        return Path(path) in self._timestamps

    def capture(self, path: str | Path | None) -> float | None:
        if not path:
            return None
        resolved = Path(path)
        try:
            mtime = resolved.stat().st_mtime
        except OSError as exc:
            logger.debug("Not tracking %s: %s", resolved, exc)
            return None
        self._timestamps[resolved] = mtime
        return mtime

    def is_up_to_date(self) -> bool:
        if not self._timestamps:
            return False
        for path, captured in self._timestamps.items():
            try:
                current = path.stat().st_mtime
            except OSError as exc:
                logger.debug("%s no longer readable since it was captured: %s", path, exc)
                return False
            if current != captured:
                logger.debug("%s modified since it was captured", path)
                return False
        return True

    def latest_modification(self) -> float:
        if not self._timestamps:
            return time.time()
        return max(self._timestamps.values())
