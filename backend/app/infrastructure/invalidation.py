"""Path Invalidation — marks cached dashboard views stale after a write.

Invariants:
    - invalidate() never raises; a write that committed stays committed
"""

import logging

logger = logging.getLogger(__name__)


class LoggingInvalidator:
    """Default PathInvalidator: logs each stale path for downstream renderers."""

    def invalidate(self, path: str) -> None:
        logger.info(f"Invalidated cached view {path}", extra={"path": path})
