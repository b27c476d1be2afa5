"""Publish analysis events to the ``replay_gain.events`` logger."""

from __future__ import annotations

import logging

from replay_gain.domain.events import AnalysisFailed, DomainEvent

LOGGER = logging.getLogger("replay_gain.events")


class LoggingEventPublisher:
    """Log each analysis event as one structured record.

    Failures are logged at WARNING, completed analyses at INFO. Gain and peak
    values from the payload are copied to top-level record attributes so log
    formatters can pick them up without unpacking the summary.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or LOGGER

    def publish(self, event: DomainEvent) -> None:
        level = logging.WARNING if isinstance(event, AnalysisFailed) else logging.INFO
        self._logger.log(
            level,
            "replaygain_%s",
            type(event).__name__,
            extra={
                "event_name": type(event).__name__,
                "correlation_id": event.correlation_id,
                "gain_db": event.payload_summary.get("gain_db"),
                "peak": event.payload_summary.get("peak"),
                "payload_summary": event.payload_summary,
                "occurred_at": event.occurred_at.isoformat(),
            },
        )
