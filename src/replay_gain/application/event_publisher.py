"""Where analysis services send their events."""

from __future__ import annotations

from typing import Protocol

from replay_gain.domain.events import DomainEvent


class EventPublisher(Protocol):
    """Receives track, album and failure events from :class:`AnalyzeLoudness`."""

    def publish(self, event: DomainEvent) -> None: ...


class NullEventPublisher:
    """Discards events; the default for library callers that do not log."""

    def publish(self, event: DomainEvent) -> None:
        del event
