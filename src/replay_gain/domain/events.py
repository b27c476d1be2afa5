"""Domain event contracts for loudness analysis workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base domain event emitted by application services."""

    correlation_id: str
    payload_summary: dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


@dataclass(frozen=True, slots=True)
class TrackAnalyzed(DomainEvent):
    """A track stream was analysed and its gain/peak computed."""


@dataclass(frozen=True, slots=True)
class AlbumAnalyzed(DomainEvent):
    """The pooled album gain/peak was computed for a set of tracks."""


@dataclass(frozen=True, slots=True)
class AnalysisFailed(DomainEvent):
    """Analysis of one input failed for a correlation id."""
