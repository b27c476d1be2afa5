"""Domain layer."""

from .events import AlbumAnalyzed, AnalysisFailed, DomainEvent, TrackAnalyzed

__all__ = [
    "DomainEvent",
    "TrackAnalyzed",
    "AlbumAnalyzed",
    "AnalysisFailed",
]
