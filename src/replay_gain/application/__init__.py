"""Application layer."""

from .analysis_service import AlbumReport, AnalyzeLoudness
from .event_publisher import EventPublisher, NullEventPublisher

__all__ = ["AlbumReport", "AnalyzeLoudness", "EventPublisher", "NullEventPublisher"]
