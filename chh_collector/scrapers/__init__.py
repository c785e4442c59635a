"""Site-specific visitors."""
from chh_collector.scrapers.rapzilla import MusicData, RapzillaVisitor

__all__ = ["MusicData", "RapzillaVisitor"]
