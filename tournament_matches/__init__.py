"""Tournament bracket matches: score ingestion, validation and JSON codec."""

__version__ = "1.0.0"
