"""Express Entry draws: IRCC feed ingestion, normalization and query engine."""

__version__ = "0.1.0"
