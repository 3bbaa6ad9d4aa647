"""Exception hierarchy for ingest, storage and query failures."""


class EeDrawsError(Exception):
    """Base exception for all ee-draws failures."""


class ConfigError(EeDrawsError):
    """Raised for invalid settings files or environment overrides."""


class UpstreamFetchError(EeDrawsError):
    """Raised when the IRCC feed cannot be retrieved."""


class InvalidUpstreamFormatError(EeDrawsError):
    """Raised when the feed payload has no `rounds` list. Aborts the ingest run."""


class SnapshotStoreError(EeDrawsError):
    """Raised when a persisted snapshot cannot be read or written."""


class MissingSnapshotError(EeDrawsError):
    """Raised when no snapshot has ever been saved (never fetched, not empty)."""


class InvalidQueryInputError(EeDrawsError):
    """Raised for malformed query parameters, e.g. a non-integer round number."""


class NotFoundError(EeDrawsError):
    """Raised when a lookup or latest query matches no draw."""


class NoDataError(EeDrawsError):
    """Raised when statistics are requested over an empty selection."""
