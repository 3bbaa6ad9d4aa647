"""Runtime settings for ingest and snapshot storage."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: pip install -e ."
    ) from e
from pydantic import BaseModel, Field, ValidationError

from ee_draws.connectors.ircc.constants import IRCC_ROUNDS_URL
from ee_draws.errors import ConfigError

ENV_SOURCE_URL = "EE_DRAWS_SOURCE_URL"
ENV_SNAPSHOT_PATH = "EE_DRAWS_SNAPSHOT_PATH"
ENV_TIMEOUT = "EE_DRAWS_TIMEOUT"


class Settings(BaseModel):
    """Where to fetch the feed from and where the snapshot lives."""

    source_url: str = IRCC_ROUNDS_URL
    snapshot_path: Path = Path("database/draws.json")
    timeout: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from YAML. Supports nested (ingest/store) or flat structure."""
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        ingest = data.get("ingest", {}) or {}
        store = data.get("store", {}) or {}

        flat: dict = {}
        for key, nested in (("source_url", ingest), ("timeout", ingest), ("snapshot_path", store)):
            value = nested.get(key, data.get(key))
            if value is not None:
                flat[key] = value
        return cls._validate(flat)

    @classmethod
    def load(cls, path: Optional[str | Path] = None) -> "Settings":
        """Settings file (if given) with EE_DRAWS_* environment variables on top."""
        base = cls.from_yaml(path) if path else cls()
        overrides: dict = {}
        if os.environ.get(ENV_SOURCE_URL):
            overrides["source_url"] = os.environ[ENV_SOURCE_URL]
        if os.environ.get(ENV_SNAPSHOT_PATH):
            overrides["snapshot_path"] = os.environ[ENV_SNAPSHOT_PATH]
        if os.environ.get(ENV_TIMEOUT):
            overrides["timeout"] = os.environ[ENV_TIMEOUT]
        if not overrides:
            return base
        return cls._validate({**base.model_dump(), **overrides})

    @classmethod
    def _validate(cls, data: dict) -> "Settings":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}") from e
