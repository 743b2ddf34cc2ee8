"""
Configuration model and YAML I/O for yt-takeout-ingest.

ExtractorConfig holds the few values the host application injects into an
extractor: which service the imported channels belong to, the channel URL
prefix for JSON-derived records, and the token assumed when a caller
declares no content type.

Key functions:
- load_config(path) -> ExtractorConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from yt_takeout_ingest.detect import CONTENT_TYPES, DEFAULT_CONTENT_TYPE
from yt_takeout_ingest.exceptions import ConfigValidationError
from yt_takeout_ingest.models import BASE_CHANNEL_URL

logger = logging.getLogger(__name__)


class ExtractorConfig(BaseModel):
    """Settings for a TakeoutSubscriptionExtractor."""

    service_id: int = Field(
        0, ge=0, description="Id of the service imported channels belong to"
    )
    base_channel_url: str = Field(
        BASE_CHANNEL_URL, description="Prefix for channel URLs built from JSON ids"
    )
    default_content_type: str = Field(
        DEFAULT_CONTENT_TYPE,
        description="Token assumed when the caller declares no content type",
    )

    @field_validator("base_channel_url")
    @classmethod
    def _check_trailing_slash(cls, value: str) -> str:
        if not value.endswith("/"):
            raise ValueError(
                f"base_channel_url must end with '/', got {value!r}"
            )
        return value

    @field_validator("default_content_type")
    @classmethod
    def _check_known_token(cls, value: str) -> str:
        if value not in CONTENT_TYPES:
            raise ValueError(
                f"Unknown content type {value!r}. "
                f"Supported: {sorted(CONTENT_TYPES)}"
            )
        return value


def load_config(path: str | Path) -> ExtractorConfig:
    """Load and validate an extractor config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ExtractorConfig.model_validate(raw)


def save_config(config: ExtractorConfig, path: str | Path) -> None:
    """Serialize an ExtractorConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# yt-takeout-ingest configuration\n\n")
        yaml.dump(data, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
