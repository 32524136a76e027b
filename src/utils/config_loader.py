"""
Configuration loader for the catalog browser
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


class ApiConfig(BaseModel):
    """Remote catalog source"""

    source: Literal["remote", "local"] = "remote"
    base_url: str = "https://bymykel.github.io/CSGO-API/api"
    language: str = "en"
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    local_dir: str = "data/catalogs"


class AudioConfig(BaseModel):
    """Ambient background music"""

    track: str = "/static/csgo_theme.mp3"
    volume: float = Field(default=0.5, ge=0.0, le=1.0)
    loop: bool = True


class CatalogConfig(BaseModel):
    """Complete catalog browser configuration"""

    api: ApiConfig = Field(default_factory=ApiConfig)
    audio: AudioConfig = Field(default_factory=AudioConfig)


def _apply_env_overrides(data: dict) -> dict:
    api = dict(data.get("api") or {})
    if os.getenv("CATALOG_API_BASE_URL"):
        api["base_url"] = os.environ["CATALOG_API_BASE_URL"]
    if os.getenv("CATALOG_API_LANGUAGE"):
        api["language"] = os.environ["CATALOG_API_LANGUAGE"]
    if os.getenv("CATALOG_SOURCE"):
        api["source"] = os.environ["CATALOG_SOURCE"].lower()
    return {**data, "api": api}


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate the catalog configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = CatalogConfig(**_apply_env_overrides(config_data))
        logger.info("Successfully loaded catalog config from %s", config_path)
        return config
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise
