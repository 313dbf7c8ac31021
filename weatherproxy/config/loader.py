"""YAML config loader with environment credential fallback and dotted lookup."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherproxy.config.defaults import API_KEY_ENV_VARS
from weatherproxy.config.schema import ProxyConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> ProxyConfig:
    """Load and validate config from a YAML file.

    A missing path or file yields defaults. If the YAML leaves
    `provider.api_key` blank it is taken from the environment.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
            if not isinstance(raw, dict):
                raise ValueError(f"{path} must hold a YAML mapping, got {type(raw).__name__}")
        else:
            logger.warning("Config file %s not found, using defaults", path)

    provider = raw.setdefault("provider", {}) or {}
    raw["provider"] = provider
    if not provider.get("api_key"):
        key = api_key_from_env(os.environ if environ is None else environ)
        if key:
            provider["api_key"] = key

    return ProxyConfig(**raw)


def api_key_from_env(environ: Mapping[str, str]) -> str:
    for name in API_KEY_ENV_VARS:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return ""


def get_config_value(config: ProxyConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'provider.timeout'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
