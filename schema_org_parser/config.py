"""Fetch settings for the schema.org site.

All settings can be overridden via environment variables or by passing
values directly to ``load_config``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from schema_org_parser.domain.constants import DEFAULT_BASE_URL

ENV_PREFIX = "SCHEMA_ORG_"


@dataclass
class FetchConfig:
    """Where and how term pages are fetched."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30
    user_agent: str = "schema-org-parser/0.5.0"


def load_config(**overrides) -> FetchConfig:
    """Build a FetchConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables
      3. Explicit keyword arguments (``None`` values are ignored)

    Supported env vars:
      - SCHEMA_ORG_BASE_URL
      - SCHEMA_ORG_TIMEOUT  (seconds)
      - SCHEMA_ORG_USER_AGENT
    """
    cfg = FetchConfig()

    env_base_url = os.environ.get(f"{ENV_PREFIX}BASE_URL")
    if env_base_url:
        cfg.base_url = env_base_url
    env_timeout = os.environ.get(f"{ENV_PREFIX}TIMEOUT")
    if env_timeout:
        cfg.timeout = _parse_timeout(env_timeout)
    env_user_agent = os.environ.get(f"{ENV_PREFIX}USER_AGENT")
    if env_user_agent:
        cfg.user_agent = env_user_agent

    for key, value in overrides.items():
        if not hasattr(cfg, key):
            raise TypeError(f"Unknown config field: {key}")
        if value is not None:
            setattr(cfg, key, value)

    cfg.timeout = _parse_timeout(cfg.timeout)
    cfg.base_url = cfg.base_url.rstrip("/")
    return cfg


def _parse_timeout(value: str | float) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}")
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive: {value!r}")
    return timeout
