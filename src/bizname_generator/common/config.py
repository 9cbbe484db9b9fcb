"""Runtime settings for the Gemini completion endpoint.

Values come from environment variables and may be overridden by a YAML file
named by `path` or the BIZNAME_CONFIG variable.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL_ID = "gemini-1.5-flash"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model_id: str = DEFAULT_MODEL_ID
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model_id}:generateContent"


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(cfg).__name__}")
    return cfg


def load_settings(path: str | None = None) -> Settings:
    """
    Build settings from the environment, then apply an optional YAML overlay.

    Args:
        path: YAML config path; defaults to $BIZNAME_CONFIG when set.
    """
    settings = Settings(
        api_key=os.getenv("GEMINI_API_KEY", ""),
        model_id=os.getenv("GEMINI_MODEL_ID", DEFAULT_MODEL_ID),
        base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        timeout=float(os.getenv("GEMINI_TIMEOUT", str(DEFAULT_TIMEOUT))),
    )

    path = path or os.getenv("BIZNAME_CONFIG")
    if not path:
        return settings
    if not Path(path).exists():
        raise FileNotFoundError(f"Config file not found at {path}")

    cfg = load_cfg(path)
    overrides: dict[str, Any] = {}
    for key in ("api_key", "model_id", "base_url"):
        if cfg.get(key) is not None:
            overrides[key] = str(cfg[key])
    if cfg.get("timeout") is not None:
        overrides["timeout"] = float(cfg["timeout"])
    return replace(settings, **overrides)
