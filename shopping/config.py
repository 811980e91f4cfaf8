"""
Sample configuration — the config directory and merchant-info.json.

Layout of the config directory (default ~/shopping-samples):

    <config_path>/content/merchant-info.json   merchant ID, application name, ...
    <config_path>/content/service-account.json  optional service account key
    <config_path>/content/client-secrets.json   optional OAuth client (installed app)
    <config_path>/content/stored-token.json     written by the installed-app flow
    <config_path>/content/.env                  optional env overrides (python-dotenv)

Usage:
    content_dir = resolve_config_dir("~/shopping-samples")
    config      = load_config(content_dir)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/shopping-samples"
CONTENT_SUBDIR = "content"
CONFIG_FILE = "merchant-info.json"
ENV_FILE = ".env"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class SampleConfig:
    """Contents of merchant-info.json. Immutable once loaded."""

    config_dir: Path
    merchant_id: Optional[int] = None
    application_name: str = "Content API for Shopping Samples"
    website_url: str = ""
    is_mca: bool = False


def resolve_config_dir(config_path: str | Path) -> Path:
    """Return <config_path>/content, failing if either directory is missing."""
    root = Path(config_path).expanduser()
    if not root.is_dir():
        raise ConfigurationError(f"Configuration directory '{root}' does not exist")

    content_dir = root / CONTENT_SUBDIR
    if not content_dir.is_dir():
        raise ConfigurationError(
            f"Content API configuration directory '{content_dir}' does not exist"
        )
    return content_dir


def _optional_int(raw: dict, key: str) -> Optional[int]:
    value = raw.get(key)
    if value in (None, "", 0):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from exc


def load_config(content_dir: Path) -> SampleConfig:
    """
    Read merchant-info.json (and .env, if present) from the content directory.

    A missing merchantId is allowed; ContentSample retrieves it from the API.
    """
    env_file = content_dir / ENV_FILE
    if env_file.exists():
        # Variables already set in the process environment win.
        load_dotenv(env_file, override=False)
        logger.debug("Loaded environment overrides from %s", env_file)

    path = content_dir / CONFIG_FILE
    if not path.exists():
        raise ConfigurationError(f"Configuration file '{path}' does not exist")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Configuration file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file '{path}' must contain a JSON object")

    config = SampleConfig(
        config_dir=content_dir,
        merchant_id=_optional_int(raw, "merchantId"),
        application_name=raw.get("applicationName") or SampleConfig.application_name,
        website_url=raw.get("websiteUrl", "") or "",
    )
    logger.debug("Loaded %s (merchant_id=%s)", path, config.merchant_id)
    return config
