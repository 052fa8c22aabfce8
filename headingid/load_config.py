"""Logic for loading and validating identifier configuration files."""

import copy
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from headingid.deep_merge import deep_merge
from headingid.slugify import check_separator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "separator": "-",
    "fallbacks": {
        "heading": "heading",
        "other": "id",
    },
    "transliterations": {},
}

CLEAN_TOKEN_RE = re.compile(r"[a-z0-9]*")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Config file {p} must contain a mapping at the top level"
                raise ValueError(msg)
            logger.debug("Merging user config from %s", p)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found. Using defaults.", p)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Raise ValueError if the configuration cannot produce clean identifiers."""
    sep = config.get("separator")
    if not isinstance(sep, str):
        msg = f"separator must be a string, got {sep!r}"
        raise ValueError(msg)
    check_separator(sep)
    if CLEAN_TOKEN_RE.fullmatch(sep):
        msg = f"separator must not be a letter or digit, got {sep!r}"
        raise ValueError(msg)

    fallbacks = config.get("fallbacks") or {}
    for kind in ("heading", "other"):
        token = fallbacks.get(kind)
        # Fallbacks may contain the separator but must not start or end with it.
        if (
            not isinstance(token, str)
            or not token
            or token[0] == sep
            or token[-1] == sep
            or not CLEAN_TOKEN_RE.fullmatch(token.replace(sep, ""))
        ):
            msg = f"fallbacks.{kind} must be a non-empty slug, got {token!r}"
            raise ValueError(msg)

    extra = config.get("transliterations") or {}
    if not isinstance(extra, dict):
        msg = f"transliterations must be a mapping, got {type(extra).__name__}"
        raise ValueError(msg)
    for char, replacement in extra.items():
        if not isinstance(char, str) or len(char) != 1 or char.isascii():
            msg = f"transliteration key must be one non-ASCII character, got {char!r}"
            raise ValueError(msg)
        if not isinstance(replacement, str) or not CLEAN_TOKEN_RE.fullmatch(
            replacement
        ):
            msg = (
                f"transliteration for {char!r} must be lowercase ASCII letters "
                f"or digits, got {replacement!r}"
            )
            raise ValueError(msg)
