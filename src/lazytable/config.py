"""Configuration loading.

A :class:`~lazytable.models.TableConfig` can come from three places. From
lowest to highest precedence:

1. a YAML file (or :func:`~lazytable.models.default_config` without one)
2. the ``LAZYTABLE_WIDTH`` and ``LAZYTABLE_PADDING`` environment variables
3. explicit arguments

Example config file::

    width: 100
    padding: 1
    border: "|-+"
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError, ValidationError
from .models import Border, TableConfig, default_config

logger = logging.getLogger(__name__)

WIDTH_ENV_VAR = "LAZYTABLE_WIDTH"
"""Environment variable overriding the total table width."""

PADDING_ENV_VAR = "LAZYTABLE_PADDING"
"""Environment variable overriding the cell padding."""


def config_from_dict(data: dict[str, Any]) -> TableConfig:
    """
    Build a config from a mapping with ``width``, ``padding`` and ``border`` keys.

    Raises:
        ValidationError: If a key is unknown or a value is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("config", data, "Must be a mapping of options")
    return TableConfig.from_dict(data)


def load_config(path: str | Path) -> TableConfig:
    """
    Load a config from a YAML file.

    An empty file yields the default config.

    Raises:
        ConfigError: If the file cannot be read or is not valid YAML
        ValidationError: If the file holds invalid options
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigError(str(path), e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"Invalid YAML: {e}") from e

    if data is None:
        return default_config()
    if not isinstance(data, dict):
        raise ConfigError(str(path), "Top level must be a mapping")
    logger.debug("Loaded config from %s: %s", path, data)
    return config_from_dict(data)


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(name, raw, "Must be an integer") from None


def resolve_config(
    width: int | None = None,
    padding: int | None = None,
    border: str | Border | None = None,
    path: str | Path | None = None,
) -> TableConfig:
    """Resolve a config from an optional file, the environment and explicit arguments.

    Resolution order per option: explicit arg → env var → config file → default.

    Args:
        width: Explicit total width, or ``None``
        padding: Explicit padding, or ``None``
        border: Explicit border glyphs (e.g. ``"|-+"``), or ``None``
        path: YAML config file, or ``None`` to start from the defaults

    Returns:
        Validated config.
    """
    config = load_config(path) if path is not None else default_config()

    overrides: dict[str, Any] = {}
    env_width = _env_int(WIDTH_ENV_VAR)
    if env_width is not None:
        overrides["width"] = env_width
    env_padding = _env_int(PADDING_ENV_VAR)
    if env_padding is not None:
        overrides["padding"] = env_padding

    if width is not None:
        overrides["width"] = width
    if padding is not None:
        overrides["padding"] = padding
    if border is not None:
        overrides["border"] = Border.parse(border)

    if overrides:
        logger.debug("Config overrides: %s", overrides)
        config = replace(config, **overrides)
    return config
