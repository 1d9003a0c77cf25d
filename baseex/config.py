"""TOML configuration for converter defaults and extra charsets.

Example ``baseex.toml``::

    [converters.base64]
    version = "urlsafe"
    padding = false

    [converters.base32.charsets.hex_upper]
    symbols = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
    pad_symbols = ["="]
"""

from __future__ import annotations

import logging
import os
from typing import Any, cast

from pydantic import ValidationError

try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

from baseex.components.charset import Charset

logger = logging.getLogger(__name__)

CONFIG_ENV = "BASEEX_CONFIG"
CONFIG_FILENAME = "baseex.toml"


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV)
    if env_config:
        return env_config
    if config_path:
        return config_path
    # Look for baseex.toml in current directory or home
    candidates = [
        CONFIG_FILENAME,
        os.path.expanduser(f"~/{CONFIG_FILENAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(config_path: str | None = None) -> dict[str, Any]:
    """Load the configuration file.

    Args:
        config_path: Explicit path. BASEEX_CONFIG takes precedence.

    Returns:
        Parsed TOML document, or an empty dict if no file was found

    Raises:
        FileNotFoundError: If an explicit or environment path does not exist
        ValueError: If the file is not valid TOML
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        return {}
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. Set {CONFIG_ENV} or create {CONFIG_FILENAME}"
        )

    logger.debug("Loading configuration from %s", resolved_path)
    with open(resolved_path, "rb") as f:
        try:
            return cast(dict[str, Any], tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {resolved_path}: {e}") from e


def converter_config(
    name: str, config_path: str | None = None
) -> tuple[dict[str, Any], list[Charset]]:
    """Return default options and extra charsets configured for a converter.

    Args:
        name: Converter name, e.g. 'base64'
        config_path: Explicit configuration file

    Returns:
        Tuple of (option overrides, extra charsets)

    Raises:
        ValueError: If the converter section or a charset is malformed
    """
    config = load_config(config_path)
    section = config.get("converters", {}).get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[converters.{name}] must be a table")

    options = dict(section)
    charsets = []
    for charset_name, entry in options.pop("charsets", {}).items():
        try:
            charsets.append(Charset(name=charset_name, **entry))
        except (TypeError, ValidationError) as e:
            raise ValueError(
                f"Invalid charset '{charset_name}' for converter '{name}'"
            ) from e

    return options, charsets
