"""Configuration loading for spdx-tagvalue.

A configuration source is one of: nothing (defaults), an already parsed
mapping, a ``.toml`` / ``.json`` file, or the text of such a file passed
inline (for example through ``spdx-tagvalue -c``).

Inline text is JSON only when it is a JSON object; everything else,
including TOML that opens with a ``[parse]`` table header, is read as TOML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .schema import TagValueConfig

logger = logging.getLogger("spdx_tagvalue.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]

JSON_SUFFIXES = {".json"}
TOML_SUFFIXES = {".toml", ".tml"}


def _parse_toml(text: str) -> Dict[str, Any]:
    """Parse TOML text with tomllib, or tomli before Python 3.11."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ImportError:  # pragma: no cover - Python <3.11 path
        try:
            import tomli as tomllib  # type: ignore[import-not-found, no-redef]
        except ImportError as exc:
            raise RuntimeError(
                "TOML configuration requires Python 3.11+ (tomllib) or the "
                "`tomli` package installed"
            ) from exc
    return tomllib.loads(text)


def _looks_like_json(text: str) -> bool:
    return text.lstrip().startswith("{")


def _read_source(source: Union[str, Path]) -> Tuple[str, bool, str]:
    """Return the configuration text, whether it is JSON, and its origin."""
    path = Path(source)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Inline text can be too long or contain characters no path allows.
        is_file = False

    if not is_file:
        text = str(source)
        return text, _looks_like_json(text), "inline text"

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        is_json = True
    elif suffix in TOML_SUFFIXES:
        is_json = False
    else:
        is_json = _looks_like_json(text)
    return text, is_json, str(path)


def load_config(source: ConfigSource) -> TagValueConfig:
    """Build a TagValueConfig from ``source``.

    Args:
        source: None for defaults, a mapping, a path to a ``.toml`` or
            ``.json`` file, or inline TOML/JSON text.

    Returns:
        TagValueConfig instance.

    Raises:
        ValueError: If the text cannot be decoded or does not hold a mapping.
        TypeError: If ``source`` has an unsupported type.
    """
    if source is None:
        return TagValueConfig.default()
    if isinstance(source, dict):
        return TagValueConfig.from_dict(source)
    if not isinstance(source, (str, Path)):
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    text, is_json, origin = _read_source(source)
    logger.info("Loading %s configuration from %s", "JSON" if is_json else "TOML", origin)
    data = json.loads(text) if is_json else _parse_toml(text)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration from {origin} must be a mapping")
    return TagValueConfig.from_dict(data)


__all__ = ["load_config", "ConfigSource"]
