"""Configuration loader that parses and validates user-provided TOML."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

from .datatypes import ColorConfig, PrinterConfig, TabulateOptions
from .errors import ConfigError

logger = logging.getLogger(__name__)


_BOOL_SPELLINGS = {"true": True, "1": True, "false": False, "0": False}


def _coerce_bool(value: Any, dotted_key: str) -> bool:
    """Accept TOML booleans, the integers 0/1, or their string spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        value = str(value)
    if isinstance(value, str) and value.strip().lower() in _BOOL_SPELLINGS:
        return _BOOL_SPELLINGS[value.strip().lower()]
    raise ConfigError(f"{dotted_key} must be true or false")


def _coerce_int(value: Any, dotted_key: str) -> int:
    """Return a non-negative int; floats are accepted only when integral."""

    if isinstance(value, bool):
        raise ConfigError(f"{dotted_key} must be an integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise ConfigError(f"{dotted_key} must be an integer")
    if value < 0:
        raise ConfigError(f"{dotted_key} must be >= 0")
    return value


def _coerce_char(value: Any, dotted_key: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigError(f"{dotted_key} must be a single character")
    return value


def _sanitize_section(raw: Any, name: str, cls):
    """
    Coerce a raw TOML table into an instance of ``cls``.

    Boolean fields accept true/false and 0/1, integer fields must be
    non-negative, and string fields must hold exactly one character.

    Raises:
        ConfigError: If the section is not a table or contains invalid keys or values.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    cls_fields = {field.name: field for field in fields(cls)}
    unknown = sorted(set(raw) - set(cls_fields))
    if unknown:
        raise ConfigError(f"Invalid keys in [{name}]: {', '.join(unknown)}")
    cleaned: Dict[str, Any] = {}
    for key, value in raw.items():
        field_type = cls_fields[key].type
        dotted_key = f"{name}.{key}"
        if field_type in (bool, "bool"):
            cleaned[key] = _coerce_bool(value, dotted_key)
        elif field_type in (int, "int"):
            cleaned[key] = _coerce_int(value, dotted_key)
        elif field_type in (str, "str"):
            cleaned[key] = _coerce_char(value, dotted_key)
        else:
            cleaned[key] = value
    return cls(**cleaned)


def load_config(path: Union[str, Path]) -> PrinterConfig:
    """
    Load and validate a printer configuration from a TOML file.

    Reads ``path`` as UTF-8 TOML (a BOM is accepted) and maps the ``[tabulate]``
    and ``[color]`` tables onto their dataclasses. Missing tables keep their
    defaults.

    Returns:
        PrinterConfig: The validated configuration.

    Raises:
        ConfigError: If the file is not UTF-8, TOML parsing fails, or any value is invalid.
    """
    with open(path, "rb") as handle:
        raw_bytes = handle.read()
    if raw_bytes.startswith(b"\xef\xbb\xbf"):
        raw_bytes = raw_bytes[3:]
    try:
        raw = tomllib.loads(raw_bytes.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError("Configuration file must be UTF-8 encoded") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML: {exc}") from exc

    unknown_sections = sorted(set(raw) - {"tabulate", "color"})
    if unknown_sections:
        logger.warning("Ignoring unknown configuration tables: %s", ", ".join(unknown_sections))

    config = PrinterConfig(
        tabulate=_sanitize_section(raw.get("tabulate", {}), "tabulate", TabulateOptions),
        color=_sanitize_section(raw.get("color", {}), "color", ColorConfig),
    )
    logger.debug("Loaded printer configuration from %s", path)
    return config


__all__ = ["ConfigError", "load_config"]
