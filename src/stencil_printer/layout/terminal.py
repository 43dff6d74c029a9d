"""ANSI color handling for stencil fields."""
from __future__ import annotations

import logging
import os
import re
import sys
from typing import Dict, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

ANSI_ESCAPE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])|\x9B[0-?]*[ -/]*[@-~]")
ANSI_RESET = "\x1b[0m"

FORCE_256_ENV = "STENCIL_PRINTER_FORCE_256_COLOR"

CAPABILITY_NONE = "none"
CAPABILITY_16 = "16"
CAPABILITY_256 = "256"


def _is_truthy_flag(raw_value: str) -> bool:
    normalized = raw_value.strip().lower()
    return bool(normalized) and normalized not in {"0", "false", "no", "off"}


def _windows_supports_vt() -> bool:
    """Return True if heuristics indicate a VT-capable Windows console."""

    if os.name != "nt":
        return False
    if os.environ.get("WT_SESSION"):
        return True
    if os.environ.get("TERM_PROGRAM", "").lower() == "windows_terminal":
        return True
    get_windows_version = getattr(sys, "getwindowsversion", None)
    if callable(get_windows_version):
        try:  # pragma: no cover - platform dependent
            version = get_windows_version()
        except OSError:
            return False
        major = getattr(version, "major", 0)
        build = getattr(version, "build", 0)
        return major > 10 or (major == 10 and build >= 10586)
    return False


def detect_capability() -> str:
    """
    Determine the terminal color capability from the environment.

    Returns:
        str: "256" when truecolor/256-color support is likely (or forced through
        ``STENCIL_PRINTER_FORCE_256_COLOR``), otherwise "16".
    """
    if _is_truthy_flag(os.environ.get(FORCE_256_ENV, "")):
        return CAPABILITY_256
    colorterm = os.environ.get("COLORTERM", "").lower()
    if any(token in colorterm for token in ("truecolor", "24bit")):
        return CAPABILITY_256
    term = os.environ.get("TERM", "").lower()
    if "256color" in term or "truecolor" in term:
        return CAPABILITY_256
    if _windows_supports_vt():
        return CAPABILITY_256
    return CAPABILITY_16


def enable_windows_vt_mode() -> None:
    """
    Let Windows consoles interpret ANSI escape sequences.

    No-op elsewhere. Uses ``colorama`` to patch the console; when colorama is not
    installed the escape codes are written as-is.
    """
    if os.name != "nt":
        return
    try:
        import colorama
    except ImportError:
        logger.debug("colorama unavailable; ANSI codes written without conversion")
        return
    colorama.just_fix_windows_console()


class AnsiColorizer:
    """Colorize text by color name using ANSI SGR sequences."""

    _CODES_16: Dict[str, int] = {
        "black": 30,
        "red": 31,
        "green": 32,
        "yellow": 33,
        "orange": 33,
        "blue": 34,
        "magenta": 35,
        "purple": 35,
        "cyan": 36,
        "white": 37,
        "grey": 37,
        "gray": 37,
    }

    _CODES_256: Dict[str, int] = {
        "black": 0,
        "red": 203,
        "green": 84,
        "yellow": 184,
        "orange": 214,
        "blue": 75,
        "magenta": 201,
        "purple": 177,
        "cyan": 51,
        "white": 15,
        "grey": 240,
        "gray": 240,
    }

    _MODIFIERS = frozenset({"bold", "dim", "bright"})

    def __init__(self, *, no_color: bool = False, capability: Optional[str] = None) -> None:
        """
        Set up the colorizer and resolve the terminal capability.

        Parameters:
            no_color (bool): Disable color output. The ``NO_COLOR`` environment
                variable has the same effect.
            capability (Optional[str]): Force "16" or "256" instead of probing the
                environment.
        """
        self.no_color = no_color or bool(os.environ.get("NO_COLOR"))
        self._warned: Set[str] = set()
        if self.no_color:
            self.capability = CAPABILITY_NONE
            return
        enable_windows_vt_mode()
        self.capability = capability or detect_capability()

    @classmethod
    def known_colors(cls) -> Tuple[str, ...]:
        return tuple(sorted(cls._CODES_16))

    def colorize(self, text: str, color_name: str) -> Tuple[str, bool]:
        """
        Wrap ``text`` in the escape sequence for ``color_name``.

        ``color_name`` may carry dot-separated modifiers (``red.bold``,
        ``cyan.bright``). Unknown names return the text unchanged with ``ok`` set
        to False and log once per name at debug level.
        """
        sgr = self._lookup(color_name)
        if sgr is None:
            if color_name not in self._warned:
                self._warned.add(color_name)
                logger.debug("Color %r not available; leaving text uncolored", color_name)
            return text, False
        if not text or not sgr:
            return text, True
        return f"{sgr}{text}{ANSI_RESET}", True

    def _lookup(self, color_name: str) -> Optional[str]:
        """Return the SGR sequence, "" when color is disabled, or None when unknown."""
        parts = (color_name or "").strip().lower().split(".")
        color = parts[0]
        modifiers = {part for part in parts[1:] if part}
        if color not in self._CODES_16 or not modifiers <= self._MODIFIERS:
            return None
        if self.capability == CAPABILITY_NONE:
            return ""

        attrs: List[str] = []
        if "bold" in modifiers:
            attrs.append("1")
        if "dim" in modifiers:
            attrs.append("2")
        if self.capability == CAPABILITY_256:
            attrs.append(f"38;5;{self._CODES_256[color]}")
        else:
            base = self._CODES_16[color]
            if "bright" in modifiers:
                base += 60
            attrs.append(str(base))
        return f"\x1b[{';'.join(attrs)}m"
