"""Format settings."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from prototool.exceptions import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "  "

_INDENT_RE = re.compile(r"^([0-9]+)([ts])$")


@dataclass
class FormatConfig:
    """The format config.

    indent is the actual string to indent with, not the Xt/Xs form used in
    config files. If empty, two spaces are used.
    """

    indent: str = DEFAULT_INDENT
    rpc_use_semicolons: bool = False
    trim_newline: bool = False


def parse_indent(s: str) -> str:
    """Convert an external indent such as "1t" or "4s" into an indent string.

    X must be >= 1; "t" means tabs and "s" means spaces. An empty string
    returns the default of two spaces.
    """
    if not s:
        return DEFAULT_INDENT
    match = _INDENT_RE.match(s.lower())
    if match is None:
        raise SettingsError(f"invalid indent {s!r}, expected Xt or Xs")
    count = int(match.group(1))
    if count < 1:
        raise SettingsError(f"invalid indent {s!r}, count must be at least 1")
    char = "\t" if match.group(2) == "t" else " "
    logger.debug("parsed indent %r as %d %s", s, count, "tab(s)" if char == "\t" else "space(s)")
    return char * count
