# colour_palette/utils.py
from __future__ import annotations

"""
Shared utilities for colour_palette.

Value formatting for log lines, tidy print-based logging, and the small
helpers the palette modules share (reference-list checks, hex listing).
"""

import sys
from typing import Any, Iterable, List, Sequence, Tuple

from .colour_models import ColourModel
from .core_types import HexStr


# Palette helpers


def require_non_empty(colours: Sequence[ColourModel], what: str) -> None:
    """Raise ValueError when a reduction is asked of an empty list."""
    if len(colours) == 0:
        raise ValueError(f"{what} of an empty palette is undefined")


def hex_list(colours: Iterable[ColourModel]) -> List[HexStr]:
    """Colours as '#rrggbb' strings, in order."""
    return [colour.to_hex() for colour in colours]


# Pretty logging


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1,234 style for ints, compact floats, "auto" for None."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    if value is None:
        return "auto"
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def print_config_line(section: str, pairs: Iterable[Tuple[str, Any]]) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [adjacent] Number of colours: 5  Distance: 30  Perceived brightness: on
    Routed through debug_log(), so it is prefixed with [debug].
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    debug_log(line)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    """Warning log line to stderr."""
    print(f"[warn] {message}", file=sys.stderr, flush=True)


__all__ = [
    # palette helpers
    "require_non_empty",
    "hex_list",
    # pretty formatting
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    # logging
    "print_config_line",
    "debug_log",
    "warn",
]
