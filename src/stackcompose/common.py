"""Shared helpers for manifest parsing and the CLIs.

Contains: ${var} path resolution and boolean flag parsing.
"""

import re


# ── Path utilities ─────────────────────────────────────────────────

def resolve_path_vars(text: str, paths: dict[str, str]) -> str:
    """Replace ${name} variables in a string using the paths dict."""
    def _replace(match):
        key = match.group(1)
        if key not in paths:
            raise ValueError(f"Unknown path variable: ${{{key}}}")
        return str(paths[key])
    return re.sub(r"\$\{(\w+)\}", _replace, text)


# ── Flag utilities ─────────────────────────────────────────────────

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a command-line boolean ('true', 'no', '1', ...)."""
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Not a boolean: '{value}'")


def parse_flag_overrides(items: list[str] | None) -> dict[str, bool]:
    """Parse repeated 'name=value' strings from --set into a flag dict."""
    flags = {}
    for item in items or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got '{item}'")
        flags[name.strip()] = parse_bool(value)
    return flags
