"""Manifest loader — composition trees declared in YAML.

Parses a YAML manifest, resolves ${path} variables, evaluates
when/unless flags, and builds the composition tree.

Manifest schema:
  paths:                          # optional ${name} variables
    clips: "/data/clips"
  flags:                          # optional booleans for when/unless
    show_logo: true
  output: "${clips}/out.mp4"      # optional default output path
  layout:                         # exactly one node
    hstack:
      - zstack:
          - resource: "${clips}/talk.mp4"
          - resource: "${clips}/logo.png"
            offset: [100, 800]
            when: show_logo

Each node has exactly one of resource / hstack / vstack / zstack, plus
optional offset, when and unless. Lists nested inside a stack's child
list are flattened. Empty stacks are accepted here and rejected by the
compiler (EmptyTreeError).
"""

from pathlib import Path

import yaml

from .common import resolve_path_vars
from .nodes import ORIGIN, HStack, Position, Resource, VStack, ZStack


STACK_KINDS = {"hstack": HStack, "vstack": VStack, "zstack": ZStack}

NODE_KINDS = {"resource", *STACK_KINDS}

NODE_OPTIONS = {"offset", "when", "unless"}


# ── Node parsing ──────────────────────────────────────────────────


def _parse_offset(value, where: str) -> Position:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(
            isinstance(v, (int, float)) and not isinstance(v, bool)
            for v in value
        )
    ):
        raise ValueError(
            f"{where}: offset must be a list of two numbers, got {value!r}"
        )
    return Position(value[0], value[1])


def _flag_value(name, flags: dict[str, bool], where: str) -> bool:
    if name not in flags:
        raise ValueError(
            f"{where}: unknown flag '{name}'. Known: {sorted(flags)}"
        )
    return bool(flags[name])


def _is_enabled(entry: dict, flags: dict[str, bool], where: str) -> bool:
    if "when" in entry and not _flag_value(entry["when"], flags, where):
        return False
    if "unless" in entry and _flag_value(entry["unless"], flags, where):
        return False
    return True


def _parse_children(value, paths, flags, where: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"{where}: stack children must be a list, got {value!r}")

    children = []
    for i, item in enumerate(value):
        child_where = f"{where}[{i}]"
        if isinstance(item, list):
            # Array sugar: a nested list splices into the parent.
            children.extend(_parse_children(item, paths, flags, child_where))
            continue
        node = _parse_node(item, paths, flags, child_where)
        if node is not None:
            children.append(node)
    return children


def _parse_node(entry, paths, flags, where: str):
    """Parse one node entry. Returns None if when/unless disables it."""
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a mapping, got {entry!r}")

    kinds = [k for k in entry if k in NODE_KINDS]
    if len(kinds) != 1:
        raise ValueError(
            f"{where}: expected exactly one of {sorted(NODE_KINDS)}, "
            f"got {sorted(entry)}"
        )
    kind = kinds[0]

    unknown = set(entry) - NODE_KINDS - NODE_OPTIONS
    if unknown:
        raise ValueError(f"{where}: unknown field(s) {sorted(unknown)}")

    if not _is_enabled(entry, flags, where):
        return None

    offset = ORIGIN
    if "offset" in entry:
        offset = _parse_offset(entry["offset"], where)

    if kind == "resource":
        path = entry["resource"]
        if not isinstance(path, str) or not path:
            raise ValueError(f"{where}: resource must be a non-empty path string")
        return Resource(resolve_path_vars(path, paths), offset)

    children = _parse_children(entry[kind], paths, flags, f"{where}.{kind}")
    return STACK_KINDS[kind](children, offset)


# ── Manifest loading ──────────────────────────────────────────────


def load_manifest(
    manifest_path: str | Path,
    flag_overrides: dict[str, bool] | None = None,
) -> dict:
    """Load a composition manifest and build its tree.

    Processing pipeline:
      1. Parse YAML.
      2. Merge flag overrides (e.g. from --set) over manifest flags.
      3. Resolve ${path} variables in output and resource paths.
      4. Build the node tree, dropping entries disabled by when/unless.

    Args:
        manifest_path: Path to the YAML manifest.
        flag_overrides: Flag values that take precedence over the
            manifest's own flags. Overrides may introduce new flags.

    Returns:
        Dict with keys: paths, flags, output (str or None), root (node).

    Raises:
        ValueError: Missing layout, malformed node, unknown flag/variable.
        FileNotFoundError: Missing manifest file.
    """
    with open(manifest_path) as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError("Manifest: expected a mapping at top level")
    if "layout" not in raw:
        raise ValueError("Manifest: missing required 'layout' field")

    paths = raw.get("paths") or {}
    flags = dict(raw.get("flags") or {})
    for name, value in flags.items():
        if not isinstance(value, bool):
            raise ValueError(f"Manifest: flag '{name}' must be true/false, got {value!r}")
    flags.update(flag_overrides or {})

    output = raw.get("output")
    if output is not None:
        output = resolve_path_vars(str(output), paths)

    root = _parse_node(raw["layout"], paths, flags, "layout")
    if root is None:
        raise ValueError("Manifest: layout root is disabled by when/unless")

    return {"paths": paths, "flags": flags, "output": output, "root": root}
