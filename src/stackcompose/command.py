"""Argument assembly — compiled graph to ffmpeg command-line tokens.

Shape of the produced argument list:
  -i <path_0> ... -i <path_n> -filter_complex "<expr_0>;...;<expr_k>" -map [<ref>]

The executable, encoder settings and output path are added by the
renderer (render.py); format_command() builds a display string.
"""

from .graph import compile_graph
from .nodes import Node


FILTER_SEPARATOR = ";"


def assemble_args(
    inputs: list[str],
    filters: list[str],
    output: int | str,
) -> list[str]:
    """Build the ffmpeg argument list from a compiled graph.

    If output is a bare input slot (the tree was a single Resource, or a
    chain of single-child ZStacks around one), -map [N] would not name a
    filter-graph output. A pass-through "null" stage is appended so the
    map target is always a named stream.

    Paths are passed through untouched.
    """
    filters = list(filters)
    if isinstance(output, int):
        stream = f"s{len(filters)}"
        filters.append(f"[{output}]null[{stream}]")
        output = stream

    args = []
    for path in inputs:
        args.extend(["-i", path])
    args.extend(["-filter_complex", FILTER_SEPARATOR.join(filters)])
    args.extend(["-map", f"[{output}]"])
    return args


def build_args(root: Node) -> list[str]:
    """Compile a composition tree and assemble its ffmpeg arguments."""
    return assemble_args(*compile_graph(root))


# ── Display ───────────────────────────────────────────────────────


def _quote(token: str) -> str:
    for ch in ("\\", '"', "$", "`"):
        token = token.replace(ch, "\\" + ch)
    return f'"{token}"'


def format_command(
    args: list[str],
    output_path: str | None = None,
    program: str = "ffmpeg",
) -> str:
    """Render an argument list as a copy-pasteable shell command.

    Flag tokens (leading '-') are left bare, everything else is
    double-quoted.
    """
    tokens = [program]
    tokens += [a if a.startswith("-") else _quote(a) for a in args]
    if output_path is not None:
        tokens.append(_quote(str(output_path)))
    return " ".join(tokens)
