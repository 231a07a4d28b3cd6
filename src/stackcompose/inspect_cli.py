"""CLI for inspecting the filter graph a manifest compiles to.

Usage:
    stackcompose inspect --manifest scene.yaml
    stackcompose inspect --manifest scene.yaml --set show_logo=false
"""

import argparse

from .command import assemble_args, format_command
from .common import parse_flag_overrides
from .graph import compile_graph
from .manifest import load_manifest


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Show the inputs, filter graph and ffmpeg command for a manifest.",
    )
    parser.add_argument(
        "--manifest", required=True,
        help="Path to YAML manifest file",
    )
    parser.add_argument(
        "--set", action="append", default=None, metavar="FLAG=BOOL",
        help="Override a manifest flag (repeatable)",
    )
    parsed = parser.parse_args(args)

    try:
        config = load_manifest(parsed.manifest, parse_flag_overrides(parsed.set))
        graph = compile_graph(config["root"])
    except ValueError as e:
        parser.error(str(e))

    print(f"Inputs ({len(graph.inputs)}):")
    for slot, path in enumerate(graph.inputs):
        print(f"  [{slot}] {path}")

    print(f"Filters ({len(graph.filters)}):")
    for expr in graph.filters:
        print(f"  {expr}")

    args_list = assemble_args(*graph)
    print(f"Map: {args_list[-1]}")
    print()
    print(format_command(args_list, config["output"]))


if __name__ == "__main__":
    main()
