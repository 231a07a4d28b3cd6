"""Subcommand dispatcher for stackcompose.

Usage:
    stackcompose render   --manifest ... [--output ...]
    stackcompose inspect  --manifest ...
"""

import argparse
import sys


def main(args=None):
    parser = argparse.ArgumentParser(
        prog="stackcompose",
        description="Compile stacked video compositions to ffmpeg filter graphs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands. Each delegates to its own module's main().
    subparsers.add_parser("render", help="Render a YAML manifest with ffmpeg")
    subparsers.add_parser("inspect", help="Show the compiled filter graph")

    # Parse only the subcommand name, pass the rest to the subcommand's parser.
    parsed, remaining = parser.parse_known_args(args)

    if parsed.command is None:
        parser.print_help()
        sys.exit(1)

    if parsed.command == "render":
        from .cli import main as render_main
        render_main(remaining)
    elif parsed.command == "inspect":
        from .inspect_cli import main as inspect_main
        inspect_main(remaining)


if __name__ == "__main__":
    main()
