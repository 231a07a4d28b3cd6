"""CLI for rendering a composition manifest.

Reads a YAML manifest, builds the composition tree, compiles it to an
ffmpeg filter graph, and renders the result.

Usage:
    # Render with the manifest's own output path
    stackcompose render --manifest scene.yaml

    # Override output, toggle a flag, CPU encoding at 30fps
    stackcompose render --manifest scene.yaml --output /tmp/out.mp4 \
        --set show_logo=false --fps 30

    # Print the ffmpeg command without running it
    stackcompose render --manifest scene.yaml --dry-run
"""

import argparse
import time

from .command import assemble_args, format_command
from .common import parse_flag_overrides
from .graph import compile_graph
from .manifest import load_manifest
from .render import render


def _load(parser, manifest_path, set_items):
    """Load manifest and compile, turning input errors into parser errors."""
    try:
        config = load_manifest(manifest_path, parse_flag_overrides(set_items))
        graph = compile_graph(config["root"])
    except ValueError as e:
        parser.error(str(e))
    return config, graph


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Render a stacked video composition from a YAML manifest.",
    )
    parser.add_argument(
        "--manifest", required=True,
        help="Path to YAML manifest file",
    )
    parser.add_argument(
        "--output", default=None,
        help="Output video path (overrides the manifest's output)",
    )
    parser.add_argument(
        "--set", action="append", default=None, metavar="FLAG=BOOL",
        help="Override a manifest flag, e.g. --set show_logo=false (repeatable)",
    )
    parser.add_argument(
        "--fps", type=int, default=None,
        help="Output frame rate (default: decided by ffmpeg)",
    )
    parser.add_argument(
        "--gpu", action="store_true",
        help="Use GPU encoding (h264_nvenc). Default is CPU (libx264).",
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print the ffmpeg command instead of running it",
    )
    parsed = parser.parse_args(args)

    config, graph = _load(parser, parsed.manifest, parsed.set)

    output_path = parsed.output or config["output"]
    if not output_path:
        parser.error("--output is required (manifest has no 'output')")

    if parsed.dry_run:
        print(format_command(assemble_args(*graph), output_path))
        return

    codec = "h264_nvenc" if parsed.gpu else "libx264"
    print(f"Rendering {len(graph.inputs)} inputs, {len(graph.filters)} filters")
    print(f"Writing to: {output_path}")
    t0 = time.monotonic()
    render(config["root"], output_path, codec=codec, fps=parsed.fps)
    elapsed = time.monotonic() - t0
    print(f"\nDone: {output_path} ({elapsed:.1f}s)")


if __name__ == "__main__":
    main()
