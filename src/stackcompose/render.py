"""Rendering — run ffmpeg on a compiled composition."""

import subprocess
from pathlib import Path

import imageio_ffmpeg

from .command import assemble_args
from .graph import CompiledGraph, compile_graph
from .nodes import Node

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()


def _codec_params(codec):
    """Return ffmpeg quality params for the given codec name."""
    if codec == "h264_nvenc":
        return ["-cq", "20", "-pix_fmt", "yuv420p"]
    return ["-crf", "20", "-pix_fmt", "yuv420p"]


def ffmpeg_command(
    args: list[str],
    output_path: str,
    codec: str = "libx264",
    fps: int | None = None,
) -> list[str]:
    """Wrap assembled filter-graph args into a complete ffmpeg command."""
    cmd = [_FFMPEG, "-y", *args, "-c:v", codec, *_codec_params(codec)]
    if fps is not None:
        cmd.extend(["-r", str(fps)])
    cmd.append(str(output_path))
    return cmd


def render(
    root: Node,
    output_path: str,
    codec: str = "libx264",
    fps: int | None = None,
) -> CompiledGraph:
    """Compile a composition and render it to output_path with ffmpeg.

    Args:
        root: Root composition node.
        output_path: Output video path (parent dirs created if needed).
        codec: Video codec — "h264_nvenc" for GPU, "libx264" for CPU.
        fps: Output frame rate; ffmpeg's choice if None.

    Returns:
        The compiled graph that was rendered.

    Raises:
        EmptyTreeError: A stack in the tree has no children.
        subprocess.CalledProcessError: ffmpeg failed.
    """
    graph = compile_graph(root)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    cmd = ffmpeg_command(assemble_args(*graph), output_path, codec=codec, fps=fps)
    subprocess.run(cmd, check=True, capture_output=True)
    return graph
