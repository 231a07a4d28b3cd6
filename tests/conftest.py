"""Shared test fixtures for stackcompose tests."""

import subprocess

import pytest
import imageio_ffmpeg
from PIL import Image

_FFMPEG = imageio_ffmpeg.get_ffmpeg_exe()


def _color_video(path, color, size=(160, 120), duration=1):
    """Write a solid-color test clip with the bundled ffmpeg."""
    w, h = size
    subprocess.run(
        [
            _FFMPEG, "-y",
            "-f", "lavfi", "-i", f"color=c={color}:s={w}x{h}:d={duration}:r=10",
            "-c:v", "libx264", "-crf", "18", "-pix_fmt", "yuv420p",
            str(path),
        ],
        check=True,
        capture_output=True,
    )
    return path


@pytest.fixture
def red_video(tmp_path):
    """1-second 160x120 red clip."""
    return _color_video(tmp_path / "red.mp4", "red")


@pytest.fixture
def blue_video(tmp_path):
    """1-second 160x120 blue clip."""
    return _color_video(tmp_path / "blue.mp4", "blue")


@pytest.fixture
def small_green_video(tmp_path):
    """1-second 40x30 green clip, for overlay placement checks."""
    return _color_video(tmp_path / "green.mp4", "green", size=(40, 30))


@pytest.fixture
def logo_png(tmp_path):
    """32x32 opaque white PNG, overlaid like a logo."""
    path = tmp_path / "logo.png"
    Image.new("RGB", (32, 32), (255, 255, 255)).save(path)
    return path
