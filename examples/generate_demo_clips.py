#!/usr/bin/env python3
"""Generate synthetic media for the stackcompose demos.

Creates in examples/demo-clips/:
  - main.mp4:  320x240 base clip
  - inset.mp4: 96x72 clip overlaid in the corner
  - logo.png:  48x48 badge with transparency

Usage:
    python examples/generate_demo_clips.py
    stackcompose render --manifest examples/demo-manifest.yaml
"""

from moviepy import ColorClip
from pathlib import Path
from PIL import Image, ImageDraw

OUTPUT_DIR = Path(__file__).resolve().parent / "demo-clips"
FPS = 30

CLIPS = [
    ("main",  (320, 240), (60, 60, 180), 3.0),   # blue
    ("inset", (96, 72),   (200, 130, 40), 3.0),  # orange
]


def _make_logo() -> Image.Image:
    """A white ring on a transparent background."""
    img = Image.new("RGBA", (48, 48), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse((4, 4, 43, 43), outline=(255, 255, 255, 255), width=6)
    return img


def main():
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    for name, size, color, duration in CLIPS:
        out = OUTPUT_DIR / f"{name}.mp4"
        if out.exists():
            print(f"  skip {name} (exists)")
            continue
        ColorClip(size=size, color=color, duration=duration).write_videofile(
            str(out), fps=FPS, logger=None,
        )
        print(f"  wrote {name} ({size[0]}x{size[1]}, {duration}s)")

    logo = OUTPUT_DIR / "logo.png"
    if not logo.exists():
        _make_logo().save(logo)
        print("  wrote logo")

    print(f"\nDone. Demo media in {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
