#!/usr/bin/env python3
"""Demo scenes written with the Python builder.

Two picture-in-picture scenes side by side; only the second shows the
logo. Prints the ffmpeg command, or renders it with --render.

Usage:
    python examples/generate_demo_clips.py
    python examples/demo_scenes.py
    python examples/demo_scenes.py --render examples/demo-renders/main.mp4
"""

import argparse
from pathlib import Path

from stackcompose import Video, build_args, format_command, hstack, resource, when, zstack

CLIPS = Path(__file__).resolve().parent / "demo-clips"


class PictureInPicture(Video):
    def __init__(self, show_logo: bool):
        self.show_logo = show_logo

    def body(self):
        return zstack(
            resource(CLIPS / "main.mp4"),
            resource(CLIPS / "inset.mp4", offset=(200, 20)),
            when(self.show_logo, resource(CLIPS / "logo.png", offset=(20, 180))),
        )


class MainMovie(Video):
    def body(self):
        return hstack(
            PictureInPicture(show_logo=False),
            PictureInPicture(show_logo=True),
        )


def main():
    parser = argparse.ArgumentParser(description="Build the demo composition.")
    parser.add_argument("--render", metavar="OUTPUT", default=None,
                        help="Render to this path instead of printing the command")
    parsed = parser.parse_args()

    root = MainMovie().root()
    if parsed.render:
        from stackcompose.render import render
        render(root, parsed.render)
        print(f"Done: {parsed.render}")
    else:
        print(format_command(build_args(root), "output.mp4"))


if __name__ == "__main__":
    main()
