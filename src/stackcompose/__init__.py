"""stackcompose — stacked video composition compiled to ffmpeg filter graphs.

Describe a layout as a tree of hstack / vstack / zstack nodes over media
files (in Python or a YAML manifest), compile it to a -filter_complex
graph, and render it with ffmpeg.
"""

from .builder import Video, either, flatten, hstack, resource, vstack, when, zstack
from .command import assemble_args, build_args, format_command
from .graph import CompiledGraph, EmptyTreeError, compile_graph
from .nodes import ORIGIN, HStack, Position, Resource, VStack, ZStack
