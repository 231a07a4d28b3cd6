"""Composition tree — the node types a layout is built from.

A composition is a strict tree of four node kinds:
  - Resource: a leaf referencing one media file.
  - HStack:   children side by side, left to right.
  - VStack:   children stacked top to bottom.
  - ZStack:   children layered in depth. The first child is the base,
              each later child is overlaid onto the running composite
              at its own offset.

Every node carries an offset, but it only has meaning on a non-first
child of a ZStack. Nodes are frozen; children are stored as tuples.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Union


class Position(NamedTuple):
    """Overlay placement in pixels, relative to the running composite."""
    x: int | float = 0
    y: int | float = 0


ORIGIN = Position(0, 0)


def as_position(value) -> Position:
    """Coerce a Position or any (x, y) pair into a Position."""
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(x, y)


@dataclass(frozen=True)
class Resource:
    path: str
    offset: Position = ORIGIN

    def __post_init__(self):
        object.__setattr__(self, "offset", as_position(self.offset))


@dataclass(frozen=True)
class _Stack:
    children: tuple = field(default_factory=tuple)
    offset: Position = ORIGIN

    # Name of the ffmpeg filter for juxtaposing stacks; None for ZStack.
    filter_name = None

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "offset", as_position(self.offset))


@dataclass(frozen=True)
class HStack(_Stack):
    filter_name = "hstack"


@dataclass(frozen=True)
class VStack(_Stack):
    filter_name = "vstack"


@dataclass(frozen=True)
class ZStack(_Stack):
    pass


Node = Union[Resource, HStack, VStack, ZStack]
