"""Builder helpers for writing compositions in Python.

Lets a layout be written as nested calls, with conditionals and loops
collapsing into flat child lists before any stack node is built:

    class Scene(Video):
        def __init__(self, show_logo):
            self.show_logo = show_logo

        def body(self):
            return zstack(
                resource("talk.mp4"),
                resource("speaker.mkv", offset=(1200, 100)),
                when(self.show_logo, resource("logo.png", offset=(100, 800))),
            )

    hstack(Scene(False), Scene(True))

The compiler never sees any of this; it only receives the final tree.
"""

from types import GeneratorType

from .graph import EmptyTreeError
from .nodes import ORIGIN, HStack, Resource, VStack, ZStack, as_position


_NODE_TYPES = (Resource, HStack, VStack, ZStack)


class Video:
    """Base class for reusable compositions.

    Subclasses implement body(), returning anything flatten() accepts.
    A Video can be used wherever a node is expected inside a stack; it
    contributes all of its top-level components.
    """

    def body(self):
        raise NotImplementedError

    def components(self) -> list:
        return flatten(self.body())

    def root(self):
        """Return the first top-level component, the tree to compile."""
        components = self.components()
        if not components:
            raise EmptyTreeError(f"{type(self).__name__}.body() is empty")
        return components[0]


def flatten(*items) -> list:
    """Flatten items into an ordered list of composition nodes.

    None and False contribute nothing, so `cond and node` works inline.
    Lists, tuples and generators are expanded recursively; a Video
    expands to its components.
    """
    nodes = []
    for item in items:
        if item is None or item is False:
            continue
        if isinstance(item, _NODE_TYPES):
            nodes.append(item)
        elif isinstance(item, Video):
            nodes.extend(item.components())
        elif isinstance(item, (list, tuple, GeneratorType)):
            nodes.extend(flatten(*item))
        else:
            raise TypeError(f"Cannot use {item!r} as a composition component")
    return nodes


def when(condition, *items) -> list:
    """Items if condition is truthy, else nothing."""
    return flatten(*items) if condition else []


def either(condition, first, second) -> list:
    """First branch if condition is truthy, else the second."""
    return flatten(first if condition else second)


# ── Node constructors ─────────────────────────────────────────────


def resource(path, offset=ORIGIN) -> Resource:
    return Resource(str(path), as_position(offset))


def hstack(*items, offset=ORIGIN) -> HStack:
    return HStack(flatten(*items), as_position(offset))


def vstack(*items, offset=ORIGIN) -> VStack:
    return VStack(flatten(*items), as_position(offset))


def zstack(*items, offset=ORIGIN) -> ZStack:
    return ZStack(flatten(*items), as_position(offset))
