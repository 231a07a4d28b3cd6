"""Graph compiler — composition tree to a linear ffmpeg filter graph.

Walks the tree once, depth-first and left-to-right, and produces:
  - the ordered list of input files (one slot per Resource occurrence),
  - the ordered list of filter expressions,
  - the stream reference holding the final composite.

Expressions are appended post-order: a stack's expression is emitted
only after every expression its children depend on, so each label is
defined before the expression that consumes it.

Stream references are either input slots (int, rendered "[0]") or
intermediate names "s0", "s1", ... drawn from one counter shared by
hstack, vstack and overlay. Each emitted expression consumes exactly
one name.
"""

from dataclasses import dataclass, field
from typing import NamedTuple

from .nodes import HStack, Node, Resource, VStack, ZStack


class EmptyTreeError(ValueError):
    """A stack node has no children, so it has no stream to produce."""


class CompiledGraph(NamedTuple):
    inputs: list[str]
    filters: list[str]
    output: int | str


@dataclass
class GraphState:
    """Per-compile accumulator. Never shared between compile calls."""
    inputs: list[Resource] = field(default_factory=list)
    filters: list[str] = field(default_factory=list)

    def next_stream(self) -> str:
        # One name per expression, so the pending expression's index is N.
        return f"s{len(self.filters)}"

    def emit(self, expression: str) -> None:
        self.filters.append(expression)


def _ref(stream) -> str:
    return f"[{stream}]"


def _describe(path: tuple[int, ...]) -> str:
    if not path:
        return "root"
    return "root" + "".join(f"[{i}]" for i in path)


class _Compiler:
    """Single-use traversal over one tree. See compile_graph()."""

    def __init__(self):
        self.state = GraphState()
        self._visitors = {
            Resource: self._visit_resource,
            HStack: self._visit_juxtaposed,
            VStack: self._visit_juxtaposed,
            ZStack: self._visit_layered,
        }

    def visit(self, node: Node, path: tuple[int, ...] = ()) -> int | str:
        try:
            visitor = self._visitors[type(node)]
        except KeyError:
            raise TypeError(
                f"Not a composition node at {_describe(path)}: {node!r}"
            ) from None
        return visitor(node, path)

    def _visit_resource(self, node: Resource, path) -> int:
        slot = len(self.state.inputs)
        self.state.inputs.append(node)
        return slot

    def _visit_juxtaposed(self, node: HStack | VStack, path) -> str:
        kind = type(node).__name__
        if not node.children:
            raise EmptyTreeError(f"{kind} at {_describe(path)} has no children")

        refs = [
            self.visit(child, path + (i,))
            for i, child in enumerate(node.children)
        ]
        output = self.state.next_stream()
        inputs = "".join(_ref(r) for r in refs)
        self.state.emit(
            f"{inputs}{node.filter_name}=inputs={len(refs)}{_ref(output)}"
        )
        return output

    def _visit_layered(self, node: ZStack, path) -> int | str:
        if not node.children:
            raise EmptyTreeError(f"ZStack at {_describe(path)} has no children")

        main = self.visit(node.children[0], path + (0,))
        for i, child in enumerate(node.children[1:], start=1):
            overlay = self.visit(child, path + (i,))
            output = self.state.next_stream()
            x, y = child.offset
            self.state.emit(
                f"{_ref(main)}{_ref(overlay)}overlay={x}:{y}{_ref(output)}"
            )
            main = output
        return main


def compile_graph(root: Node) -> CompiledGraph:
    """Compile a composition tree into inputs, filter expressions and output.

    Args:
        root: Root composition node. A bare Resource is valid and yields
            one input, no expressions, and output 0.

    Returns:
        CompiledGraph(inputs, filters, output). inputs holds file paths
        in slot order; the same path appearing twice gets two slots.

    Raises:
        EmptyTreeError: A stack anywhere in the tree has no children.
    """
    compiler = _Compiler()
    output = compiler.visit(root)
    state = compiler.state
    return CompiledGraph(
        inputs=[r.path for r in state.inputs],
        filters=list(state.filters),
        output=output,
    )
