"""Tests for ffmpeg argument assembly and command display."""

import pytest

from stackcompose.command import assemble_args, build_args, format_command
from stackcompose.graph import EmptyTreeError
from stackcompose.nodes import HStack, Resource, VStack, ZStack


class TestAssembleArgs:
    def test_full_shape(self):
        args = assemble_args(
            ["a.mp4", "b.mp4"],
            ["[0][1]overlay=100:50[s0]"],
            "s0",
        )
        assert args == [
            "-i", "a.mp4",
            "-i", "b.mp4",
            "-filter_complex", "[0][1]overlay=100:50[s0]",
            "-map", "[s0]",
        ]

    def test_filters_joined_with_semicolon(self):
        args = assemble_args(
            ["a", "b", "c", "d"],
            ["[0][1]hstack=inputs=2[s0]", "[2][3]hstack=inputs=2[s1]",
             "[s0][s1]vstack=inputs=2[s2]"],
            "s2",
        )
        fc = args[args.index("-filter_complex") + 1]
        assert fc == (
            "[0][1]hstack=inputs=2[s0];[2][3]hstack=inputs=2[s1];"
            "[s0][s1]vstack=inputs=2[s2]"
        )
        assert args[-2:] == ["-map", "[s2]"]

    def test_bare_input_gets_passthrough_stream(self):
        args = assemble_args(["only.mp4"], [], 0)
        assert args == [
            "-i", "only.mp4",
            "-filter_complex", "[0]null[s0]",
            "-map", "[s0]",
        ]

    def test_does_not_mutate_filter_list(self):
        filters = []
        assemble_args(["a"], filters, 0)
        assert filters == []

    def test_paths_passed_through_untouched(self):
        args = assemble_args(['my "clip" $1.mp4'], ["[0]hstack=inputs=1[s0]"], "s0")
        assert args[1] == 'my "clip" $1.mp4'


class TestBuildArgs:
    def test_compiles_and_assembles(self):
        tree = HStack([ZStack([Resource("a.mp4")]), ZStack([Resource("b.mp4")])])
        assert build_args(tree) == [
            "-i", "a.mp4", "-i", "b.mp4",
            "-filter_complex", "[0][1]hstack=inputs=2[s0]",
            "-map", "[s0]",
        ]

    def test_single_child_zstack_root(self):
        args = build_args(ZStack([Resource("a.mp4")]))
        assert args[-4:] == ["-filter_complex", "[0]null[s0]", "-map", "[s0]"]

    def test_empty_tree_propagates(self):
        with pytest.raises(EmptyTreeError):
            build_args(VStack([]))


class TestFormatCommand:
    def test_flags_bare_values_quoted(self):
        cmd = format_command(
            ["-i", "a.mp4", "-filter_complex", "[0]null[s0]", "-map", "[s0]"],
            "output.mp4",
        )
        assert cmd == (
            'ffmpeg -i "a.mp4" -filter_complex "[0]null[s0]" '
            '-map "[s0]" "output.mp4"'
        )

    def test_without_output(self):
        assert format_command(["-i", "a.mp4"]) == 'ffmpeg -i "a.mp4"'

    def test_custom_program(self):
        assert format_command([], program="/usr/bin/ffmpeg") == "/usr/bin/ffmpeg"

    def test_escapes_shell_specials(self):
        cmd = format_command(["-i", 'a "b" $c `d` \\e'])
        assert cmd == 'ffmpeg -i "a \\"b\\" \\$c \\`d\\` \\\\e"'
