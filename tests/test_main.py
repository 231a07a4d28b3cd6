"""Tests for the subcommand dispatcher."""

import pytest


class TestMainDispatcher:
    def test_no_subcommand_shows_help(self, capsys):
        from stackcompose.main import main

        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code != 0  # should error without subcommand
        assert "stackcompose" in capsys.readouterr().out

    def test_render_subcommand_exists(self):
        """Verify render subcommand is registered (will fail on missing --manifest)."""
        from stackcompose.main import main

        with pytest.raises(SystemExit):
            main(["render"])  # missing required args, but subcommand recognized

    def test_inspect_subcommand_exists(self):
        from stackcompose.main import main

        with pytest.raises(SystemExit):
            main(["inspect"])

    def test_invalid_subcommand_errors(self, capsys):
        from stackcompose.main import main

        with pytest.raises(SystemExit) as exc_info:
            main(["nonexistent"])
        assert exc_info.value.code != 0
