"""Tests for stackcompose.common utilities."""

import pytest

from stackcompose.common import parse_bool, parse_flag_overrides, resolve_path_vars


class TestResolvePathVars:
    def test_single_var(self):
        result = resolve_path_vars("${videos}/grid1", {"videos": "/data/vids"})
        assert result == "/data/vids/grid1"

    def test_multiple_vars(self):
        paths = {"videos": "/data/vids", "figures": "/data/figs"}
        result = resolve_path_vars("${videos}/a and ${figures}/b", paths)
        assert result == "/data/vids/a and /data/figs/b"

    def test_no_vars(self):
        assert resolve_path_vars("/plain/path", {}) == "/plain/path"

    def test_unknown_var_raises(self):
        with pytest.raises(ValueError, match="Unknown path variable"):
            resolve_path_vars("${missing}/x", {})


class TestParseBool:
    @pytest.mark.parametrize("word", ["true", "True", "1", "yes", "on"])
    def test_true_words(self, word):
        assert parse_bool(word) is True

    @pytest.mark.parametrize("word", ["false", "FALSE", "0", "no", "off"])
    def test_false_words(self, word):
        assert parse_bool(word) is False

    def test_other_raises(self):
        with pytest.raises(ValueError, match="Not a boolean"):
            parse_bool("maybe")


class TestParseFlagOverrides:
    def test_none(self):
        assert parse_flag_overrides(None) == {}

    def test_pairs(self):
        assert parse_flag_overrides(["logo=true", "intro=no"]) == {
            "logo": True, "intro": False,
        }

    def test_missing_equals_raises(self):
        with pytest.raises(ValueError, match="name=value"):
            parse_flag_overrides(["logo"])
