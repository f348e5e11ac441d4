"""Tests for configuration loading and precedence."""

import argparse
import json

import pytest

from cli_config import (
    ConfigError,
    LinkConfig,
    load_config,
    parse_link_overrides,
    resolve_offline_dir,
    resolve_target_compatibility,
)


def _args(**kwargs):
    defaults = {"TARGET_COMPATIBILITY": None, "OFFLINE_DIR": None}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestLoadConfig:

    def test_no_path_gives_empty_config(self):
        assert load_config(None) == LinkConfig()

    def test_yaml(self, tmp_path):
        path = tmp_path / "javadoclinks.yml"
        path.write_text(
            "target_compatibility: 1.8\n"
            "offline_dir: build/package-lists\n"
            "javadoc_links:\n"
            "  groovy: https://docs.groovy-lang.org/2.5.0/html/gapi/\n",
            encoding="utf-8",
        )
        config = load_config(str(path))
        # YAML reads 1.8 as a float; it is kept as its string form
        assert config.target_compatibility == "1.8"
        assert config.offline_dir == "build/package-lists"
        assert config.javadoc_links == {"groovy": "https://docs.groovy-lang.org/2.5.0/html/gapi/"}

    def test_json(self, tmp_path):
        path = tmp_path / "javadoclinks.json"
        path.write_text(json.dumps({"target_compatibility": "9"}), encoding="utf-8")
        config = load_config(str(path))
        assert config.target_compatibility == "9"
        assert config.javadoc_links == {}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == LinkConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(str(tmp_path / "missing.yml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("x = 1\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("javadoc_links: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_links_must_be_mapping(self, tmp_path):
        path = tmp_path / "links.yml"
        path.write_text("javadoc_links:\n  - https://example.org/\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))


class TestParseLinkOverrides:

    def test_parses_pairs(self):
        assert parse_link_overrides(["groovy=https://example.org/gapi/", " lib = https://x.org/ "]) == {
            "groovy": "https://example.org/gapi/",
            "lib": "https://x.org/",
        }

    def test_uri_may_contain_equals(self):
        assert parse_link_overrides(["q=https://x.org/api?a=b"]) == {"q": "https://x.org/api?a=b"}

    def test_none(self):
        assert parse_link_overrides(None) == {}

    @pytest.mark.parametrize("value", ["groovy", "=https://x.org/", "groovy="])
    def test_invalid(self, value):
        with pytest.raises(ConfigError):
            parse_link_overrides([value])


class TestPrecedence:

    def test_cli_wins(self, monkeypatch):
        monkeypatch.setenv("JAVADOCLINKS_TARGET_COMPATIBILITY", "1.7")
        args = _args(TARGET_COMPATIBILITY="11")
        assert resolve_target_compatibility(args, LinkConfig(target_compatibility="1.6")) == "11"

    def test_env_over_config(self, monkeypatch):
        monkeypatch.setenv("JAVADOCLINKS_TARGET_COMPATIBILITY", " 1.7 ")
        assert resolve_target_compatibility(_args(), LinkConfig(target_compatibility="1.6")) == "1.7"

    def test_config_last(self, monkeypatch):
        monkeypatch.delenv("JAVADOCLINKS_TARGET_COMPATIBILITY", raising=False)
        assert resolve_target_compatibility(_args(), LinkConfig(target_compatibility="1.6")) == "1.6"

    def test_nothing_configured(self, monkeypatch):
        monkeypatch.delenv("JAVADOCLINKS_TARGET_COMPATIBILITY", raising=False)
        assert resolve_target_compatibility(_args(), LinkConfig()) is None

    def test_offline_dir(self):
        config = LinkConfig(offline_dir="from-config")
        assert resolve_offline_dir(_args(OFFLINE_DIR="from-cli"), config) == "from-cli"
        assert resolve_offline_dir(_args(), config) == "from-config"
        assert resolve_offline_dir(_args(), LinkConfig()) is None
