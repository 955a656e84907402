"""Tests for building rule sets from config and drop-in YAML files."""

from pathlib import Path

import pytest
import yaml

from sshwrap.config.loader import ConfigError
from sshwrap.config.schema import PatternConfig, WrapperConfig
from sshwrap.rules.engine import rewrite
from sshwrap.rules.models import InvalidPatternError
from sshwrap.rules.registry import build_ruleset, load_dropin_rules


def _config(*pairs: tuple) -> WrapperConfig:
    return WrapperConfig(patterns=[PatternConfig(pattern=p, template=t) for p, t in pairs])


class TestBuildRuleset:
    def test_empty_config(self):
        assert build_ruleset(WrapperConfig()) == []

    def test_config_order_kept(self):
        rules = build_ruleset(_config(("a", "1"), ("b", "2")), source="wrapper.toml")
        assert [r.pattern for r in rules] == ["a", "b"]
        assert rules[0].source == "wrapper.toml"

    def test_invalid_pattern_anywhere_aborts(self):
        with pytest.raises(InvalidPatternError) as excinfo:
            build_ruleset(_config(("web", "ok"), ("(db", "x")), source="wrapper.toml")
        assert "(db" in str(excinfo.value)
        assert "wrapper.toml" in str(excinfo.value)

    def test_dropins_appended_after_config(self, tmp_path: Path):
        (tmp_path / "10-lab.yaml").write_text(yaml.dump({"pattern": "lab", "template": "lab.local"}))
        rules = build_ruleset(_config(("web", "w")), tmp_path)
        assert [r.pattern for r in rules] == ["web", "lab"]

    def test_invalid_dropin_pattern_aborts(self, tmp_path: Path):
        (tmp_path / "bad.yml").write_text(yaml.dump([{"pattern": "[x", "template": "y"}]))
        with pytest.raises(InvalidPatternError):
            build_ruleset(WrapperConfig(), tmp_path)


class TestDropinRules:
    def test_missing_dir(self, tmp_path: Path):
        assert load_dropin_rules(tmp_path / "nope") == []

    def test_files_in_name_order(self, tmp_path: Path):
        (tmp_path / "b.yaml").write_text(yaml.dump([{"pattern": "b", "template": "B"}]))
        (tmp_path / "a.yml").write_text(yaml.dump([
            {"pattern": "a1", "template": "A1"},
            {"pattern": "a2", "add": "A2"},
        ]))
        (tmp_path / "notes.txt").write_text("ignored")
        rules = load_dropin_rules(tmp_path)
        assert [r.pattern for r in rules] == ["a1", "a2", "b"]
        assert rules[1].template == "A2"
        assert rules[0].source == str(tmp_path / "a.yml")

    def test_empty_file(self, tmp_path: Path):
        (tmp_path / "empty.yaml").write_text("")
        assert load_dropin_rules(tmp_path) == []

    def test_missing_pattern(self, tmp_path: Path):
        (tmp_path / "x.yaml").write_text(yaml.dump({"template": "y"}))
        with pytest.raises(ConfigError, match="x.yaml"):
            load_dropin_rules(tmp_path)

    def test_yaml_syntax_error(self, tmp_path: Path):
        (tmp_path / "x.yaml").write_text("pattern: [unclosed\n")
        with pytest.raises(ConfigError):
            load_dropin_rules(tmp_path)

    def test_dropin_rules_rewrite(self, tmp_path: Path):
        (tmp_path / "k8s.yaml").write_text(
            "- pattern: 'node-(\\d+)\\.(\\w+)'\n"
            "  template: '{2}-node{1}.cluster.local'\n"
        )
        rules = build_ruleset(WrapperConfig(), tmp_path)
        assert rewrite("node-3.eu", rules) == "eu-node3.cluster.local"
