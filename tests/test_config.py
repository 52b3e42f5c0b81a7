"""
Tests for JoinConfig loading.

These tests verify:
    - Defaults when keys are missing
    - Every accepted conjunction spelling
    - YAML and JSON files
    - Malformed documents raise ConfigError
"""

import pytest
from oxford_join import Conjunction, ConfigError, JoinConfig, load_config
from oxford_join.config import (
    config_from_dict,
    config_from_json,
    config_from_yaml,
    config_to_dict,
    config_to_json,
    config_to_yaml,
)


class TestDefaults:
    """Test JoinConfig defaults."""

    def test_default_config(self):
        """Defaults are AND with a comma-space separator."""
        cfg = JoinConfig()
        assert cfg.conjunction == Conjunction.AND
        assert cfg.separator == ", "

    def test_empty_document(self):
        """An empty YAML document is the default config."""
        assert config_from_yaml("") == JoinConfig()

    def test_partial_document(self):
        """Missing keys keep their defaults."""
        cfg = config_from_yaml("separator: ' | '\n")
        assert cfg.conjunction == Conjunction.AND
        assert cfg.separator == " | "


class TestConjunctionSpellings:
    """The conjunction key accepts names, text, and mappings."""

    @pytest.mark.parametrize("document, expected", [
        ("conjunction: or\n", Conjunction.OR),
        ("conjunction: and_or\n", Conjunction.AND_OR),
        ("conjunction: 'and/or'\n", Conjunction.AND_OR),
        ("conjunction: '&'\n", Conjunction.AMPERSAND),
        ("conjunction: versus\n", Conjunction.from_text("versus")),
        ("conjunction: {kind: other, text: plus}\n", Conjunction.from_text("plus")),
        ("conjunction: {kind: nor}\n", Conjunction.NOR),
    ])
    def test_spelling(self, document, expected):
        """Each accepted spelling resolves to its conjunction."""
        assert config_from_yaml(document).conjunction == expected

    def test_bad_kind(self):
        """An unknown kind name is rejected."""
        with pytest.raises(ConfigError):
            config_from_yaml("conjunction: {kind: xor}\n")

    def test_bad_type(self):
        """A non-string, non-mapping conjunction is rejected."""
        with pytest.raises(ConfigError):
            config_from_yaml("conjunction: 5\n")


class TestValidation:
    """Malformed documents are rejected."""

    def test_not_a_mapping(self):
        """The document must be a mapping."""
        with pytest.raises(ConfigError):
            config_from_yaml("- and\n- or\n")

    def test_unknown_key(self):
        """Unrecognized keys are rejected."""
        with pytest.raises(ConfigError):
            config_from_dict({"glue": "and"})

    def test_bad_separator(self):
        """The separator must be a string."""
        with pytest.raises(ConfigError):
            config_from_dict({"separator": 3})

    def test_invalid_yaml(self):
        """Broken YAML raises ConfigError."""
        with pytest.raises(ConfigError):
            config_from_yaml("conjunction: [and")

    def test_invalid_json(self):
        """Broken JSON raises ConfigError."""
        with pytest.raises(ConfigError):
            config_from_json("{")


class TestRoundTrip:
    """Configs survive serialization."""

    def test_dict_shape(self):
        """The conjunction nests as a kind mapping."""
        cfg = JoinConfig(conjunction=Conjunction.from_text("plus"), separator="/")
        assert config_to_dict(cfg) == {"conjunction": {"kind": "other", "text": "plus"}, "separator": "/"}

    def test_yaml_roundtrip(self):
        """YAML round-trips a config."""
        cfg = JoinConfig(conjunction=Conjunction.NOR, separator=" ; ")
        assert config_from_yaml(config_to_yaml(cfg)) == cfg

    def test_json_roundtrip(self):
        """JSON round-trips a config."""
        cfg = JoinConfig(conjunction=Conjunction.from_text("versus"))
        assert config_from_json(config_to_json(cfg)) == cfg


class TestLoadConfig:
    """Test loading config files."""

    def test_yaml_file(self, tmp_path):
        """Non-.json files are read as YAML."""
        path = tmp_path / "join.yaml"
        path.write_text("conjunction: or\nseparator: ' - '\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.conjunction == Conjunction.OR
        assert cfg.separator == " - "

    def test_json_file(self, tmp_path):
        """.json files are read as JSON."""
        path = tmp_path / "join.json"
        path.write_text('{"conjunction": "nor"}', encoding="utf-8")
        assert load_config(str(path)).conjunction == Conjunction.NOR

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")


class TestConfiguredJoins:
    """JoinConfig drives joins with its settings."""

    def test_join(self):
        """join() uses the configured conjunction."""
        cfg = config_from_yaml("conjunction: and_or\n")
        assert cfg.join(["Apples", "Bananas", "Oranges"]) == "Apples, Bananas, and/or Oranges"

    def test_oxford_fmt(self):
        """oxford_fmt() uses the configured conjunction."""
        cfg = JoinConfig(conjunction=Conjunction.OR)
        assert f"{cfg.oxford_fmt(['tea', 'coffee'])}?" == "tea or coffee?"

    def test_join_fmt(self):
        """join_fmt() uses the configured separator."""
        cfg = JoinConfig(separator=" / ")
        assert str(cfg.join_fmt(["a", "b", "c"])) == "a / b / c"
