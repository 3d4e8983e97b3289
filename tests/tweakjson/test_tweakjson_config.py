"""
Tests for tweakjson configuration.
"""

import pytest

from tweakjson.tweakjson_config import DEFAULT_INTERNAL_CONFIGURATIONS, TweakjsonConfig
from tweakjson.tweakjson_exceptions import ConfigurationException


class TestTweakjsonConfig:
    """Tests for TweakjsonConfig."""

    def test_defaults(self):
        config = TweakjsonConfig.from_dict({})
        assert config.minecraft_version is None
        assert config.source_set == "main"
        assert config.probe_timeout == 10.0
        assert config.internal_configurations == DEFAULT_INTERNAL_CONFIGURATIONS
        assert config.internal_configurations is not DEFAULT_INTERNAL_CONFIGURATIONS

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(ConfigurationException) as excinfo:
            TweakjsonConfig.from_dict({"minecraft_versoin": "1.12.2"})
        assert "minecraft_versoin" in excinfo.value.message

    @pytest.mark.parametrize("timeout", ["soon", 0, -1])
    def test_invalid_probe_timeout(self, timeout):
        with pytest.raises(ConfigurationException):
            TweakjsonConfig.from_dict({"probe_timeout": timeout})

    def test_internal_configurations_must_be_names(self):
        with pytest.raises(ConfigurationException):
            TweakjsonConfig.from_dict({"internal_configurations": "minecraft"})

    def test_from_toml(self, tmp_path):
        path = tmp_path / "tweakjson.toml"
        path.write_text(
            '[tweakjson]\n'
            'minecraft_version = "1.12.2"\n'
            'output_path = "dist/baritone.json"\n'
            'internal_configurations = ["minecraft"]\n'
            'probe_timeout = 2\n',
            encoding="utf-8",
        )
        config = TweakjsonConfig.from_toml(str(path))

        assert config.minecraft_version == "1.12.2"
        assert config.output_path == "dist/baritone.json"
        assert config.internal_configurations == ["minecraft"]
        assert config.probe_timeout == 2.0

    def test_from_toml_invalid(self, tmp_path):
        path = tmp_path / "tweakjson.toml"
        path.write_text("[tweakjson\n", encoding="utf-8")
        with pytest.raises(ConfigurationException):
            TweakjsonConfig.from_toml(str(path))

    def test_from_toml_missing(self, tmp_path):
        with pytest.raises(ConfigurationException):
            TweakjsonConfig.from_toml(str(tmp_path / "missing.toml"))

    def test_with_overrides_ignores_none(self):
        config = TweakjsonConfig(minecraft_version="1.12.2")
        overridden = config.with_overrides(minecraft_version=None, output_path="out.json")

        assert overridden.minecraft_version == "1.12.2"
        assert overridden.output_path == "out.json"
        assert config.output_path != "out.json"
