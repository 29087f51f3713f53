"""
Configuration loading unit tests.
"""
from __future__ import annotations

import json

import pytest

from bake_helper.core.config import (
    AppConfig,
    BakeConfig,
    ConfigError,
    ConfigManager,
    FormattingOptions,
    load_config,
)


def test_defaults():
    config = load_config()
    assert config.app_namespace == "App"
    assert config.framework_namespace == "Cake"
    assert config.formatting == FormattingOptions()
    assert config.framework_classes is None
    assert config.custom == {}


def test_overrides_and_custom_keys():
    config = load_config(
        {
            "app_namespace": "Shop",
            "formatting": {"indent": 1, "trailingComma": True},
            "theme": "dark",
        }
    )
    assert config.app_namespace == "Shop"
    assert config.formatting.indent == 1
    assert config.formatting.trailing_comma is True
    assert config.custom == {"theme": "dark"}


def test_framework_classes_become_frozenset():
    config = load_config({"framework_classes": ["Cake\\ORM\\Table"]})
    assert config.framework_classes == frozenset({"Cake\\ORM\\Table"})


def test_invalid_formatting_rejected():
    with pytest.raises(ConfigError):
        load_config({"formatting": {"indent": -2}})
    with pytest.raises(ConfigError):
        load_config({"formatting": "wide"})


def test_config_file(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text(json.dumps({"app_namespace": "Blog", "formatting": {"tab": "  "}}))

    config = load_config({"framework_namespace": "Acme"}, path)
    assert config.app_namespace == "Blog"
    assert config.framework_namespace == "Acme"
    assert config.formatting.tab == "  "


def test_overrides_win_over_file(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text(json.dumps({"app_namespace": "Blog"}))
    assert load_config({"app_namespace": "Shop"}, path).app_namespace == "Shop"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "nope.json")


def test_non_json_file(tmp_path):
    path = tmp_path / "bake.yaml"
    path.write_text("app_namespace: Blog")
    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


def test_non_object_json(tmp_path):
    path = tmp_path / "bake.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError, match="JSON object"):
        load_config(config_file=path)


def test_save_then_load(tmp_path):
    manager = ConfigManager()
    config = manager.get_config(
        {"app_namespace": "Shop", "framework_classes": ["Cake\\ORM\\Table"], "theme": "dark"}
    )
    path = tmp_path / "saved.json"
    manager.save_config(config, path)

    loaded = manager.get_config(config_file=path)
    assert loaded == config


def test_validate_config():
    manager = ConfigManager()
    assert manager.validate_config(BakeConfig()) == []

    config = BakeConfig(
        app_namespace="My App",
        framework_namespace="",
        formatting=FormattingOptions(tab="--"),
        custom={"theme": "dark"},
    )
    warnings = manager.validate_config(config)
    assert "Invalid app_namespace segment: 'My App'" in warnings
    assert "Empty framework_namespace" in warnings
    assert "Tab unit contains non-whitespace: '--'" in warnings
    assert "Unknown setting ignored: theme" in warnings


def test_app_config_read():
    config = AppConfig({"App": {"namespace": "Shop", "paths": {"templates": "tpl"}}})
    assert config.read("App.namespace") == "Shop"
    assert config.read("App.paths.templates") == "tpl"
    assert config.read("App.missing") is None
    assert config.read("App.namespace.deeper", "fallback") == "fallback"
    assert config.check("App.paths")
    assert not config.check("Datasources")


def test_bake_config_app_config():
    app_config = BakeConfig(app_namespace="Shop").app_config()
    assert app_config.read("App.namespace") == "Shop"
    assert app_config.read("Framework.namespace") == "Cake"


def test_unknown_keys_logged_as_warning(caplog):
    load_config({"theme": "dark"})
    assert any(
        record.levelname == "WARNING" and "theme" in record.getMessage() for record in caplog.records
    )
