"""Tests for the TOML configuration layer."""

from src.pokemon_shiritori.app.state import Settings
from src.pokemon_shiritori.domain import DEFAULT_ARTWORK_URL, DEFAULT_LIST_SOURCE
from src.pokemon_shiritori.services import config_loader


def test_defaults_without_config():
    settings = config_loader.load_default_settings()
    assert settings == Settings()
    assert settings.list_source == DEFAULT_LIST_SOURCE
    assert settings.artwork_url == DEFAULT_ARTWORK_URL
    assert config_loader.get_app_title() == "ポケモンしりとり"
    # 候補が尽きても既定では終了しない
    assert settings.end_when_stuck is False


def test_toml_overrides():
    config_loader.set_runtime_toml_bytes(
        """
title = "カスタム"

[data]
source = "https://example.com/list.csv"
artwork_url = "https://img.example.com/{id}.png"

[settings]
columns = 7
history_height = 300
show_images = false
end_when_stuck = true
""".encode("utf-8")
    )
    settings = config_loader.load_default_settings()
    assert config_loader.get_app_title() == "カスタム"
    assert settings.columns == 7
    assert settings.history_height == 300
    assert settings.show_images is False
    assert settings.end_when_stuck is True
    assert settings.list_source == "https://example.com/list.csv"
    assert settings.artwork_url == "https://img.example.com/{id}.png"


def test_invalid_values_fall_back():
    config_loader.set_runtime_config(
        {
            "title": "   ",
            "data": {"artwork_url": "https://img.example.com/no-placeholder.png"},
            "settings": {"columns": "5", "history_height": -1, "show_images": 1, "end_when_stuck": True},
        }
    )
    settings = config_loader.load_default_settings()
    assert config_loader.get_app_title() == "ポケモンしりとり"
    assert settings.columns == Settings.columns
    assert settings.history_height == Settings.history_height
    assert settings.show_images is True
    assert settings.artwork_url == DEFAULT_ARTWORK_URL


def test_columns_are_clamped():
    config_loader.set_runtime_config({"settings": {"columns": 50}})
    assert config_loader.load_default_settings().columns == 10
    config_loader.set_runtime_config({"settings": {"columns": 1}})
    assert config_loader.load_default_settings().columns == 2


def test_bool_is_not_columns():
    config_loader.set_runtime_config({"settings": {"columns": True}})
    assert config_loader.load_default_settings().columns == Settings.columns


def test_broken_toml_is_ignored():
    config_loader.set_runtime_toml_bytes(b"title = ")
    assert config_loader.get_app_title() == "ポケモンしりとり"


def test_load_config_file(tmp_path):
    p = tmp_path / "config.toml"
    p.write_text('title = "ファイル"\n', encoding="utf-8")
    assert config_loader.load_config_file(p) is True
    assert config_loader.get_app_title() == "ファイル"


def test_load_missing_config_file_clears(tmp_path):
    config_loader.set_runtime_config({"title": "残り"})
    assert config_loader.load_config_file(tmp_path / "missing.toml") is False
    assert config_loader.get_app_title() == "ポケモンしりとり"
