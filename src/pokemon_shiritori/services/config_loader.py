from __future__ import annotations

import pathlib
import tomllib
from typing import Any

from src.pokemon_shiritori.app.state import MAX_COLUMNS, MIN_COLUMNS, Settings
from src.pokemon_shiritori.logger import logger


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時に与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> None:
    """TOML バイト列から実行時設定を反映する。不正なら解除する。"""
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring invalid config: %s", e)
        set_runtime_config(None)
        return
    set_runtime_config(cfg)


def load_config_file(path: str | pathlib.Path) -> bool:
    """ローカルの TOML ファイルを実行時設定として読み込む。

    ファイルが無ければ設定を解除して False を返す。
    """
    p = pathlib.Path(path)
    if not p.is_file():
        set_runtime_config(None)
        return False
    set_runtime_toml_bytes(p.read_bytes())
    return _RUNTIME_STORE.config is not None


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。未設定なら空辞書（呼び出し側で既定値にフォールバック）。"""
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def _section(name: str) -> dict[str, Any]:
    sec = _get_config().get(name)
    return sec if isinstance(sec, dict) else {}


def get_app_title(default: str = "ポケモンしりとり") -> str:
    title = _get_config().get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_list_source(default: str) -> str:
    v = _section("data").get("source")
    if isinstance(v, str) and v.strip():
        return v.strip()
    return default


def get_artwork_url(default: str) -> str:
    v = _section("data").get("artwork_url")
    # {id} を含まないテンプレートは使わない
    if isinstance(v, str) and "{id}" in v:
        return v.strip()
    return default


def load_default_settings_values() -> dict[str, int | bool]:
    result: dict[str, int | bool] = {}
    settings = _section("settings")
    # bool は int のサブクラスなので明示的に除外する
    columns = settings.get("columns")
    if isinstance(columns, int) and not isinstance(columns, bool):
        result["columns"] = min(MAX_COLUMNS, max(MIN_COLUMNS, columns))
    height = settings.get("history_height")
    if isinstance(height, int) and not isinstance(height, bool) and height > 0:
        result["history_height"] = height
    if isinstance(settings.get("show_images"), bool):
        result["show_images"] = bool(settings["show_images"])
    if isinstance(settings.get("end_when_stuck"), bool):
        result["end_when_stuck"] = bool(settings["end_when_stuck"])
    return result


def load_default_settings() -> Settings:
    values = load_default_settings_values()
    return Settings(
        columns=int(values.get("columns", Settings.columns)),
        history_height=int(values.get("history_height", Settings.history_height)),
        show_images=bool(values.get("show_images", Settings.show_images)),
        end_when_stuck=bool(values.get("end_when_stuck", Settings.end_when_stuck)),
        list_source=get_list_source(Settings.list_source),
        artwork_url=get_artwork_url(Settings.artwork_url),
    )
