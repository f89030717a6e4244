from __future__ import annotations

from collections.abc import Callable

from src.pokemon_shiritori.app.ports.session_store import SessionStore
from src.pokemon_shiritori.domain import Entry, new_game
from src.pokemon_shiritori.services import data_access
from src.pokemon_shiritori.services.catalog_loader import load_catalog
from src.pokemon_shiritori.services.config_loader import load_default_settings


def ensure_catalog(
    store: SessionStore,
    loader: Callable[[str], list[Entry]] = load_catalog,
) -> list[Entry]:
    """カタログが未読込なら読み込んでセッションに保存し、カタログを返す。

    設定が未定義なら既定値（TOML 反映済み）も併せて保存する。
    読み込みに失敗した場合は `CatalogLoadError` がそのまま送出され、何も保存しない。
    """
    if store.get("settings") is None:
        data_access.set_settings(store, load_default_settings())

    if not data_access.has_catalog(store):
        source = data_access.get_settings(store).list_source
        entries = loader(source)
        data_access.set_catalog(store, entries, source)
    return data_access.get_catalog(store)


def initialize_state(
    store: SessionStore,
    loader: Callable[[str], list[Entry]] = load_catalog,
) -> None:
    """セッション開始時に必要な状態を初期化する。

    既に存在するキーは上書きしない。カタログはセッションごとに1度だけ読み込む。
    読み込みに失敗した場合は `CatalogLoadError` がそのまま送出され、
    ゲーム状態は作られない。
    """
    ensure_catalog(store, loader)

    if store.get("game_state") is None:
        data_access.set_game_state(store, new_game())
