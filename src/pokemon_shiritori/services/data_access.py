from __future__ import annotations

from src.pokemon_shiritori.app.ports.session_store import SessionStore
from src.pokemon_shiritori.app.state import Settings
from src.pokemon_shiritori.domain import Entry, GameState, index_by_id, new_game


def set_catalog(store: SessionStore, entries: list[Entry], source: str | None = None) -> None:
    """セッションに catalog と catalog_by_id を設定する。

    - カタログは読み込み後に変更しないため、設定は本関数経由に限る。
    """
    store.set("catalog", entries)
    store.set("catalog_by_id", index_by_id(entries))
    store.set("data_source", source)


def get_catalog(store: SessionStore) -> list[Entry]:
    """セッションのカタログを返す（未設定時は空リスト）。"""
    return store.get("catalog") or []


def has_catalog(store: SessionStore) -> bool:
    return store.get("catalog") is not None


def get_entry(store: SessionStore, entry_id: int | None) -> Entry | None:
    """id で `Entry` を引く。entry_id が None や未登録なら None。"""
    if entry_id is None:
        return None
    by_id: dict[int, Entry] = store.get("catalog_by_id") or {}
    return by_id.get(entry_id)


def get_data_source(store: SessionStore) -> str | None:
    return store.get("data_source")


def get_game_state(store: SessionStore) -> GameState:
    """現在のゲーム状態。未設定なら初期状態。"""
    state = store.get("game_state")
    return state if isinstance(state, GameState) else new_game()


def set_game_state(store: SessionStore, state: GameState) -> None:
    store.set("game_state", state)


def get_settings(store: SessionStore) -> Settings:
    settings = store.get("settings")
    return settings if isinstance(settings, Settings) else Settings()


def set_settings(store: SessionStore, settings: Settings) -> None:
    store.set("settings", settings)
