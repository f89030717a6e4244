from __future__ import annotations

from src.pokemon_shiritori.app.ports.session_store import SessionStore
from src.pokemon_shiritori.app.state import MAX_COLUMNS, MIN_COLUMNS
from src.pokemon_shiritori.domain import (
    REASON_NO_CANDIDATES,
    Entry,
    GameState,
    Restart,
    Select,
    apply_action,
    filter_candidates,
    finish,
)
from src.pokemon_shiritori.logger import logger
from src.pokemon_shiritori.services import data_access

# UI からのイベント（候補クリック、リスタート）を受け取り、
# ゲーム状態の遷移とセッションへの保存を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。


def current_candidates(store: SessionStore) -> list[Entry]:
    """現在の状態で選択できる候補（id 昇順）。"""
    return filter_candidates(data_access.get_catalog(store), data_access.get_game_state(store))


def handle_selection(store: SessionStore, entry_id: int) -> GameState:
    """候補クリック時の処理を行い、遷移後の状態を返す。

    振る舞い:
    - 未登録の id、選択不可の候補は何もしない。
    - 「ン」で終われば終了。
    - まだ続く状態で候補が尽き、かつ end_when_stuck が有効なら終了にする。
    """
    state = data_access.get_game_state(store)
    entry = data_access.get_entry(store, entry_id)
    if entry is None:
        return state

    new_state = apply_action(state, Select(entry))
    if new_state is state:
        return state

    if not new_state.is_over and data_access.get_settings(store).end_when_stuck:
        catalog = data_access.get_catalog(store)
        if not filter_candidates(catalog, new_state):
            new_state = finish(new_state, REASON_NO_CANDIDATES)

    if new_state.is_over:
        logger.info("Game over: score=%d reason=%s", new_state.score, new_state.reason)
    data_access.set_game_state(store, new_state)
    return new_state


def handle_restart(store: SessionStore) -> GameState:
    """リスタート。どの状態からでも初期状態に戻す。"""
    new_state = apply_action(data_access.get_game_state(store), Restart())
    data_access.set_game_state(store, new_state)
    return new_state


def update_display_settings(
    store: SessionStore,
    columns: int | None = None,
    show_images: bool | None = None,
) -> None:
    """サイドバーからの表示設定の変更を反映する（ゲーム状態は変えない）。"""
    settings = data_access.get_settings(store)
    changed = False
    if columns is not None:
        cols = min(MAX_COLUMNS, max(MIN_COLUMNS, int(columns)))
        if cols != settings.columns:
            settings.columns = cols
            changed = True
    if show_images is not None and bool(show_images) != settings.show_images:
        settings.show_images = bool(show_images)
        changed = True
    if changed:
        data_access.set_settings(store, settings)
