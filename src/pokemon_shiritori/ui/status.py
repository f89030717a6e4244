from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.pokemon_shiritori.services.presenter import GameOverView


def render_game_over(game_over: GameOverView | None, on_restart: Callable[[], None]) -> None:
    """終了時の結果（理由とスコア）を描画する。続行中は何もしない。"""
    if game_over is None:
        return
    st.error(f"ゲームオーバー：{game_over.reason}")
    c1, c2 = st.columns([1, 3])
    with c1:
        st.metric("スコア", f"{game_over.score}匹")
    with c2:
        if st.button("もう一度遊ぶ", type="primary", key="gameover_restart"):
            on_restart()
            st.rerun()
