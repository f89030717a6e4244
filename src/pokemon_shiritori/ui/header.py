from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.pokemon_shiritori.services.presenter import HeaderView


def render_header(header: HeaderView, on_restart: Callable[[], None]) -> None:
    """ステータスヘッダー（匹数・前のポケモン・次の文字 + リスタート）を描画する。"""
    c1, c2, c3, c4 = st.columns([2, 3, 2, 2])
    with c1:
        st.metric("つないだ数", header.count_label)
    with c2:
        st.metric("前のポケモン", header.previous_name)
    with c3:
        st.metric("次の文字", header.target_label)
    with c4:
        if st.button("最初から", key="header_restart", use_container_width=True):
            on_restart()
            st.rerun()
