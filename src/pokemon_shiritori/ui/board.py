from __future__ import annotations

from collections.abc import Callable
from html import escape as html_escape

import streamlit as st

from src.pokemon_shiritori.services.presenter import Tile, chunk_rows


def _image_html(tile: Tile) -> str:
    # 読み込み失敗時はブラウザ任せ（代替画像は出さない）
    return (
        '<div style="text-align:center;">'
        f'<img src="{html_escape(tile.image_url or "")}" alt="{html_escape(tile.name)}" '
        'loading="lazy" style="width:100%;max-width:120px;aspect-ratio:1/1;object-fit:contain;">'
        "</div>"
    )


def render_board(
    candidates: list[Tile],
    columns: int,
    empty_text: str,
    on_select: Callable[[int], None],
) -> None:
    """候補グリッドを描画し、クリックで on_select(id) を呼び出す。"""
    st.subheader(f"候補（{len(candidates)}匹）")
    if not candidates:
        st.info(empty_text)
        return
    for row in chunk_rows(candidates, columns):
        cols = st.columns(columns)
        for col, tile in zip(cols, row):
            with col:
                if tile.image_url:
                    st.markdown(_image_html(tile), unsafe_allow_html=True)
                if st.button(tile.name, key=f"cand-{tile.id}", use_container_width=True):
                    on_select(tile.id)
                    st.rerun()
