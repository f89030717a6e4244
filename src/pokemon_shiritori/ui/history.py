from __future__ import annotations

from html import escape as html_escape

import streamlit as st

from src.pokemon_shiritori.services.presenter import Tile

_CSS = """
<style>
  .history-item { display:flex; align-items:center; gap:10px; padding:4px 6px; border-bottom:1px solid #eee; }
  .history-item img { width:56px; height:56px; object-fit:contain; }
  .history-item .index { color:#888; min-width:2.5em; text-align:right; }
  .history-item .name { font-size:1.05rem; font-weight:600; }
  .empty-state { color:#666; text-align:center; padding:20px; }
</style>
"""


def _item_html(tile: Tile) -> str:
    name = html_escape(tile.name)
    img = ""
    if tile.image_url:
        img = f'<img src="{html_escape(tile.image_url)}" alt="{name}" loading="lazy">'
    return (
        f'<div class="history-item">{img}'
        f'<span class="index">{tile.index}.</span>'
        f'<span class="name">{name}</span></div>'
    )


def render_history(history: list[Tile], empty_text: str, height: int) -> None:
    """履歴を固定高のスクロール領域に描画する（毎回すべて描き直す）。

    新しいものを上に並べ、最新の1匹が常に見えるようにする。
    """
    st.subheader("これまでのポケモン")
    with st.container(height=height, border=True):
        if not history:
            st.markdown(
                _CSS + f'<div class="empty-state">{html_escape(empty_text)}</div>',
                unsafe_allow_html=True,
            )
            return
        parts = [_CSS] + [_item_html(t) for t in reversed(history)]
        st.markdown("".join(parts), unsafe_allow_html=True)
