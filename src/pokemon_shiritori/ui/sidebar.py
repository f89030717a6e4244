from __future__ import annotations

import streamlit as st

from src.pokemon_shiritori.app.ports.session_store import SessionStore
from src.pokemon_shiritori.app.state import MAX_COLUMNS, MIN_COLUMNS
from src.pokemon_shiritori.services import data_access
from src.pokemon_shiritori.services.gameplay import update_display_settings


def render_sidebar(store: SessionStore) -> None:
    """サイドバーの表示設定 UI を描画する。

    - 列数・画像表示はプレイ中でも切り替えられる（ゲーム状態には影響しない）。
    - 図鑑の件数と読み込み元を表示する。
    """
    settings = data_access.get_settings(store)
    with st.sidebar:
        st.subheader("表示設定")
        columns = st.number_input(
            "候補の列数",
            min_value=MIN_COLUMNS,
            max_value=MAX_COLUMNS,
            value=settings.columns,
            step=1,
        )
        show_images = st.toggle("画像を表示", value=settings.show_images)
        update_display_settings(store, columns=int(columns), show_images=bool(show_images))

        source = data_access.get_data_source(store) or "-"
        st.caption(f"図鑑: {len(data_access.get_catalog(store))}匹（{source}）")

        st.divider()
        st.page_link("pages/catalog_list.py", label="図鑑一覧")
