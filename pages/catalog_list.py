import streamlit as st

from src.pokemon_shiritori.adapters.session_store_streamlit import StSessionStore
from src.pokemon_shiritori.services import app_state, data_access
from src.pokemon_shiritori.services.catalog_loader import CatalogLoadError
from src.pokemon_shiritori.services.catalog_table import (
    build_catalog_df,
    count_terminal,
    filter_by_name,
    lead_char_counts,
)

# ページ設定
st.set_page_config(page_title="図鑑一覧", layout="wide")
st.title("図鑑一覧")
st.caption("語尾が「ン」になるポケモンを選ぶとゲームオーバーです。")

store = StSessionStore()

# トップページを経由せずに開かれた場合はここで読み込み、セッションに保存する
try:
    entries = app_state.ensure_catalog(store)
except CatalogLoadError:
    st.error("データの読み込みに失敗しました")
    st.stop()

df = build_catalog_df(entries, data_access.get_game_state(store).used_ids)

query = st.text_input("名前で絞り込み", "")
df = filter_by_name(df, query)

c1, c2 = st.columns(2)
with c1:
    st.metric("表示数", f"{len(df)}匹")
with c2:
    st.metric("「ン」で終わる", f"{count_terminal(df)}匹")

st.dataframe(df, hide_index=True, use_container_width=True)

# 語頭ごとの頭数（つなぎやすさの目安）
if not df.empty:
    st.subheader("語頭ごとの頭数")
    st.bar_chart(lead_char_counts(df))
