import streamlit as st

from src.pokemon_shiritori.adapters.session_store_streamlit import StSessionStore
from src.pokemon_shiritori.services import app_state, data_access, gameplay
from src.pokemon_shiritori.services.catalog_loader import CatalogLoadError
from src.pokemon_shiritori.services.config_loader import get_app_title, load_config_file
from src.pokemon_shiritori.services.presenter import build_view
from src.pokemon_shiritori.ui.board import render_board
from src.pokemon_shiritori.ui.header import render_header
from src.pokemon_shiritori.ui.history import render_history
from src.pokemon_shiritori.ui.sidebar import render_sidebar
from src.pokemon_shiritori.ui.status import render_game_over

CONFIG_PATH = "config.toml"


def main():
    # set_page_config は最初に 1 度だけ呼ぶ必要があるため、設定読込前の既定タイトルを使う
    default_title = "ポケモンしりとり"
    st.set_page_config(page_title=default_title, layout="wide")

    load_config_file(CONFIG_PATH)
    st.title(get_app_title(default_title))

    store = StSessionStore()
    try:
        app_state.initialize_state(store)
    except CatalogLoadError:
        # 再試行はしない。ゲームは初期化しない。
        st.error("データの読み込みに失敗しました")
        return

    render_sidebar(store)

    settings = data_access.get_settings(store)
    view = build_view(
        data_access.get_catalog(store),
        data_access.get_game_state(store),
        settings,
    )

    def restart() -> None:
        gameplay.handle_restart(store)

    render_header(view.header, on_restart=restart)
    render_game_over(view.game_over, on_restart=restart)

    st.divider()
    left, right = st.columns([1, 2])
    with left:
        render_history(view.history, view.empty_history_text, settings.history_height)
    with right:
        render_board(
            view.candidates,
            settings.columns,
            view.empty_candidates_text,
            on_select=lambda entry_id: gameplay.handle_selection(store, entry_id),
        )
