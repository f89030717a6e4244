"""Streamlit セッション状態アダプタ。

`st.session_state` を扱うのは UI 層と本モジュールだけにする。
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.pokemon_shiritori.app.ports.session_store import SessionStore


class StSessionStore(SessionStore):
    """`st.session_state` を背後に持つ SessionStore。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        st.session_state[key] = value
