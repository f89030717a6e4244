"""
アプリケーション層のポート: セッションストア

目的:
- Streamlit の session_state への直接依存をサービス層から取り除く。
- サービス層は本ポート（Protocol）にのみ依存し、テストではメモリ実装を差し込む。
"""

from __future__ import annotations

from typing import Any, Protocol


class SessionStore(Protocol):
    """セッション状態へのアクセス抽象。

    契約:
    - dict 風の get/set を提供する。
    - 値の型は任意（カタログやゲーム状態をそのまま保持する）。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 任意の値を保持するため
        """キーに対応する値を取得する。存在しない場合は default を返す。"""

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401 - 任意の値を保持するため
        """キーに値を設定する。"""
