"""アプリケーションの設定モデル定義。

目的:
- UI とサービスの境界で用いる明示的な設定構造を提供する。
- 既定値はコードに持ち、TOML で上書きされた値を `config_loader` が反映する。
"""

from __future__ import annotations

from dataclasses import dataclass

from src.pokemon_shiritori.domain.constants import DEFAULT_ARTWORK_URL, DEFAULT_LIST_SOURCE


@dataclass
class Settings:
    """画面構成や動作に関する設定。

    現状の契約:
    - columns は候補グリッドの列数（2〜10）。
    - history_height は履歴欄の高さ（px）。
    - show_images が False なら画像を出さず名前だけを表示する。
    - end_when_stuck が True なら、候補が尽きた時点でゲームを終了する。
    - list_source は図鑑リストのパスまたは URL。
    - artwork_url は画像 URL のテンプレート（{id} を置換）。
    """

    columns: int = 5
    history_height: int = 420
    show_images: bool = True
    end_when_stuck: bool = False
    list_source: str = DEFAULT_LIST_SOURCE
    artwork_url: str = DEFAULT_ARTWORK_URL


MIN_COLUMNS = 2
MAX_COLUMNS = 10
