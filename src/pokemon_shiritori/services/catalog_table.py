"""
図鑑一覧表の生成サービス。

契約:
- 入力はカタログ（`Entry` のリスト）と使用済み id の集合。
- 出力は `pandas.DataFrame` で、以下の列を持つ（カタログ順）。
    - No.: int
    - 名前: str
    - 語頭: str  … 名前の先頭1文字
    - 語尾: str  … 長音符を考慮した語尾
    - 次の文字: str  … 次に続く語頭（「ン」終わりは TERMINAL_LABEL）
    - 使用済み: bool
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from src.pokemon_shiritori.domain import (
    Entry,
    effective_last_char,
    is_forbidden_terminal,
    next_lead_char,
)

TERMINAL_LABEL = "（終了）"


def build_catalog_df(entries: Iterable[Entry], used_ids: Iterable[int] = ()) -> pd.DataFrame:
    used = set(used_ids)
    rows: list[dict[str, object]] = []
    for e in entries:
        terminal = is_forbidden_terminal(e.name)
        rows.append(
            {
                "No.": e.id,
                "名前": e.name,
                "語頭": e.name[:1],
                "語尾": effective_last_char(e.name),
                "次の文字": TERMINAL_LABEL if terminal else next_lead_char(e.name),
                "使用済み": e.id in used,
            }
        )
    return pd.DataFrame(rows, columns=["No.", "名前", "語頭", "語尾", "次の文字", "使用済み"])


def filter_by_name(df: pd.DataFrame, query: str) -> pd.DataFrame:
    """名前の部分一致で絞り込む。空文字なら全件。"""
    if not query:
        return df
    return df[df["名前"].str.contains(query, regex=False)]


def count_terminal(df: pd.DataFrame) -> int:
    """「ン」で終わる件数。"""
    return int((df["次の文字"] == TERMINAL_LABEL).sum())


def lead_char_counts(df: pd.DataFrame) -> pd.Series:
    """語頭ごとの件数（多い順）。"""
    return df.groupby("語頭").size().sort_values(ascending=False).rename("頭数")
