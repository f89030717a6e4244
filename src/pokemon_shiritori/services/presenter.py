"""
描画用のビューモデル生成（Streamlit 非依存）

目的:
- ゲーム状態とカタログから、画面に出す文字列・画像 URL・候補一覧を組み立てる。
- UI 層は `BoardView` をそのまま描くだけにし、判定ロジックを持たない。

使い方:
- 再実行ごとに `build_view(catalog, state, settings)` を呼び、全体を描き直す。
"""

from __future__ import annotations

from dataclasses import dataclass

from src.pokemon_shiritori.app.state import Settings
from src.pokemon_shiritori.domain import Entry, GameState, filter_candidates

EMPTY_HISTORY_TEXT = "ポケモンを選んでスタート！"
EMPTY_CANDIDATES_TEXT = "候補がいません..."
NO_PREVIOUS_NAME = "-"
ANY_LEAD_LABEL = "全"


@dataclass(frozen=True)
class Tile:
    """履歴・候補の1枚分。index は履歴の通し番号（候補では None）。"""

    id: int
    name: str
    image_url: str | None
    index: int | None = None


@dataclass(frozen=True)
class HeaderView:
    count_label: str
    previous_name: str
    target_label: str


@dataclass(frozen=True)
class GameOverView:
    score: int
    reason: str


@dataclass(frozen=True)
class BoardView:
    header: HeaderView
    history: list[Tile]
    candidates: list[Tile]
    game_over: GameOverView | None
    empty_history_text: str = EMPTY_HISTORY_TEXT
    empty_candidates_text: str = EMPTY_CANDIDATES_TEXT


def artwork_url(entry_id: int, template: str) -> str:
    """図鑑番号から画像 URL を組み立てる。"""
    return template.format(id=entry_id)


def _tile(entry: Entry, settings: Settings, index: int | None = None) -> Tile:
    url = artwork_url(entry.id, settings.artwork_url) if settings.show_images else None
    return Tile(id=entry.id, name=entry.name, image_url=url, index=index)


def build_header(state: GameState) -> HeaderView:
    last = state.last_entry
    if last is None:
        return HeaderView(f"{state.score}匹", NO_PREVIOUS_NAME, ANY_LEAD_LABEL)
    target = f"「{state.required_lead}」" if state.required_lead else ANY_LEAD_LABEL
    return HeaderView(f"{state.score}匹", last.name, target)


def build_view(catalog: list[Entry], state: GameState, settings: Settings) -> BoardView:
    """状態全体を `BoardView` に射影する。

    - 終了後は候補を出さない。
    - 終了理由が無い OVER は起こらない想定だが、その場合は空文字で表示する。
    """
    history = [_tile(e, settings, index=i + 1) for i, e in enumerate(state.history)]
    if state.is_over:
        candidates: list[Tile] = []
        game_over = GameOverView(score=state.score, reason=state.reason or "")
    else:
        candidates = [_tile(e, settings) for e in filter_candidates(catalog, state)]
        game_over = None
    return BoardView(
        header=build_header(state),
        history=history,
        candidates=candidates,
        game_over=game_over,
    )


def chunk_rows(tiles: list[Tile], columns: int) -> list[list[Tile]]:
    """tiles を columns 個ずつの行に分ける。"""
    columns = max(1, int(columns))
    return [tiles[i : i + columns] for i in range(0, len(tiles), columns)]
