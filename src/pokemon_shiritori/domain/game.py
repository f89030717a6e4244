from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Union

from src.pokemon_shiritori.domain.chain import effective_last_char, normalize_char
from src.pokemon_shiritori.domain.constants import FORBIDDEN_TERMINAL, REASON_FORBIDDEN_TERMINAL
from src.pokemon_shiritori.domain.data import Entry


class GameStatus(Enum):
    ACTIVE = "active"
    OVER = "over"


@dataclass(frozen=True)
class GameState:
    """1ゲーム分の状態（不変）。

    現状の契約:
    - history: 選ばれた順の `Entry`。同じ id は2度現れない。
    - required_lead: 次の語頭。None は「制約なし」（history が空のときのみ）。
    - status: ACTIVE / OVER。OVER は reason を持つ。
    """

    history: tuple[Entry, ...] = ()
    required_lead: str | None = None
    status: GameStatus = GameStatus.ACTIVE
    reason: str | None = None

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.OVER

    @property
    def score(self) -> int:
        return len(self.history)

    @property
    def used_ids(self) -> frozenset[int]:
        return frozenset(e.id for e in self.history)

    @property
    def last_entry(self) -> Entry | None:
        return self.history[-1] if self.history else None


def new_game() -> GameState:
    """初期状態 ACTIVE((), None) を返す。"""
    return GameState()


def can_select(state: GameState, entry: Entry) -> bool:
    """entry がこの状態で選択可能か。"""
    if state.is_over:
        return False
    if entry.id in state.used_ids:
        return False
    if state.required_lead is not None and not entry.name.startswith(state.required_lead):
        return False
    return True


def select(state: GameState, entry: Entry) -> GameState:
    """entry を選んだ後の状態を返す。

    振る舞い:
    - 選択不可（終了済み・使用済み・語頭不一致）の場合は state をそのまま返す。
    - 語尾が「ン」なら履歴に追加したうえで OVER にする。
    - それ以外は語尾（小書き文字は通常サイズ）を次の語頭にする。
    """
    if not can_select(state, entry):
        return state
    history = state.history + (entry,)
    raw = effective_last_char(entry.name)
    if raw == FORBIDDEN_TERMINAL:
        return replace(
            state,
            history=history,
            status=GameStatus.OVER,
            reason=REASON_FORBIDDEN_TERMINAL,
        )
    return replace(state, history=history, required_lead=normalize_char(raw))


def finish(state: GameState, reason: str) -> GameState:
    """ACTIVE のゲームを reason 付きで終了させる。終了済みならそのまま。"""
    if state.is_over:
        return state
    return replace(state, status=GameStatus.OVER, reason=reason)


def restart(state: GameState | None = None) -> GameState:
    """どの状態からでも初期状態に戻す。"""
    return new_game()


def filter_candidates(catalog: Iterable[Entry], state: GameState) -> list[Entry]:
    """選択候補をカタログ順（id 昇順）で返す。

    - 使用済みの id は除外する。
    - 語頭の制約があれば前方一致で絞り込む。
    """
    used = state.used_ids
    lead = state.required_lead
    return [
        e
        for e in catalog
        if e.id not in used and (lead is None or e.name.startswith(lead))
    ]


# ---- Reducer ----


@dataclass(frozen=True)
class Select:
    entry: Entry


@dataclass(frozen=True)
class Restart:
    pass


Action = Union[Select, Restart]


def apply_action(state: GameState, action: Action) -> GameState:
    """アクションを適用した新しい状態を返す。"""
    if isinstance(action, Select):
        return select(state, action.entry)
    if isinstance(action, Restart):
        return restart(state)
    raise TypeError(f"unknown action: {action!r}")
