"""しりとりの連結判定（純粋関数のみ）。"""

from __future__ import annotations

from src.pokemon_shiritori.domain.constants import (
    ELONGATION_MARK,
    FORBIDDEN_TERMINAL,
    SMALL_KANA_MAP,
)


def effective_last_char(name: str) -> str:
    """判定に使う語尾の1文字を返す。

    - 前後空白は無視する。
    - 末尾が長音符ならその直前の文字を返す（例: "フリーザー" -> "ザ"）。
    - 長音符だけの名前は長音符をそのまま返す。
    """
    name = name.strip()
    last = name[-1:]
    if last == ELONGATION_MARK and len(name) >= 2:
        last = name[-2]
    return last


def normalize_char(char: str) -> str:
    """小書き文字を通常サイズに変換する。表に無い文字はそのまま返す。"""
    return SMALL_KANA_MAP.get(char, char)


def next_lead_char(name: str) -> str:
    """この名前の次に続くべき語頭の文字。"""
    return normalize_char(effective_last_char(name))


def is_forbidden_terminal(name: str) -> bool:
    """語尾が「ン」で終わるか（長音符は考慮済み）。"""
    return effective_last_char(name) == FORBIDDEN_TERMINAL
