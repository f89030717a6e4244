from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """図鑑の1件。

    現状の契約:
    - id: 図鑑番号（正の整数、カタログ内で一意）
    - name: カタカナ表記の名前（空でない）
    """

    id: int
    name: str


def _parse_line(line: str) -> Entry | None:
    """1行を `Entry` に変換する。不正な行は None。"""
    trimmed = line.strip()
    if not trimmed:
        return None
    # 最初のカンマで分割（名前側のエスケープは想定しない）
    id_part, sep, name_part = trimmed.partition(",")
    if not sep:
        return None
    id_text = id_part.strip()
    name = name_part.strip()
    if not id_text or not name:
        return None
    try:
        entry_id = int(id_text)
    except ValueError:
        return None
    if entry_id <= 0:
        return None
    return Entry(id=entry_id, name=name)


def parse_catalog(text: str) -> list[Entry]:
    """`id,name` 形式のテキストからカタログを作り、id 昇順で返す。

    契約:
    - ヘッダー行は想定しない。
    - 空行・列不足・id が整数でない行は黙って捨てる。
    - 同じ id が複数ある場合は最初の行を採用する。
    """
    entries: list[Entry] = []
    seen: set[int] = set()
    for line in text.splitlines():
        entry = _parse_line(line)
        if entry is None or entry.id in seen:
            continue
        seen.add(entry.id)
        entries.append(entry)
    entries.sort(key=lambda e: e.id)
    return entries


def index_by_id(entries: list[Entry]) -> dict[int, Entry]:
    """`Entry` の id をキーにした辞書を作成して返す。"""
    return {e.id: e for e in entries}
