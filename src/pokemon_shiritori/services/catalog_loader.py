"""
図鑑リストの読み込みサービス（Streamlit 非依存）
- ローカルパスまたは http(s) URL から `id,name` のテキストを取得する
- `parse_catalog` で `Entry` のリストに変換する

失敗時の契約:
    取得やデコードに失敗したら `CatalogLoadError` を送出する（再試行はしない）。
    不正な行は黙って捨てる（件数はデバッグログにのみ出す）。
"""

from __future__ import annotations

import pathlib

import requests

from src.pokemon_shiritori.domain import Entry, parse_catalog
from src.pokemon_shiritori.logger import logger

REQUEST_TIMEOUT_SEC = 10


class CatalogLoadError(RuntimeError):
    """図鑑リストを読み込めなかった。"""


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _fetch_text(source: str) -> str:
    """source の中身を UTF-8 テキストとして返す。"""
    if _is_url(source):
        try:
            resp = requests.get(source, timeout=REQUEST_TIMEOUT_SEC)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise CatalogLoadError(f"Failed to fetch {source}: {e}") from e
        raw = resp.content
    else:
        path = pathlib.Path(source)
        if not path.is_file():
            raise CatalogLoadError(f"List not found: {path}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise CatalogLoadError(f"Failed to read {path}: {e}") from e
    try:
        # BOM 付きでも読めるようにする
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CatalogLoadError(f"List is not valid UTF-8: {source}") from e


def load_catalog_from_text(text: str) -> list[Entry]:
    """テキストからカタログを作る。捨てた行数はデバッグログに残す。"""
    entries = parse_catalog(text)
    non_blank = sum(1 for line in text.splitlines() if line.strip())
    dropped = non_blank - len(entries)
    if dropped:
        logger.debug("Dropped %d malformed catalog line(s)", dropped)
    return entries


def load_catalog(source: str | pathlib.Path) -> list[Entry]:
    """図鑑リストを読み込み、id 昇順の `Entry` リストを返す。"""
    src = str(source)
    try:
        text = _fetch_text(src)
    except CatalogLoadError as e:
        logger.error("Failed to load pokemon list: %s", e)
        raise
    entries = load_catalog_from_text(text)
    logger.info("Loaded %d entries from %s", len(entries), src)
    return entries
