"""Tests for the kana chain helpers."""

import pytest

from src.pokemon_shiritori.domain import (
    ELONGATION_MARK,
    effective_last_char,
    is_forbidden_terminal,
    next_lead_char,
    normalize_char,
)
from src.pokemon_shiritori.domain.constants import SMALL_KANA_MAP


class TestEffectiveLastChar:
    def test_plain_name(self):
        assert effective_last_char("ピカチュウ") == "ウ"
        assert effective_last_char("ウツボット") == "ト"

    @pytest.mark.parametrize("name", ["フリーザー", "ドードー", "サンダー", "ハクリュー"])
    def test_elongation_mark_uses_previous_char(self, name):
        assert name.endswith(ELONGATION_MARK)
        assert effective_last_char(name) == name[-2]

    def test_ignores_surrounding_whitespace(self):
        assert effective_last_char(" ゴローン \n") == "ン"

    def test_only_elongation_mark(self):
        assert effective_last_char("ー") == "ー"

    def test_single_char(self):
        assert effective_last_char("ア") == "ア"


class TestNormalizeChar:
    def test_small_kana(self):
        assert normalize_char("ャ") == "ヤ"
        assert normalize_char("ッ") == "ツ"
        assert normalize_char("ィ") == "イ"

    def test_passthrough(self):
        assert normalize_char("カ") == "カ"
        assert normalize_char("ン") == "ン"
        assert normalize_char("a") == "a"

    @pytest.mark.parametrize("ch", list(SMALL_KANA_MAP) + list(SMALL_KANA_MAP.values()) + ["ン", "ー"])
    def test_idempotent(self, ch):
        assert normalize_char(normalize_char(ch)) == normalize_char(ch)


def test_next_lead_char_normalizes_small_kana():
    # ケーシィ -> ィ -> イ
    assert next_lead_char("ケーシィ") == "イ"
    # ミュウツー -> ツ
    assert next_lead_char("ミュウツー") == "ツ"


def test_forbidden_terminal():
    assert is_forbidden_terminal("ゴローン")
    assert is_forbidden_terminal("リザードン")
    assert not is_forbidden_terminal("ナッシー")
    assert not is_forbidden_terminal("ウツボット")
