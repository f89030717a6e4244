"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# 長音符（語尾にある場合は直前の文字で判定する）
ELONGATION_MARK: str = "ー"

# 語尾に来るとゲーム終了になる文字
FORBIDDEN_TERMINAL: str = "ン"

# 小書き文字 -> 通常サイズ
SMALL_KANA_MAP: dict[str, str] = {
    "ァ": "ア",
    "ィ": "イ",
    "ゥ": "ウ",
    "ェ": "エ",
    "ォ": "オ",
    "ッ": "ツ",
    "ャ": "ヤ",
    "ュ": "ユ",
    "ョ": "ヨ",
    "ヮ": "ワ",
}

# 図鑑リスト（id,name の CSV）の既定の置き場所
DEFAULT_LIST_SOURCE: str = "list/list.csv"

# 公式アートワーク画像の URL（{id} を図鑑番号で置換）
DEFAULT_ARTWORK_URL: str = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/"
    "official-artwork/{id}.png"
)

# 終了理由
REASON_FORBIDDEN_TERMINAL: str = "「ン」がついた！"
REASON_NO_CANDIDATES: str = "候補がいません..."
