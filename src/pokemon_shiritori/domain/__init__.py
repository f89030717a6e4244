"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.pokemon_shiritori.domain.chain import (
    effective_last_char,
    is_forbidden_terminal,
    next_lead_char,
    normalize_char,
)
from src.pokemon_shiritori.domain.constants import (
    DEFAULT_ARTWORK_URL,
    DEFAULT_LIST_SOURCE,
    ELONGATION_MARK,
    FORBIDDEN_TERMINAL,
    REASON_FORBIDDEN_TERMINAL,
    REASON_NO_CANDIDATES,
)
from src.pokemon_shiritori.domain.data import Entry, index_by_id, parse_catalog
from src.pokemon_shiritori.domain.game import (
    Action,
    GameState,
    GameStatus,
    Restart,
    Select,
    apply_action,
    can_select,
    filter_candidates,
    finish,
    new_game,
    restart,
    select,
)

__all__ = [
    # data
    "Entry",
    "index_by_id",
    "parse_catalog",
    # chain
    "effective_last_char",
    "normalize_char",
    "next_lead_char",
    "is_forbidden_terminal",
    # game
    "GameState",
    "GameStatus",
    "new_game",
    "can_select",
    "select",
    "finish",
    "restart",
    "filter_candidates",
    "Action",
    "Select",
    "Restart",
    "apply_action",
    # constants
    "ELONGATION_MARK",
    "FORBIDDEN_TERMINAL",
    "DEFAULT_LIST_SOURCE",
    "DEFAULT_ARTWORK_URL",
    "REASON_FORBIDDEN_TERMINAL",
    "REASON_NO_CANDIDATES",
]
