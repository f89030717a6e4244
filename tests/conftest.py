"""Test configuration and fixtures."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.pokemon_shiritori.adapters.session_store_memory import MemorySessionStore  # noqa: E402
from src.pokemon_shiritori.domain import Entry  # noqa: E402
from src.pokemon_shiritori.services.config_loader import set_runtime_config  # noqa: E402


@pytest.fixture(autouse=True)
def clear_runtime_config():
    """Each test starts without any TOML overrides."""
    set_runtime_config(None)
    yield
    set_runtime_config(None)


@pytest.fixture
def small_catalog():
    """The three-entry chain: ピカチュウ -> ウツボット, ドガース unreachable."""
    return [
        Entry(1, "ピカチュウ"),
        Entry(2, "ウツボット"),
        Entry(3, "ドガース"),
    ]


@pytest.fixture
def chain_catalog():
    """Catalog with a few possible chains and an ン ending."""
    return [
        Entry(1, "フシギダネ"),
        Entry(7, "ゼニガメ"),
        Entry(25, "ピカチュウ"),
        Entry(52, "ニャース"),
        Entry(71, "ウツボット"),
        Entry(75, "ゴローン"),
        Entry(109, "ドガース"),
        Entry(130, "ギャラドス"),
        Entry(144, "フリーザー"),
        Entry(145, "サンダー"),
        Entry(150, "ミュウツー"),
    ]


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def loaded_store(store, chain_catalog):
    """Store initialised with chain_catalog instead of the bundled list."""
    from src.pokemon_shiritori.services import app_state

    app_state.initialize_state(store, loader=lambda source: list(chain_catalog))
    return store
