"""Tests for the clear-database maintenance script."""

import pytest

from rbac_api.common.config import Settings
from rbac_api.common.store import InMemoryDocumentStore, ROLES, USERS
from rbac_api.scripts import clear_database


@pytest.fixture
def seeded_store():
    return InMemoryDocumentStore({
        USERS: {"u1": {"name": "Ann"}},
        ROLES: {"r1": {"name": "admin"}},
    })


@pytest.fixture
def patch_script(monkeypatch, seeded_store):
    """Point the script at in-memory settings and store."""
    def apply(**settings_overrides):
        settings = Settings(_env_file=None, **settings_overrides)
        monkeypatch.setattr(clear_database, "get_settings", lambda: settings)
        monkeypatch.setattr(clear_database, "configure_logging", lambda settings: None)
        monkeypatch.setattr(clear_database, "load_dotenv", lambda: None)
        monkeypatch.setattr(clear_database, "build_store", lambda settings: seeded_store)
    return apply


class TestClearDatabase:
    """Tests for rbac-store-clear-db."""
    
    def test_clears_every_collection_with_yes(self, patch_script, seeded_store):
        patch_script(store_backend="memory")
        
        assert clear_database.main(["--yes"]) == 0
        assert seeded_store.snapshot() == {}
    
    def test_declined_confirmation_keeps_data(self, patch_script, seeded_store, monkeypatch):
        patch_script(store_backend="memory")
        monkeypatch.setattr("builtins.input", lambda prompt: "n")
        
        assert clear_database.main([]) == 1
        assert seeded_store.snapshot()[USERS] == {"u1": {"name": "Ann"}}
    
    def test_missing_firebase_credentials_fail(self, patch_script, seeded_store, monkeypatch):
        for name in ("APP_PROJECT_ID", "APP_PRIVATE_KEY", "APP_CLIENT_EMAIL", "APP_DATABASE_URL"):
            monkeypatch.delenv(name, raising=False)
        patch_script(store_backend="firebase")
        
        assert clear_database.main(["--yes"]) == 1
        assert seeded_store.snapshot()[ROLES] == {"r1": {"name": "admin"}}
