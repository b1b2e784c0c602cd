from __future__ import annotations

from pathlib import Path

import pytest

from deskbooker.utils.config import DEFAULT_SEED_DESK_DESCRIPTIONS, get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DESKBOOKER_DATABASE_PATH", str(tmp_path / "custom.db"))
    monkeypatch.setenv("DESKBOOKER_PORT", "9100")
    monkeypatch.setenv("DESKBOOKER_SEED_DESKS", "Desk A; Desk B ;;")

    settings = get_settings()

    assert settings.database_path == Path(tmp_path / "custom.db")
    assert settings.port == 9100
    assert settings.seed_desk_descriptions == ("Desk A", "Desk B")


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DESKBOOKER_SEED_DESKS", raising=False)
    monkeypatch.delenv("DESKBOOKER_PORT", raising=False)

    settings = get_settings()

    assert settings.port == 8000
    assert settings.seed_desk_descriptions == DEFAULT_SEED_DESK_DESCRIPTIONS


def test_settings_reject_non_integer_port(monkeypatch):
    monkeypatch.setenv("DESKBOOKER_PORT", "eighty")

    with pytest.raises(ValueError, match="DESKBOOKER_PORT"):
        get_settings()
