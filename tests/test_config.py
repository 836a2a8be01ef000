"""
Tests for Settings.
"""

import pytest

from gift_list_api.app.core.config import Settings


def test_defaults_come_from_environment(monkeypatch):
    monkeypatch.setenv("GIFT_LIST_NAME", "family")
    monkeypatch.setenv("SEARCH_NUM_RESULTS", "5")
    settings = Settings()
    assert settings.default_list_name == "family"
    assert settings.search_num_results == 5


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_list_name_is_rejected(name):
    with pytest.raises(ValueError, match="GIFT_LIST_NAME"):
        Settings(default_list_name=name)


def test_empty_list_name_from_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("GIFT_LIST_NAME", "")
    with pytest.raises(ValueError):
        Settings()
