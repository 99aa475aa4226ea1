import os

import pytest

from Autocomplete.Business.AutocompleteExtension import AutocompleteExtension
from Autocomplete.Utility.env import load_env_file
from Autocomplete.Utility.settings import Settings, load_settings


def test_defaults():
    settings = load_settings(environ={})
    assert settings == Settings()


def test_environment_values():
    settings = load_settings(environ={
        "AUTOCOMPLETE_SUGGESTION_LIMIT": "0",
        "AUTOCOMPLETE_CACHE": "no",
        "AUTOCOMPLETE_REMOTE_ENDPOINT": "https://suggest.example.org/q",
    })
    assert settings.suggestion_limit == 0
    assert settings.cache is False
    assert settings.remote_endpoint == "https://suggest.example.org/q"


def test_overrides_win():
    settings = load_settings({"suggestion_limit": 4}, environ={"AUTOCOMPLETE_SUGGESTION_LIMIT": "9"})
    assert settings.suggestion_limit == 4


@pytest.mark.parametrize("env", [
    {"AUTOCOMPLETE_SUGGESTION_LIMIT": "ten"},
    {"AUTOCOMPLETE_CACHE": "maybe"},
])
def test_malformed_values(env):
    with pytest.raises(ValueError):
        load_settings(environ=env)


def test_apply_to_extension():
    ext = AutocompleteExtension("city")
    Settings(suggestion_limit=2, min_chars=1, menu_style="a b").apply(ext)
    assert ext.suggestion_limit == 2
    assert ext.min_chars == 1
    assert ext.menu_style_name == "a b"


def test_load_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text('# comment\nexport AC_TEST_ONE="1"\nAC_TEST_TWO=two\nAC_TEST_KEEP=new\nbroken line\n', encoding="utf-8")
    monkeypatch.setenv("AC_TEST_KEEP", "old")
    monkeypatch.delenv("AC_TEST_ONE", raising=False)
    monkeypatch.delenv("AC_TEST_TWO", raising=False)
    assert load_env_file(str(env_file)) == 2
    assert os.environ["AC_TEST_ONE"] == "1"
    assert os.environ["AC_TEST_TWO"] == "two"
    assert os.environ["AC_TEST_KEEP"] == "old"
    monkeypatch.delenv("AC_TEST_ONE")
    monkeypatch.delenv("AC_TEST_TWO")


def test_load_env_file_missing(tmp_path):
    assert load_env_file(str(tmp_path / "missing.env")) == 0


def test_apply_twice_does_not_duplicate_menu_styles():
    ext = AutocompleteExtension("city")
    settings = Settings(menu_style="dark compact")
    settings.apply(ext)
    settings.apply(ext)
    assert ext.menu_style_name == "dark compact"
    assert ext.GetState()["menuStyleNames"] == ["dark", "compact"]
