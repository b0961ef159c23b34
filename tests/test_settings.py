import json
import logging

import pytest
import yaml

from bullet_dodge.config import JsonPrefs, Settings, load_settings


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "game.yaml"
    settings = Settings()
    settings.starting_lives = 3
    settings.heart_lifetime = 4.5
    settings.save_to_file(str(path))

    with open(path, encoding='utf-8') as f:
        raw = yaml.safe_load(f)
    assert raw['starting_lives'] == 3

    loaded = Settings()
    loaded.load_from_file(str(path))
    assert loaded.starting_lives == 3
    assert loaded.heart_lifetime == 4.5


def test_json_config(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"base_bullet_speed": 7.5, "seed": 42}), encoding='utf-8')

    settings = load_settings(str(path))

    assert settings.base_bullet_speed == 7.5
    assert settings.seed == 42
    assert settings.difficulty_curve().speed_at(0) == 7.5


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "game.ini"
    path.write_text("x=1", encoding='utf-8')

    with pytest.raises(ValueError):
        Settings().load_from_file(str(path))


def test_unknown_keys_are_ignored(caplog):
    settings = Settings()
    with caplog.at_level(logging.WARNING):
        settings.update({"not_a_setting": 1, "starting_lives": 2})

    assert settings.starting_lives == 2
    assert not hasattr(settings, "not_a_setting")
    assert "not_a_setting" in caplog.text


def test_validate_fixes_bad_values(caplog):
    settings = Settings()
    settings.starting_lives = 0
    settings.min_spawn_interval = 0
    settings.base_spawn_interval = 0.05
    settings.encouragement_messages = []
    settings.invincibility_duration = -1

    with caplog.at_level(logging.WARNING):
        assert settings.validate() is False

    assert settings.starting_lives == 1
    assert settings.min_spawn_interval == Settings().min_spawn_interval
    assert settings.base_spawn_interval == settings.min_spawn_interval
    assert settings.encouragement_messages
    assert settings.invincibility_duration == 0.0
    assert caplog.records


def test_defaults_are_valid():
    assert Settings().validate() is True


def test_load_settings_missing_file_uses_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.yaml"))
    assert settings.starting_lives == Settings().starting_lives


def test_session_config_from_settings():
    settings = Settings()
    settings.starting_lives = 4
    settings.encouragement_messages = ["go"]

    config = settings.session_config()

    assert config.starting_lives == 4
    assert config.encouragement_messages == ("go",)


class TestJsonPrefs:

    def test_persists_values(self, tmp_path):
        path = tmp_path / "saves" / "prefs.json"
        prefs = JsonPrefs(str(path))
        prefs.set_string("k", "1.000|2.000")
        prefs.save()

        assert JsonPrefs(str(path)).get_string("k") == "1.000|2.000"

    def test_missing_key_returns_default(self, tmp_path):
        prefs = JsonPrefs(str(tmp_path / "prefs.json"))
        assert prefs.get_string("nothing", "fallback") == "fallback"

    def test_corrupt_file_loads_empty(self, tmp_path, caplog):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding='utf-8')

        with caplog.at_level(logging.WARNING):
            prefs = JsonPrefs(str(path))

        assert prefs.values == {}
        assert caplog.records
