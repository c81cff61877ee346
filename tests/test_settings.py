from pathlib import Path

from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults(monkeypatch):
    for name in ("BOARD_SIZE", "MAX_BOARD_SIZE", "MAX_RESULTS", "DICTIONARY_PATH"):
        monkeypatch.delenv(name, raising=False)
    cfg = _fresh_settings()
    assert cfg.BOARD_SIZE == 5
    assert cfg.MAX_BOARD_SIZE == 1024
    assert cfg.MAX_RESULTS == 50
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "data" / "words.txt"
    assert cfg.DICTIONARY_PATH.exists()


def test_env_override(monkeypatch):
    monkeypatch.setenv("BOARD_SIZE", "7")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DICTIONARY_PATH", "/tmp/words.txt")
    cfg = _fresh_settings()
    assert cfg.BOARD_SIZE == 7
    assert cfg.DEBUG is True
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.DICTIONARY_PATH == Path("/tmp/words.txt")


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["BOARD_SIZE"] == cfg.BOARD_SIZE
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=7)
    assert errors == {}
    assert cfg.MAX_RESULTS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, BOARD_SIZE="6")
    assert errors == {}
    assert cfg.BOARD_SIZE == 6


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_log_level_normalized():
    cfg = _fresh_settings()
    errors = update_settings(cfg, LOG_LEVEL="warning")
    assert errors == {}
    assert cfg.LOG_LEVEL == "WARNING"


def test_update_invalid_log_level():
    cfg = _fresh_settings()
    original = cfg.LOG_LEVEL
    errors = update_settings(cfg, LOG_LEVEL="chatty")
    assert "LOG_LEVEL" in errors
    assert cfg.LOG_LEVEL == original


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, BOARD_SIZE=4, DEBUG=True)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.BOARD_SIZE == 4
    assert cfg.DEBUG is True


def test_update_board_size_out_of_range():
    cfg = _fresh_settings()
    original = cfg.BOARD_SIZE
    errors = update_settings(cfg, BOARD_SIZE=0)
    assert "BOARD_SIZE" in errors
    errors = update_settings(cfg, BOARD_SIZE=cfg.MAX_BOARD_SIZE + 1)
    assert "BOARD_SIZE" in errors
    assert cfg.BOARD_SIZE == original


def test_update_bad_int_value():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    errors = update_settings(cfg, MAX_RESULTS=2.5)
    assert "MAX_RESULTS" in errors
    errors = update_settings(cfg, MAX_RESULTS=-1)
    assert "MAX_RESULTS" in errors


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert errors["PORT"] == "not editable"


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert errors["NONEXISTENT_FIELD"] == "unknown setting"


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_base_dir_override_moves_dictionary(monkeypatch, tmp_path):
    monkeypatch.delenv("DICTIONARY_PATH", raising=False)
    monkeypatch.setenv("BASE_DIR", str(tmp_path))
    cfg = _fresh_settings()
    assert cfg.BASE_DIR == tmp_path
    assert cfg.DICTIONARY_PATH == tmp_path / "data" / "words.txt"


def test_explicit_dictionary_path_wins_over_base_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("BASE_DIR", str(tmp_path))
    monkeypatch.setenv("DICTIONARY_PATH", "/srv/words.txt")
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH == Path("/srv/words.txt")
