from pathlib import Path

from boggle_solver.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.STRICT_ADJACENCY is False
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAX_BOARD_CELLS", "64")
    monkeypatch.setenv("STRICT_ADJACENCY", "yes")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.MAX_BOARD_CELLS == 64
    assert cfg.STRICT_ADJACENCY is True
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["STRICT_ADJACENCY"] == cfg.STRICT_ADJACENCY
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_CELLS=100)
    assert errors == {}
    assert cfg.MAX_BOARD_CELLS == 100


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MIN_WORD_LENGTH="4")
    assert errors == {}
    assert cfg.MIN_WORD_LENGTH == 4


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, STRICT_ADJACENCY=True)
    assert errors == {}
    assert cfg.STRICT_ADJACENCY is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MIN_WORD_LENGTH=4, DEBUG=True)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.DEBUG is True


def test_update_invalid_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == 0


def test_update_negative_int_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_CELLS=-1)
    assert "MAX_BOARD_CELLS" in errors
    assert cfg.MAX_BOARD_CELLS == 400


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors
    assert cfg.PORT == 10001


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_update_zero_board_cells_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_CELLS=0, MIN_WORD_LENGTH=0)
    assert "MAX_BOARD_CELLS" in errors
    assert "MIN_WORD_LENGTH" in errors
    assert cfg.MAX_BOARD_CELLS == 400


def test_update_zero_max_results_is_unlimited():
    cfg = _fresh_settings()
    assert update_settings(cfg, MAX_RESULTS=0) == {}
    assert cfg.MAX_RESULTS == 0
