"""Tests for environment-driven settings."""

from mnkgame.config import load_settings


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CORS_ORIGINS", "DEFAULT_BOARD_SIZE", "DEFAULT_MARKS_TO_WIN", "MAX_BOARD_SIZE"):
            monkeypatch.delenv(name, raising=False)
        s = load_settings()
        assert s.default_board_size == 3
        assert s.default_marks_to_win == 3
        assert s.max_board_size == 30
        assert s.cors_origins == ["http://localhost:5173", "http://localhost:5174"]

    def test_out_of_range_defaults_are_clamped(self, monkeypatch):
        monkeypatch.delenv("MAX_BOARD_SIZE", raising=False)
        monkeypatch.setenv("DEFAULT_BOARD_SIZE", "2")
        monkeypatch.setenv("DEFAULT_MARKS_TO_WIN", "9")
        s = load_settings()
        assert (s.default_board_size, s.default_marks_to_win) == (3, 3)

    def test_max_board_size_has_a_floor(self, monkeypatch):
        monkeypatch.setenv("MAX_BOARD_SIZE", "1")
        monkeypatch.setenv("DEFAULT_BOARD_SIZE", "10")
        s = load_settings()
        assert s.max_board_size == 3
        assert s.default_board_size == 3

    def test_marks_capped_by_board_size(self, monkeypatch):
        monkeypatch.setenv("MAX_BOARD_SIZE", "20")
        monkeypatch.setenv("DEFAULT_BOARD_SIZE", "5")
        monkeypatch.setenv("DEFAULT_MARKS_TO_WIN", "7")
        s = load_settings()
        assert (s.default_board_size, s.default_marks_to_win) == (5, 5)

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.delenv("MAX_BOARD_SIZE", raising=False)
        monkeypatch.setenv("DEFAULT_BOARD_SIZE", " ")
        monkeypatch.setenv("DEFAULT_MARKS_TO_WIN", "")
        s = load_settings()
        assert s.default_board_size == 3
        assert s.default_marks_to_win == 3

    def test_cors_origins_split_and_trimmed(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test , http://b.test,")
        assert load_settings().cors_origins == ["http://a.test", "http://b.test"]
