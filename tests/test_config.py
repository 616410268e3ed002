"""Tests for centralized configuration."""

import pytest
from pydantic import ValidationError

from stalemate.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Every field has a default; nothing is required."""
        for name in ("PRESORT", "SEARCH_NODE_LIMIT", "SEARCH_TIME_LIMIT",
                     "MAX_GENERATED_PIECES", "SVG_SIZE", "LOG_LEVEL"):
            monkeypatch.delenv(f"STALEMATE_{name}", raising=False)
        s = Settings(_env_file=None)
        assert s.presort is False
        assert s.search_node_limit == 2_000_000
        assert s.search_time_limit == 30.0
        assert s.max_generated_pieces == 10
        assert s.svg_size == 400
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STALEMATE_PRESORT", "true")
        monkeypatch.setenv("STALEMATE_SEARCH_NODE_LIMIT", "500")
        monkeypatch.setenv("STALEMATE_MAX_GENERATED_PIECES", "4")
        s = Settings(_env_file=None)
        assert s.presort is True
        assert s.search_node_limit == 500
        assert s.max_generated_pieces == 4

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("STALEMATE_SVG_SIZE", raising=False)
        env_file = tmp_path / ".env.stalemate"
        env_file.write_text("STALEMATE_SVG_SIZE=250\n")
        s = Settings(_env_file=env_file)
        assert s.svg_size == 250

    @pytest.mark.parametrize("name,value", [
        ("STALEMATE_MAX_GENERATED_PIECES", "1"),
        ("STALEMATE_MAX_GENERATED_PIECES", "11"),
        ("STALEMATE_SEARCH_NODE_LIMIT", "0"),
        ("STALEMATE_SEARCH_TIME_LIMIT", "-1"),
        ("STALEMATE_SVG_SIZE", "0"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_budget(self, monkeypatch):
        monkeypatch.setenv("STALEMATE_SEARCH_NODE_LIMIT", "123")
        monkeypatch.setenv("STALEMATE_SEARCH_TIME_LIMIT", "2.5")
        budget = Settings(_env_file=None).budget()
        assert budget.max_nodes == 123
        assert budget.time_limit == 2.5
