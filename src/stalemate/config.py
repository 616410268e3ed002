"""Centralized configuration.

Settings are read from STALEMATE_* environment variables or a
.env.stalemate file. Every field has a default, so the solver runs with no
configuration at all.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stalemate.generator import MAX_PIECES
from stalemate.search import SearchBudget


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STALEMATE_", env_file=".env.stalemate", env_file_encoding="utf-8",
    )

    # Search
    presort: bool = False
    search_node_limit: int | None = Field(default=2_000_000, gt=0)
    search_time_limit: float | None = Field(default=30.0, gt=0)

    # Generator
    max_generated_pieces: int = Field(default=MAX_PIECES, ge=2, le=MAX_PIECES)

    # Output
    svg_size: int = Field(default=400, gt=0)
    log_level: str = "INFO"

    def budget(self) -> SearchBudget:
        """Search budget built from the node and time limits."""
        return SearchBudget(
            max_nodes=self.search_node_limit, time_limit=self.search_time_limit,
        )
