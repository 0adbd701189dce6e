"""Game configuration models.

Configuration is validated with pydantic so that a bad player line-up is
rejected before any board is built.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import Player
from .utils import DEFAULT_BOARD_SIZE, DEFAULT_PLAYERS, MAX_PLAYERS, MAX_ROUNDS_DEFAULT


class PlayerConfig(BaseModel):
    """Configuration for a single player."""

    name: str = Field(min_length=1, description="Unique player name")
    triangle: int = Field(ge=0, le=5, description="Starting triangle (0-5)")
    color: str = Field(default="white", description="Display color label")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip surrounding whitespace from names."""
        v = v.strip()
        if not v:
            raise ValueError("name cannot be blank")
        return v

    def to_player(self) -> Player:
        return Player(name=self.name, triangle=self.triangle, color=self.color)


def _default_players() -> list[PlayerConfig]:
    return [
        PlayerConfig(name=name, triangle=triangle, color=color)
        for name, triangle, color in DEFAULT_PLAYERS
    ]


class GameConfig(BaseModel):
    """Configuration for a whole game."""

    size: int = Field(default=DEFAULT_BOARD_SIZE, ge=1, description="Board size")
    max_rounds: int = Field(default=MAX_ROUNDS_DEFAULT, ge=1, description="Round limit")
    players: list[PlayerConfig] = Field(default_factory=_default_players)

    @model_validator(mode="after")
    def check_players(self) -> "GameConfig":
        """Reject line-ups the board cannot hold."""
        if not self.players:
            raise ValueError("At least one player is required")
        if len(self.players) > MAX_PLAYERS:
            raise ValueError(
                f"Too many players: {len(self.players)} (at most {MAX_PLAYERS})"
            )
        names = [p.name for p in self.players]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate player names: {names}")
        triangles = [p.triangle for p in self.players]
        if len(set(triangles)) != len(triangles):
            raise ValueError(f"Players share a starting triangle: {triangles}")
        return self


def load_config(filepath: str) -> GameConfig:
    """Load a game configuration from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Validated GameConfig

    Raises:
        FileNotFoundError: If the file doesn't exist
        pydantic.ValidationError: If the content is invalid
    """
    return GameConfig.model_validate_json(Path(filepath).read_text())
