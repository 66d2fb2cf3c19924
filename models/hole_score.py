from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, TYPE_CHECKING

from .hole import Hole

if TYPE_CHECKING:
    from .player import Player


class HoleScore(BaseModel):
    """A player's recorded gross score on a single hole.

    gross_score None means the hole has not been played yet. Legacy input
    that used 0 for "not played" is normalized to None.
    """
    model_config = ConfigDict(validate_assignment=True)

    player_id: str
    hole_number: int = Field(..., ge=1, le=18)
    gross_score: Optional[int] = Field(None, ge=1, le=20)
    par: Optional[int] = Field(None, ge=3, le=6)
    stroke_index: Optional[int] = Field(None, ge=1, le=18)

    @field_validator('gross_score', mode='before')
    @classmethod
    def zero_means_unplayed(cls, v):
        if v == 0:
            return None
        return v

    @property
    def is_played(self) -> bool:
        return self.gross_score is not None

    def to_par(self) -> Optional[int]:
        """Gross score relative to par (+2, -1, etc.)."""
        if self.gross_score is None or self.par is None:
            return None
        return self.gross_score - self.par

    @classmethod
    def for_hole(cls, player: "Player", hole: Hole, gross_score: Optional[int]) -> "HoleScore":
        """Build a score with par and stroke index taken from the player's tee."""
        return cls(
            player_id=player.id,
            hole_number=hole.number,
            gross_score=gross_score,
            par=hole.par,
            stroke_index=hole.stroke_index_for(player.tee),
        )
