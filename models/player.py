from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole_score import HoleScore
from .tee import Tee


class Player(BaseGolfModel):
    """A golfer taking part in a round, with their course handicap and tee."""
    id: str
    name: str
    handicap: int = Field(..., ge=0, le=54)
    tee: Tee
    scores: List[HoleScore] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_scores(self):
        seen = set()
        for score in self.scores:
            if score.player_id != self.id:
                raise ValueError(
                    f"Score for hole {score.hole_number} belongs to '{score.player_id}', not '{self.id}'"
                )
            if score.hole_number in seen:
                raise ValueError(f"More than one score recorded for hole {score.hole_number}")
            seen.add(score.hole_number)
        return self

    def get_score(self, hole_number: int) -> Optional[HoleScore]:
        """Recorded score for a hole, or None."""
        for score in self.scores:
            if score.hole_number == hole_number:
                return score
        return None

    def record_score(self, score: HoleScore) -> Optional[str]:
        """Create or replace the whole score record for a hole.

        Returns error message if validation fails.
        """
        others = [s for s in self.scores if s.hole_number != score.hole_number]
        new_scores = sorted(others + [score], key=lambda s: s.hole_number)
        return self.update_field('scores', new_scores)

    def with_score(self, score: HoleScore) -> "Player":
        """Copy of this player with the score recorded, leaving self unchanged."""
        others = [s for s in self.scores if s.hole_number != score.hole_number]
        return self.replace(scores=sorted(others + [score], key=lambda s: s.hole_number))
