from datetime import datetime
from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .betting_options import BettingOptions, GameFormat, GameFormats
from .course import Course
from .player import Player


class Round(BaseGolfModel):
    """A round being played by a group, with its wagers."""
    id: Optional[str] = None
    course: Course
    players: List[Player] = Field(default_factory=list)
    betting_options: BettingOptions = Field(default_factory=BettingOptions)
    game_formats: GameFormats = Field(default_factory=GameFormats)
    current_hole: int = Field(1, ge=1, le=18)
    date: Optional[datetime] = None

    @model_validator(mode='after')
    def validate_round(self):
        ids = [p.id for p in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("Player ids must be unique within a round")
        names = [p.name for p in self.players]
        if len(names) != len(set(names)):
            raise ValueError("Player names must be unique within a round")

        options = self.betting_options
        for segment in options.segments.active():
            for game_format in self.game_formats.active():
                if game_format is GameFormat.STROKE_PLAY:
                    stakes = options.stroke_play_stakes
                else:
                    stakes = options.match_play_stakes
                if segment not in stakes:
                    raise ValueError(
                        f"Segment {segment.value} is active but has no {game_format.value} stake"
                    )
        return self

    @property
    def total_holes(self) -> int:
        return len(self.course.holes)

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def is_complete(self) -> bool:
        """Every player has a score on every hole of the course."""
        if not self.players or not self.course.holes:
            return False
        for player in self.players:
            for hole in self.course.holes:
                score = player.get_score(hole.number)
                if score is None or not score.is_played:
                    return False
        return True
