from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from betting.exceptions import InvalidStrokeIndexError
from betting.handicap import strokes_received
from models.course import Course
from models.player import Player

logger = logging.getLogger(__name__)


class LedgerEntry(BaseModel):
    """Net scoring for one hole. gross/net are None when the hole is unplayed."""
    model_config = ConfigDict(frozen=True)

    hole_number: int
    par: int
    stroke_index: int
    strokes_received: int
    gross: Optional[int] = None
    net: Optional[int] = None

    @property
    def is_played(self) -> bool:
        return self.gross is not None


class ScoreLedger(BaseModel):
    """A player's per-hole gross and net scores for one round."""
    model_config = ConfigDict(frozen=True)

    player_id: str
    name: str
    handicap: int
    entries: Dict[int, LedgerEntry] = Field(default_factory=dict)
    skipped_holes: List[int] = Field(default_factory=list)

    @classmethod
    def for_player(cls, player: Player, course: Course) -> "ScoreLedger":
        """
        Derive net scores for every course hole from the player's tee.

        A hole whose stroke index cannot be resolved for the player's tee is
        left out of the ledger and listed in skipped_holes.
        """
        entries: Dict[int, LedgerEntry] = {}
        skipped: List[int] = []

        for hole in course.holes:
            stroke_index = hole.stroke_index_for(player.tee)
            try:
                if stroke_index is None:
                    raise InvalidStrokeIndexError(None, hole_number=hole.number, tee=player.tee.color)
                received = strokes_received(player.handicap, stroke_index)
            except InvalidStrokeIndexError as e:
                logger.warning("Skipping hole %s for %s: %s", hole.number, player.name, e)
                skipped.append(hole.number)
                continue

            score = player.get_score(hole.number)
            gross = score.gross_score if score is not None else None
            entries[hole.number] = LedgerEntry(
                hole_number=hole.number,
                par=hole.par,
                stroke_index=stroke_index,
                strokes_received=received,
                gross=gross,
                net=gross - received if gross is not None else None,
            )

        return cls(
            player_id=player.id,
            name=player.name,
            handicap=player.handicap,
            entries=entries,
            skipped_holes=skipped,
        )

    def entry(self, hole_number: int) -> Optional[LedgerEntry]:
        return self.entries.get(hole_number)

    def net(self, hole_number: int) -> Optional[int]:
        """Net score on a hole, None if unplayed or unknown."""
        entry = self.entries.get(hole_number)
        return entry.net if entry else None

    def _played(self, holes: Optional[Iterable[int]] = None) -> List[LedgerEntry]:
        if holes is None:
            selected = self.entries.values()
        else:
            selected = [self.entries[n] for n in holes if n in self.entries]
        return [e for e in selected if e.is_played]

    def gross_total(self, holes: Optional[Iterable[int]] = None) -> int:
        return sum(e.gross for e in self._played(holes))

    def net_total(self, holes: Optional[Iterable[int]] = None) -> int:
        return sum(e.net for e in self._played(holes))

    def par_total(self, holes: Optional[Iterable[int]] = None) -> int:
        """Par of the played holes only."""
        return sum(e.par for e in self._played(holes))

    def holes_played(self, holes: Optional[Iterable[int]] = None) -> int:
        return len(self._played(holes))

    def missing_holes(self, holes: Iterable[int]) -> List[int]:
        """Holes in the selection without a recorded score."""
        return [n for n in holes if n not in self.entries or not self.entries[n].is_played]

    def is_complete(self, holes: Iterable[int]) -> bool:
        return not self.missing_holes(holes)


def build_ledgers(players: Iterable[Player], course: Course) -> List[ScoreLedger]:
    """One ledger per player, in player order."""
    return [ScoreLedger.for_player(player, course) for player in players]
