from typing import Dict, List, Optional


class ScoringError(Exception):
    """Base for all scoring and settlement errors."""


class InvalidHandicapError(ScoringError, ValueError):
    """Course handicap outside the supported range."""

    def __init__(self, handicap):
        self.handicap = handicap
        super().__init__(f"Handicap {handicap} outside range (0-54)")


class InvalidStrokeIndexError(ScoringError, ValueError):
    """Stroke index missing or outside 1-18 for a hole/tee combination."""

    def __init__(self, stroke_index, hole_number: Optional[int] = None, tee: Optional[str] = None):
        self.stroke_index = stroke_index
        self.hole_number = hole_number
        self.tee = tee
        where = ""
        if hole_number is not None:
            where = f" on hole {hole_number}"
        if tee is not None:
            where += f" for tee '{tee}'"
        if stroke_index is None:
            message = f"No stroke index{where}"
        else:
            message = f"Stroke index {stroke_index}{where} outside range (1-18)"
        super().__init__(message)


class InsufficientPlayersError(ScoringError):
    """Fewer than two players available for a head-to-head computation."""


class IncompleteScoresError(ScoringError):
    """Final settlement requested while scores are still missing."""

    def __init__(self, missing: Dict[str, List[int]]):
        self.missing = missing
        detail = "; ".join(f"{player}: {holes}" for player, holes in missing.items())
        super().__init__(f"Missing scores ({detail})")


class CourseDataError(ScoringError):
    """Course reference data is corrupt. Not recoverable by the engine."""
