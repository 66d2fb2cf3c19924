from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

from .hole import Hole
from .tee import Tee


class Course(BaseModel):
    """Read-only reference data: a course's holes and tee options."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    name: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)
    tees: List[Tee] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_unique_holes(self):
        numbers = [h.number for h in self.holes]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique within a course")
        self.holes.sort(key=lambda h: h.number)
        return self

    def get_tee(self, color: str) -> Optional[Tee]:
        """Get a tee by its color."""
        for tee in self.tees:
            if tee.color == color.strip().lower():
                return tee
        return None

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    @property
    def hole_numbers(self) -> List[int]:
        return [h.number for h in self.holes]

    @property
    def par(self) -> Optional[int]:
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Par for holes 1-9."""
        front = [h.par for h in self.holes if 1 <= h.number <= 9]
        return sum(front) if front else None

    @property
    def back_nine_par(self) -> Optional[int]:
        """Par for holes 10-18."""
        back = [h.par for h in self.holes if 10 <= h.number <= 18]
        return sum(back) if back else None
