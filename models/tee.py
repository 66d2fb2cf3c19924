from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Any, Dict, Optional


class TeeGender(str, Enum):
    """Who a tee box is rated for."""
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


class Tee(BaseModel):
    """A set of tee markers a player plays from."""
    model_config = ConfigDict(validate_assignment=True)

    color: str  # "negras", "azules", "blancas", "doradas", "plateadas"
    name: Optional[str] = None
    gender: TeeGender = TeeGender.MIXED
    hole_yardages: Dict[int, int] = Field(default_factory=dict)  # {1: 385, 2: 165, ...}

    @field_validator('color')
    @classmethod
    def normalize_color(cls, v):
        v = v.strip().lower()
        if not v:
            raise ValueError("Tee color cannot be empty")
        return v

    @field_validator('hole_yardages')
    @classmethod
    def validate_hole_yardages(cls, v):
        for hole_num, yardage in v.items():
            if not 1 <= hole_num <= 18:
                raise ValueError(f"Hole number {hole_num} must be 1-18")
            if yardage < 0:
                raise ValueError(f"Yardage for hole {hole_num} cannot be negative")
        return v

    def get_total_yardage(self) -> Optional[int]:
        """Total yardage from hole yardages, None when unknown."""
        if not self.hole_yardages:
            return None
        return sum(self.hole_yardages.values())

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Update a field with user correction. Returns error message if validation fails."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']
