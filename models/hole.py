from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional, Union

from .tee import Tee


class Hole(BaseModel):
    """A hole on a course with its par and per-tee stroke index and distance."""
    model_config = ConfigDict(validate_assignment=True)

    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    stroke_indexes: Dict[str, int] = Field(default_factory=dict)  # {"blancas": 7, "rojas": 9}
    distances: Dict[str, int] = Field(default_factory=dict)

    @field_validator('stroke_indexes', 'distances', mode='before')
    @classmethod
    def normalize_tee_keys(cls, v):
        if isinstance(v, dict):
            return {str(k).strip().lower(): value for k, value in v.items()}
        return v

    @field_validator('stroke_indexes')
    @classmethod
    def validate_stroke_indexes(cls, v):
        for tee_color, index in v.items():
            if not 1 <= index <= 18:
                raise ValueError(f"Stroke index {index} for '{tee_color}' must be 1-18")
        return v

    def stroke_index_for(self, tee: Union[Tee, str]) -> Optional[int]:
        """Stroke index for the given tee. No fallback to another tee."""
        color = tee.color if isinstance(tee, Tee) else tee.strip().lower()
        return self.stroke_indexes.get(color)

    def distance_for(self, tee: Union[Tee, str]) -> Optional[int]:
        color = tee.color if isinstance(tee, Tee) else tee.strip().lower()
        return self.distances.get(color)
