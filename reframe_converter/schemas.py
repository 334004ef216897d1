from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

# Passed through exactly as REFRAME returned them; booleans and containers are rejected
CoordinateValue = Optional[Union[StrictInt, StrictFloat, StrictStr]]


class Direction(str, Enum):
    LV95_TO_WGS84 = "LV95_TO_WGS84"
    WGS84_TO_LV95 = "WGS84_TO_LV95"

    @property
    def label(self) -> str:
        return {
            Direction.LV95_TO_WGS84: "LV95 to WGS84",
            Direction.WGS84_TO_LV95: "WGS84 to LV95",
        }[self]


class FormState(BaseModel):
    """View state of the transformation form for one page session"""
    direction: Direction = Direction.LV95_TO_WGS84
    easting: str = ""
    northing: str = ""
    transformed_x: CoordinateValue = None
    transformed_y: CoordinateValue = None
    error: Optional[str] = None

class ReframeResult(BaseModel):
    easting: CoordinateValue = None
    northing: CoordinateValue = None

class BatchSummary(BaseModel):
    filename: str
    direction: Direction
    record_count: int
    success_count: int
